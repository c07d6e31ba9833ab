"""
Alphabetic sectioning for the strategy list.

Names are normalized before sectioning and sorting: surrounding
whitespace, leading "$" signs and one leading "The " are removed. A
normalized name starting with a digit (or with anything that is not a
letter) lands in the "#" section; otherwise it lands under its
uppercased first letter.

Within a section, names with a numeric prefix sort first, by number and
then by name, so "2nd Base" precedes "10X Odds". Other names sort
case-insensitively.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from ohcraps.models.filters import SectionKey
from ohcraps.models.strategy import Strategy
from ohcraps.parsers.ranges import bounded_int

LEADING_ARTICLE = "the "
NUMERIC_PREFIX_PATTERN = re.compile(r"[0-9]+")


@dataclass
class StrategySection:
    """One display section and its ordered strategies."""

    key: SectionKey
    strategies: list[Strategy] = field(default_factory=list)


def normalized_name(name: str) -> str:
    name = name.strip().lstrip("$")
    if name[: len(LEADING_ARTICLE)].casefold() == LEADING_ARTICLE:
        name = name[len(LEADING_ARTICLE) :]
    return name


def numeric_prefix(name: str) -> int | None:
    """Leading decimal digits as an integer, or None (also when too large)."""
    match = NUMERIC_PREFIX_PATTERN.match(name)
    return bounded_int(match.group()) if match else None


def section_key_for(name: str) -> SectionKey:
    """Section for a strategy name (normalized internally)."""
    normalized = normalized_name(name)
    if not normalized:
        return SectionKey.number()

    first = normalized[0]
    if first.isalpha():
        return SectionKey.for_letter(first)
    return SectionKey.number()


def sort_key(name: str) -> tuple[int, int, str]:
    """
    Ordering key within a section.

    Numeric-prefixed names sort before the rest; ties on the number fall
    back to a case-insensitive name comparison.
    """
    normalized = normalized_name(name)
    number = numeric_prefix(normalized)
    if number is None:
        return (1, 0, normalized.casefold())
    return (0, number, normalized.casefold())


def section_strategies(strategies: Iterable[Strategy]) -> list[StrategySection]:
    """
    Group strategies into ordered, non-empty sections.

    Returns:
        Sections ordered "#" first, then A to Z, each sorted by sort_key.
    """
    grouped: dict[SectionKey, list[Strategy]] = {}
    for strategy in strategies:
        grouped.setdefault(section_key_for(strategy.name), []).append(strategy)

    return [
        StrategySection(key=key, strategies=sorted(grouped[key], key=lambda s: sort_key(s.name)))
        for key in sorted(grouped)
    ]
