"""
Strategy browser filtering.

Search and bucket filters narrow the catalog; sectioning groups and
orders the result for display.
"""

from collections.abc import Iterable

from ohcraps.filtering.sections import (
    StrategySection,
    normalized_name,
    numeric_prefix,
    section_key_for,
    section_strategies,
    sort_key,
)
from ohcraps.filtering.strategy_filter import (
    filter_strategies,
    matches_buy_in,
    matches_search,
    matches_table_min,
)
from ohcraps.models.filters import BuyInFilter, TableMinFilter
from ohcraps.models.strategy import Strategy


def browse_strategies(
    catalog: Iterable[Strategy],
    search: str = "",
    table_min: TableMinFilter | None = None,
    buy_in: BuyInFilter | None = None,
) -> list[StrategySection]:
    """Filter the catalog and section the result for display."""
    return section_strategies(filter_strategies(catalog, search, table_min, buy_in))


__all__ = [
    "StrategySection",
    "browse_strategies",
    "filter_strategies",
    "matches_buy_in",
    "matches_search",
    "matches_table_min",
    "normalized_name",
    "numeric_prefix",
    "section_key_for",
    "section_strategies",
    "sort_key",
]
