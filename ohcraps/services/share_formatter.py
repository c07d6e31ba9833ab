"""
Share Text Formatter.

Renders a strategy as plain text for email bodies and shared files:

    Strategy Name:
    Iron Cross

    Buy-in:
    $100-$300

    Table Minimum:
    $10

    Steps:
    1. Bet the Field.
    2. Place the 5, 6 and 8.
    - Press after a hit

    Notes:
    ...

Notes and Credit are omitted when blank.

Parsed strategies provide tagged block strings; user strategies provide
free text typed by the user. Both are reduced to the same token stream,
so the output style is identical.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ohcraps.models.content_block import BlockKind, ContentBlock, has_block_marker
from ohcraps.models.strategy import Strategy
from ohcraps.models.user_strategy import UserStrategy

# "1. text" or "1) text"
ORDERED_LINE_PATTERN = re.compile(r"^\d+[\.\)]\s+(.+)$")

BULLET_MARKERS = ("- ", "* ", "• ")


class TokenKind(Enum):
    ORDERED = "ordered"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"
    PARAGRAPH_BREAK = "paragraph_break"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str = ""


PARAGRAPH_BREAK = Token(TokenKind.PARAGRAPH_BREAK)

_BLOCK_TOKEN_KINDS = {
    BlockKind.STEP: TokenKind.ORDERED,
    BlockKind.BULLET: TokenKind.BULLET,
    BlockKind.HEADING: TokenKind.PARAGRAPH,
    BlockKind.PARAGRAPH: TokenKind.PARAGRAPH,
}


def tokens_from_tagged(steps: Iterable[str]) -> list[Token]:
    """Tokenize tagged block strings."""
    tokens: list[Token] = []

    for raw in steps:
        trimmed = raw.strip()
        if not trimmed:
            tokens.append(PARAGRAPH_BREAK)
            continue

        block = ContentBlock.from_tagged(trimmed)
        if block is not None:
            tokens.append(Token(_BLOCK_TOKEN_KINDS[block.kind], block.text))
        elif not has_block_marker(trimmed):
            tokens.append(Token(TokenKind.PARAGRAPH, trimmed))
        # A marker with no text carries nothing to render

    return tokens


def _ordered_line_text(line: str) -> str | None:
    match = ORDERED_LINE_PATTERN.match(line)
    if not match:
        return None
    return match.group(1).strip() or None


def _bullet_line_text(line: str) -> str | None:
    for marker in BULLET_MARKERS:
        if line.startswith(marker):
            return line[len(marker) :].strip() or None
    return None


def tokens_from_free_text(steps: str) -> list[Token]:
    """Tokenize user-typed steps, one line at a time."""
    tokens: list[Token] = []

    for raw in steps.splitlines():
        trimmed = raw.strip()
        if not trimmed:
            tokens.append(PARAGRAPH_BREAK)
            continue

        ordered = _ordered_line_text(trimmed)
        if ordered is not None:
            tokens.append(Token(TokenKind.ORDERED, ordered))
            continue

        bullet = _bullet_line_text(trimmed)
        if bullet is not None:
            tokens.append(Token(TokenKind.BULLET, bullet))
            continue

        tokens.append(Token(TokenKind.PARAGRAPH, trimmed))

    return tokens


def _append_blank_line(lines: list[str]) -> None:
    if lines and lines[-1]:
        lines.append("")


def render_steps(tokens: Iterable[Token]) -> str:
    """
    Render tokens as the Steps section body.

    Ordered items are numbered from 1; numbering restarts after every
    paragraph or paragraph break, never after a bullet.
    """
    lines: list[str] = []
    number = 0

    for token in tokens:
        if token.kind is TokenKind.PARAGRAPH_BREAK:
            number = 0
            _append_blank_line(lines)
        elif token.kind is TokenKind.PARAGRAPH:
            number = 0
            _append_blank_line(lines)
            lines.append(token.text)
            lines.append("")
        elif token.kind is TokenKind.ORDERED:
            number += 1
            lines.append(f"{number}. {token.text}")
        else:
            lines.append(f"- {token.text}")

    while lines and lines[-1] == "":
        lines.pop()

    return "\n".join(lines)


def build_share_text(
    name: str,
    buy_in: str,
    table_minimum: str,
    steps_text: str,
    notes: str,
    credit: str,
) -> str:
    """Assemble the labeled sections."""
    sections = [
        f"Strategy Name:\n{name}",
        f"Buy-in:\n{buy_in}",
        f"Table Minimum:\n{table_minimum}",
        f"Steps:\n{steps_text}",
    ]

    if notes.strip():
        sections.append(f"Notes:\n{notes}")

    if credit.strip():
        sections.append(f"Credit:\n{credit}")

    return "\n\n".join(sections)


def share_text(strategy: Strategy | UserStrategy) -> str:
    """
    Format a strategy as plain share text.

    Args:
        strategy: A parsed Strategy or a user-authored UserStrategy

    Returns:
        Export text. Deterministic for a given input.
    """
    if isinstance(strategy, UserStrategy):
        return build_share_text(
            name=strategy.name,
            buy_in=strategy.buy_in,
            table_minimum=strategy.table_minimum,
            steps_text=render_steps(tokens_from_free_text(strategy.steps)),
            notes=strategy.notes,
            credit=strategy.credit,
        )

    return build_share_text(
        name=strategy.name,
        buy_in=strategy.buy_in_text,
        table_minimum=strategy.table_min_text,
        steps_text=render_steps(tokens_from_tagged(strategy.steps)),
        notes=strategy.notes,
        credit=strategy.credit,
    )
