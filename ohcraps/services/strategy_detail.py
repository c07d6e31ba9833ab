"""Numbered display lines for a strategy's detail view."""

from dataclasses import dataclass

from ohcraps.models.content_block import BlockKind
from ohcraps.models.strategy import Strategy


@dataclass(frozen=True, slots=True)
class DetailLine:
    """
    One rendered body line.

    Attributes:
        kind: Block kind the line came from
        text: Line text
        number: Step number (steps only)
    """

    kind: BlockKind
    text: str
    number: int | None = None


def render_detail_lines(strategy: Strategy) -> list[DetailLine]:
    """
    Number the strategy's steps for display.

    Step numbers start at 1 and restart after each heading. Bullets and
    paragraphs do not affect numbering.
    """
    lines: list[DetailLine] = []
    next_number = 1

    for block in strategy.blocks:
        text = block.text.strip()
        if not text:
            continue

        if block.kind is BlockKind.HEADING:
            lines.append(DetailLine(block.kind, text))
            next_number = 1
        elif block.kind is BlockKind.STEP:
            lines.append(DetailLine(block.kind, text, number=next_number))
            next_number += 1
        else:
            lines.append(DetailLine(block.kind, text))

    return lines
