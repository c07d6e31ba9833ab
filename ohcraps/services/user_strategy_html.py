"""
Conversion of user strategies to strategy documents.

A user strategy is rendered in the same dialect as the bundled
documents, one <li> step per non-blank line, and parsed by the regular
document parser. User records and bundled strategies therefore share a
single detail and filtering path.
"""

from ohcraps.models.strategy import Strategy
from ohcraps.models.user_strategy import UserStrategy
from ohcraps.parsers.strategy_document import parse_strategy_document


def escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def make_strategy_html(
    name: str,
    buy_in_text: str,
    table_min_text: str,
    notes: str,
    credit: str,
    steps: list[str],
) -> str:
    """Render fields as a strategy document."""
    parts = [
        f"<h3>{escape_html(name)}</h3>",
        f"<p>Buy-in: {escape_html(buy_in_text)}</p>",
        f"<p>Table Minimum: {escape_html(table_min_text)}</p>",
    ]

    if notes:
        parts.append(f"<p>Notes: {escape_html(notes)}</p>")

    if credit:
        parts.append(f"<p>Credit: {escape_html(credit)}</p>")

    parts.append("<ol>")
    for step in steps:
        trimmed = step.strip()
        if trimmed:
            parts.append(f"<li>{escape_html(trimmed)}</li>")
    parts.append("</ol>")

    return "\n".join(parts) + "\n"


def user_strategy_html(user_strategy: UserStrategy) -> str:
    return make_strategy_html(
        name=user_strategy.name,
        buy_in_text=user_strategy.buy_in,
        table_min_text=user_strategy.table_minimum,
        notes=user_strategy.notes,
        credit=user_strategy.credit,
        steps=user_strategy.steps.splitlines(),
    )


def user_strategy_to_strategy(user_strategy: UserStrategy) -> Strategy:
    """Parse a user strategy into a Strategy with the same id."""
    return parse_strategy_document(user_strategy_html(user_strategy), strategy_id=user_strategy.id)
