"""
Parser for strategy documents.

A strategy document is an HTML fragment in a small dialect:

    <h3>Iron Cross</h3>
    <p>Buy-in: $100-$300</p>
    <p>Table Minimum: $10</p>
    <p>Notes: Works best on a cold table.</p>
    <p>Credit: Anonymous</p>
    <table>...</table>                      (ignored)
    <h4>On the come-out</h4>
    <ol>
      <li>Bet the Pass Line.
        <ul><li>Take odds when you can.</li></ul>
      </li>
    </ol>
    <p>Any other paragraph is body prose.</p>

Body extraction works on a masked working copy of the document: tables,
metadata paragraphs and bullet lists are overwritten with spaces as they
are consumed. Because masking preserves length, every block is recorded
at its offset in the original text, and sorting by offset restores
reading order after the separate extraction passes.
"""

from uuid import UUID, uuid4

from ohcraps.models.content_block import ContentBlock
from ohcraps.models.strategy import Strategy
from ohcraps.parsers.html_fragments import (
    first_element_text,
    iter_elements,
    mask_span,
    mask_tables,
    strip_html,
)
from ohcraps.parsers.ranges import parse_range

UNKNOWN_VALUE = "Unknown"

BUY_IN_PREFIXES = ("buy-in:", "buy in:")
TABLE_MIN_PREFIXES = ("table minimum:",)
NOTES_PREFIXES = ("notes:", "note:")
CREDIT_PREFIXES = ("credit:", "credits:")

METADATA_PREFIXES = BUY_IN_PREFIXES + TABLE_MIN_PREFIXES + NOTES_PREFIXES + CREDIT_PREFIXES


def extract_metadata_value(html: str, prefixes: tuple[str, ...], default: str = "") -> str:
    """
    Find the first paragraph starting with one of the prefixes.

    Matching is case-insensitive on the stripped paragraph text.

    Returns:
        The paragraph text after the prefix (trimmed), or default.
    """
    for element in iter_elements(html, "p"):
        text = strip_html(html[element.content_start : element.content_end])
        lower = text.lower()
        for prefix in prefixes:
            if lower.startswith(prefix):
                return text[len(prefix) :].strip()
    return default


def _is_metadata(text: str) -> bool:
    lower = text.lower()
    return any(lower.startswith(prefix) for prefix in METADATA_PREFIXES)


def mask_metadata_paragraphs(work: str, original: str) -> str:
    """Mask every paragraph whose text is a metadata field."""
    for element in list(iter_elements(work, "p")):
        text = strip_html(original[element.content_start : element.content_end])
        if _is_metadata(text):
            work = mask_span(work, element.start, element.end)
    return work


def extract_content_blocks(html: str) -> list[ContentBlock]:
    """
    Extract body blocks in document order.

    Passes, in order:
        1. Mask tables
        2. Mask metadata paragraphs
        3. Bullets from <ul> (positioned at their <ul>), then mask the <ul>
        4. Steps from <ol>/<li> (positioned at their <li>)
        5. Headings from <h4>
        6. Remaining paragraphs from <p>

    Blocks whose text is empty are dropped.
    """
    original = html
    work = mask_tables(html)
    work = mask_metadata_paragraphs(work, original)

    positioned: list[tuple[int, ContentBlock]] = []

    # Bullets: text comes from the original, then the whole list is masked
    # so nested bullets don't leak into the enclosing step.
    for ul in list(iter_elements(work, "ul")):
        for li in iter_elements(original, "li", ul.content_start, ul.content_end):
            text = strip_html(original[li.content_start : li.content_end])
            if text:
                positioned.append((ul.start, ContentBlock.bullet(text)))
        work = mask_span(work, ul.start, ul.end)

    # Steps: read from the masked copy so nested lists are already gone
    for ol in iter_elements(work, "ol"):
        for li in iter_elements(work, "li", ol.content_start, ol.content_end):
            text = strip_html(work[li.content_start : li.content_end])
            if text:
                positioned.append((li.start, ContentBlock.step(text)))

    for h4 in iter_elements(work, "h4"):
        text = strip_html(original[h4.content_start : h4.content_end])
        if text:
            positioned.append((h4.start, ContentBlock.heading(text)))

    for p in iter_elements(work, "p"):
        text = strip_html(original[p.content_start : p.content_end])
        if text:
            positioned.append((p.start, ContentBlock.paragraph(text)))

    positioned.sort(key=lambda item: item[0])
    return [block for _, block in positioned]


def parse_strategy_document(html: str, strategy_id: UUID | None = None) -> Strategy:
    """
    Parse a strategy document into a Strategy.

    Missing sections are tolerated: no <h3> gives an empty name, a missing
    buy-in or table minimum reads "Unknown", missing notes or credit read
    as empty strings.

    Args:
        html: Raw document text
        strategy_id: Identifier to assign. A random one is used if omitted.

    Returns:
        Parsed Strategy. Never raises.
    """
    buy_in_text = extract_metadata_value(html, BUY_IN_PREFIXES, UNKNOWN_VALUE)
    table_min_text = extract_metadata_value(html, TABLE_MIN_PREFIXES, UNKNOWN_VALUE)
    buy_in_min, buy_in_max = parse_range(buy_in_text)
    table_min_min, table_min_max = parse_range(table_min_text)

    return Strategy(
        id=strategy_id if strategy_id is not None else uuid4(),
        name=first_element_text(html, "h3"),
        buy_in_text=buy_in_text,
        table_min_text=table_min_text,
        buy_in_min=buy_in_min,
        buy_in_max=buy_in_max,
        table_min_min=table_min_min,
        table_min_max=table_min_max,
        notes=extract_metadata_value(html, NOTES_PREFIXES),
        credit=extract_metadata_value(html, CREDIT_PREFIXES),
        blocks=tuple(extract_content_blocks(html)),
    )
