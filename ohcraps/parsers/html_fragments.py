"""
Low-level helpers for the strategy document dialect.

Strategy documents are HTML fragments, not full HTML pages, and only a
handful of tags matter. These helpers locate elements by plain
case-insensitive substring search and never build a DOM. Unterminated
elements end the search silently.

Masking replaces a span with spaces of the same length. Every later
search on the masked text therefore reports offsets that are still valid
in the original text.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


@dataclass(frozen=True, slots=True)
class Element:
    """
    Offsets of one located element.

    Attributes:
        start: Index of the opening '<'
        content_start: Index just past the opening tag's '>'
        content_end: Index of the closing tag's '<'
        end: Index just past the closing tag
    """

    start: int
    content_start: int
    content_end: int
    end: int


@lru_cache(maxsize=64)
def _needle(text: str) -> re.Pattern[str]:
    return re.compile(re.escape(text), re.IGNORECASE)


def find_ci(text: str, needle: str, start: int = 0, end: int | None = None) -> int:
    """
    Case-insensitive find.

    Returns:
        Index of the first match within text[start:end], or -1.
    """
    match = _needle(needle).search(text, start, len(text) if end is None else end)
    return match.start() if match else -1


def strip_html(fragment: str) -> str:
    """
    Remove markup from a fragment.

    Drops everything from each '<' to the next '>', decodes &nbsp; and
    &amp;, and trims surrounding whitespace. Unbalanced brackets are not
    an error: a stray '<' hides the rest of the fragment.
    """
    chars: list[str] = []
    inside = False

    for ch in fragment:
        if ch == "<":
            inside = True
            continue
        if ch == ">":
            inside = False
            continue
        if not inside:
            chars.append(ch)

    text = "".join(chars)
    for entity, replacement in ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return text.strip()


def mask_span(text: str, start: int, end: int) -> str:
    """Replace text[start:end] with spaces, preserving length."""
    return text[:start] + " " * (end - start) + text[end:]


def iter_elements(
    text: str,
    tag: str,
    start: int = 0,
    end: int | None = None,
) -> Iterator[Element]:
    """
    Yield successive <tag ...>...</tag> elements in text[start:end].

    The closing tag is the first one after the opening tag, so nested
    elements of the same tag are not supported. Iteration stops at the
    first element that lacks a '>' or a closing tag.
    """
    limit = len(text) if end is None else end
    opener = f"<{tag}"
    closer = f"</{tag}>"
    position = start

    while True:
        open_at = find_ci(text, opener, position, limit)
        if open_at < 0:
            return

        bracket = text.find(">", open_at, limit)
        if bracket < 0:
            return
        content_start = bracket + 1

        close_at = find_ci(text, closer, content_start, limit)
        if close_at < 0:
            return

        element = Element(
            start=open_at,
            content_start=content_start,
            content_end=close_at,
            end=close_at + len(closer),
        )
        yield element
        position = element.end


def first_element_text(text: str, tag: str) -> str:
    """Stripped text of the first <tag> element, or empty string."""
    for element in iter_elements(text, tag):
        return strip_html(text[element.content_start : element.content_end])
    return ""


def mask_tables(text: str) -> str:
    """
    Mask every <table ...>...</table> span.

    Tables are matched from the opening "<table" to the next
    "</table>"; nested tables are not supported.
    """
    work = text
    position = 0

    while True:
        open_at = find_ci(work, "<table", position)
        if open_at < 0:
            return work

        close_at = find_ci(work, "</table>", open_at)
        if close_at < 0:
            return work

        end = close_at + len("</table>")
        work = mask_span(work, open_at, end)
        position = end
