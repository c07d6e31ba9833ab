from ohcraps.parsers.html_fragments import mask_span, strip_html
from ohcraps.parsers.ranges import parse_range
from ohcraps.parsers.strategy_document import (
    extract_content_blocks,
    extract_metadata_value,
    parse_strategy_document,
)

__all__ = [
    "extract_content_blocks",
    "extract_metadata_value",
    "mask_span",
    "parse_range",
    "parse_strategy_document",
    "strip_html",
]
