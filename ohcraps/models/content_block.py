"""
Content blocks: the typed body of a strategy document.

A parsed document body is an ordered list of blocks. Each block is one
step, bullet, heading or paragraph. Blocks are kept as a proper variant type
throughout the package and serialized to marker-prefixed strings only at
interop boundaries (the ``Strategy.steps`` view and the share formatter).

Tagged string format:
    §STEP§Place the 6 and 8
    §BULLET§Press after one hit
    §H4§After the point
    §PARA§Free-form prose
"""

from dataclasses import dataclass
from enum import Enum


class BlockKind(str, Enum):
    """Kind of a content block."""

    STEP = "step"
    BULLET = "bullet"
    HEADING = "heading"
    PARAGRAPH = "paragraph"


BLOCK_MARKERS: dict[BlockKind, str] = {
    BlockKind.STEP: "§STEP§",
    BlockKind.BULLET: "§BULLET§",
    BlockKind.HEADING: "§H4§",
    BlockKind.PARAGRAPH: "§PARA§",
}


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """
    One typed unit of strategy content.

    Attributes:
        kind: Block kind
        text: Plain text (markup already stripped)
    """

    kind: BlockKind
    text: str

    @classmethod
    def step(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.STEP, text)

    @classmethod
    def bullet(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.BULLET, text)

    @classmethod
    def heading(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.HEADING, text)

    @classmethod
    def paragraph(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.PARAGRAPH, text)

    def to_tagged(self) -> str:
        """Serialize to the marker-prefixed string form."""
        return BLOCK_MARKERS[self.kind] + self.text

    @classmethod
    def from_tagged(cls, value: str) -> "ContentBlock | None":
        """
        Parse a marker-prefixed string.

        Returns:
            The block, or None if the value carries no known marker or the
            text after the marker is blank.
        """
        trimmed = value.strip()
        for kind, marker in BLOCK_MARKERS.items():
            if trimmed.startswith(marker):
                text = trimmed.replace(marker, "").strip()
                return cls(kind, text) if text else None
        return None


def has_block_marker(value: str) -> bool:
    """True if the value starts with any block marker (after trimming)."""
    trimmed = value.strip()
    return any(trimmed.startswith(marker) for marker in BLOCK_MARKERS.values())
