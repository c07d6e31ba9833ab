from dataclasses import dataclass
from uuid import UUID

from ohcraps.models.content_block import ContentBlock


@dataclass(frozen=True, slots=True)
class Strategy:
    """
    A craps betting strategy parsed from a strategy document.

    Attributes:
        id: Opaque unique identifier
        name: Strategy name from the document's <h3> (empty if absent)
        buy_in_text: Buy-in exactly as written (e.g., "$100-$300", "Any")
        table_min_text: Table minimum exactly as written (e.g., "$5")
        buy_in_min: Parsed lower buy-in bound (inclusive)
        buy_in_max: Parsed upper buy-in bound (inclusive)
        table_min_min: Parsed lower table-minimum bound (inclusive)
        table_min_max: Parsed upper table-minimum bound (inclusive)
        notes: Notes paragraph text, empty if absent
        credit: Credit paragraph text, empty if absent
        blocks: Body content in document order
    """

    id: UUID
    name: str
    buy_in_text: str
    table_min_text: str
    buy_in_min: int
    buy_in_max: int
    table_min_min: int
    table_min_max: int
    notes: str = ""
    credit: str = ""
    blocks: tuple[ContentBlock, ...] = ()

    @property
    def steps(self) -> list[str]:
        """Body content as marker-prefixed tagged strings."""
        return [block.to_tagged() for block in self.blocks]
