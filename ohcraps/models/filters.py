"""
Filter buckets and section keys for the strategy browser.

Labels are user-facing and must be displayed verbatim.
"""

from dataclasses import dataclass
from enum import Enum

from ohcraps.config import MAX_AMOUNT


class TableMinFilter(str, Enum):
    """Table-minimum bucket."""

    FIVE = "five"
    TEN = "ten"
    FIFTEEN_PLUS = "fifteen_plus"

    @property
    def label(self) -> str:
        return _TABLE_MIN_LABELS[self]


_TABLE_MIN_LABELS = {
    TableMinFilter.FIVE: "$5",
    TableMinFilter.TEN: "$10",
    TableMinFilter.FIFTEEN_PLUS: "$15+",
}


class BuyInFilter(str, Enum):
    """Buy-in bucket. Each bucket is a fixed inclusive range."""

    UNDER_300 = "under_300"
    FROM_300 = "from_300"
    FROM_600 = "from_600"
    FROM_900 = "from_900"

    @property
    def bounds(self) -> tuple[int, int]:
        return _BUY_IN_BOUNDS[self]

    @property
    def label(self) -> str:
        low, high = self.bounds
        if high == MAX_AMOUNT:
            return f"${low}+"
        return f"${low} to ${high}"


_BUY_IN_BOUNDS = {
    BuyInFilter.UNDER_300: (0, 299),
    BuyInFilter.FROM_300: (300, 599),
    BuyInFilter.FROM_600: (600, 899),
    BuyInFilter.FROM_900: (900, MAX_AMOUNT),
}


@dataclass(frozen=True, order=True, slots=True)
class SectionKey:
    """
    Display section for the strategy list.

    The number section ("#") orders before every letter section;
    letter sections order A to Z.
    """

    rank: int
    letter: str = ""

    @classmethod
    def number(cls) -> "SectionKey":
        return cls(rank=0)

    @classmethod
    def for_letter(cls, letter: str) -> "SectionKey":
        return cls(rank=1, letter=letter.upper())

    @property
    def is_number(self) -> bool:
        return self.rank == 0

    @property
    def display(self) -> str:
        return "#" if self.is_number else self.letter
