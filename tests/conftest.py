from collections.abc import Callable
from pathlib import Path
from uuid import uuid4

import pytest

from ohcraps.models.content_block import ContentBlock
from ohcraps.models.strategy import Strategy
from ohcraps.services.strategy_catalog import DirectoryDocumentStore, load_all_strategies

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def iron_cross_document() -> str:
    """Sample strategy document with metadata, a table and nested bullets."""
    return (FIXTURES_DIR / "iron_cross.txt").read_text(encoding="utf-8")


@pytest.fixture
def fixture_catalog() -> tuple[Strategy, ...]:
    """All fixture documents, loaded through the catalog service."""
    return tuple(load_all_strategies(DirectoryDocumentStore(FIXTURES_DIR)))


@pytest.fixture
def make_strategy() -> Callable[..., Strategy]:
    """Factory for strategies with explicit ranges."""

    def _make(
        name: str,
        buy_in: tuple[int, int] = (0, 0),
        table_min: tuple[int, int] = (0, 0),
        blocks: tuple[ContentBlock, ...] = (),
        notes: str = "",
        credit: str = "",
    ) -> Strategy:
        return Strategy(
            id=uuid4(),
            name=name,
            buy_in_text=f"${buy_in[0]}-${buy_in[1]}",
            table_min_text=f"${table_min[0]}-${table_min[1]}",
            buy_in_min=buy_in[0],
            buy_in_max=buy_in[1],
            table_min_min=table_min[0],
            table_min_max=table_min[1],
            notes=notes,
            credit=credit,
            blocks=blocks,
        )

    return _make
