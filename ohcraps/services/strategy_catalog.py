"""
Strategy catalog service.

Loads and caches the bundled strategy documents.
"""

import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Protocol
from uuid import NAMESPACE_URL, UUID, uuid5

from ohcraps.config import settings
from ohcraps.models.strategy import Strategy
from ohcraps.parsers.strategy_document import parse_strategy_document

logger = logging.getLogger(__name__)

# Namespace for document-derived strategy ids
STRATEGY_NAMESPACE = uuid5(NAMESPACE_URL, "https://ohcraps.app/strategies")


class DocumentStore(Protocol):
    """Read-only source of strategy documents."""

    def list_documents(self) -> Iterable[str]:
        """Names of all available documents."""
        ...

    def read_document(self, name: str) -> str:
        """
        Raw text of one document.

        Raises:
            OSError: If the document cannot be read
        """
        ...


class DirectoryDocumentStore:
    """Documents stored as files with a common suffix in one directory."""

    def __init__(self, directory: Path, suffix: str = ".txt") -> None:
        self.directory = directory
        self.suffix = suffix

    def list_documents(self) -> list[str]:
        if not self.directory.is_dir():
            logger.warning("Strategy directory not found: %s", self.directory)
            return []
        try:
            return sorted(
                path.name
                for path in self.directory.iterdir()
                if path.is_file() and path.suffix == self.suffix
            )
        except OSError as e:
            logger.warning("Could not list strategy directory %s: %s", self.directory, e)
            return []

    def read_document(self, name: str) -> str:
        return (self.directory / name).read_text(encoding="utf-8")


def strategy_id_for(document_name: str) -> UUID:
    """Stable id for a bundled document."""
    return uuid5(STRATEGY_NAMESPACE, document_name)


def load_strategy_document(store: DocumentStore, name: str) -> Strategy | None:
    """
    Load and parse one document.

    Returns:
        Parsed Strategy, or None if the document could not be read.
    """
    try:
        raw = store.read_document(name)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping unreadable strategy document %s: %s", name, e)
        return None

    return parse_strategy_document(raw, strategy_id=strategy_id_for(name))


def load_all_strategies(store: DocumentStore) -> list[Strategy]:
    """
    Load every document in the store.

    Unreadable documents are skipped. Documents that parse to a nearly
    empty strategy are kept.

    Returns:
        Strategies sorted case-insensitively by name.
    """
    strategies: list[Strategy] = []

    for name in store.list_documents():
        strategy = load_strategy_document(store, name)
        if strategy is not None:
            strategies.append(strategy)

    logger.info("Loaded %d strategies", len(strategies))
    return sorted(strategies, key=lambda s: s.name.casefold())


@lru_cache(maxsize=1)
def get_strategy_catalog() -> tuple[Strategy, ...]:
    """
    Get cached bundled catalog.

    Returns:
        All bundled strategies, sorted by name.
        Cached after first load.
    """
    store = DirectoryDocumentStore(settings.strategies_dir, settings.strategy_document_suffix)
    return tuple(load_all_strategies(store))


def find_strategy(catalog: Iterable[Strategy], strategy_id: UUID) -> Strategy | None:
    """Look up a strategy by id."""
    for strategy in catalog:
        if strategy.id == strategy_id:
            return strategy
    return None
