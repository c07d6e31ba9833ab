"""
User strategy persistence.

User strategies live in a key-value backend under one key, encoded as a
JSON array. The store keeps the decoded list in memory and writes the
whole list back synchronously after every mutation.

The store is an explicit object: callers construct it with a backend and
call load() once. The API obtains its instance through
get_user_strategy_store(), which tests override.
"""

import json
import logging
import os
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from ohcraps.config import settings
from ohcraps.models.user_strategy import UserStrategy

logger = logging.getLogger(__name__)

STORAGE_KEY = "userStrategies"

_strategy_list = TypeAdapter(list[UserStrategy])


class UserStrategyNotFoundError(KeyError):
    """Raised when no user strategy has the requested id."""

    def __init__(self, strategy_id: UUID) -> None:
        self.strategy_id = strategy_id
        super().__init__(str(strategy_id))


class KeyValueStore(Protocol):
    """String key-value persistence."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Process-local backend."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileKeyValueStore:
    """
    Backend holding every key in one JSON object on disk.

    Writes go to a temporary file that replaces the target, so a failed
    write never leaves a truncated file behind.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise


class UserStrategyStore:
    """User-authored strategies, persisted after every change."""

    def __init__(self, backend: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._backend = backend
        self._key = key
        self._strategies: list[UserStrategy] = []

    @property
    def strategies(self) -> tuple[UserStrategy, ...]:
        """All strategies in insertion order."""
        return tuple(self._strategies)

    def load(self) -> None:
        """
        Replace in-memory state with the persisted list.

        Missing data gives an empty store. Corrupt data is logged and
        also gives an empty store.
        """
        try:
            raw = self._backend.get(self._key)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read user strategies: %s", e)
            self._strategies = []
            return

        if raw is None:
            self._strategies = []
            return

        try:
            self._strategies = _strategy_list.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable user strategies: %s", e)
            self._strategies = []
            return

        logger.info("Loaded %d user strategies", len(self._strategies))

    def save(self) -> None:
        """
        Persist the current list.

        Raises:
            OSError: If the backend cannot be written
        """
        self._write(self._strategies)

    def _write(self, strategies: list[UserStrategy]) -> None:
        self._backend.set(self._key, _strategy_list.dump_json(strategies).decode("utf-8"))

    def _commit(self, strategies: list[UserStrategy]) -> None:
        """Persist a new list, then make it current. Memory is untouched if the write fails."""
        self._write(strategies)
        self._strategies = strategies

    def _index_of(self, strategy_id: UUID) -> int:
        for index, strategy in enumerate(self._strategies):
            if strategy.id == strategy_id:
                return index
        raise UserStrategyNotFoundError(strategy_id)

    def get(self, strategy_id: UUID) -> UserStrategy:
        """
        Raises:
            UserStrategyNotFoundError: If no strategy has this id
        """
        return self._strategies[self._index_of(strategy_id)]

    def add(self, strategy: UserStrategy) -> UserStrategy:
        self._commit([*self._strategies, strategy])
        return strategy

    def update(self, strategy: UserStrategy) -> UserStrategy:
        """
        Replace the stored strategy that has the same id.

        Raises:
            UserStrategyNotFoundError: If no strategy has this id
        """
        strategies = list(self._strategies)
        strategies[self._index_of(strategy.id)] = strategy
        self._commit(strategies)
        return strategy

    def edit(self, strategy_id: UUID, **changes: Any) -> UserStrategy:
        """Apply user edits; a submitted strategy becomes due for resubmission."""
        return self.update(self.get(strategy_id).edited(**changes))

    def submit(self, strategy_id: UUID) -> UserStrategy:
        return self.update(self.get(strategy_id).submitted())

    def duplicate(self, strategy_id: UUID) -> UserStrategy:
        return self.add(self.get(strategy_id).duplicated())

    def delete(self, strategy_id: UUID) -> None:
        """
        Raises:
            UserStrategyNotFoundError: If no strategy has this id
        """
        strategies = list(self._strategies)
        del strategies[self._index_of(strategy_id)]
        self._commit(strategies)


@lru_cache(maxsize=1)
def get_user_strategy_store() -> UserStrategyStore:
    """
    Get the application's store, loaded from the configured file.

    Cached after first call.
    """
    store = UserStrategyStore(JsonFileKeyValueStore(settings.user_store_path))
    store.load()
    return store
