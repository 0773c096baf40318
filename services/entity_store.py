"""
Base class for the local user-data stores.

Each store owns an in-memory list, hydrates it from one key of the key-value
store, and writes the whole list back after every mutation. The in-memory list
is replaced before the write is awaited, so readers always see a complete
collection even when the write later fails. Failed writes are logged, kept on
``last_persist_error`` and passed to the optional ``on_persist_error`` callback;
they never raise and never roll the in-memory change back.
"""

import json
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from services.storage_service import KeyValueStore
from utils import get_logger, log_store_operation

logger = get_logger(__name__)

T = TypeVar("T")

PersistErrorHandler = Callable[[str, Exception], None]


class EntityStore(Generic[T]):
    """In-memory collection persisted under a single storage key"""

    storage_key: str = ""
    entity_name: str = "item"

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None):
        self.storage = storage
        self.on_persist_error = on_persist_error
        self.last_persist_error: Optional[Exception] = None
        self.loaded = False
        self._items: List[T] = []

    # Subclass hooks

    def _encode(self, item: T) -> Dict[str, Any]:
        return item.to_dict()

    def _decode(self, data: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _default_items(self) -> List[T]:
        return []

    async def _on_missing(self, items: List[T]) -> None:
        """Called after load finds no stored value"""

    # Reading

    @property
    def items(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # Persistence

    async def load(self) -> List[T]:
        """Hydrate from storage, falling back to the default collection"""
        key = self.storage_key
        try:
            with log_store_operation(logger, "load", key) as op:
                raw = await self.storage.get(key)
                self._items = self._default_items() if raw is None else self._parse(raw)
                op.item_count = len(self._items)
        except Exception:
            # Unreadable storage: keep going with the defaults
            self._items = self._default_items()
            self.loaded = True
            return self.items

        self.loaded = True
        if raw is None:
            await self._on_missing(self.items)
        return self.items

    def _parse(self, raw: str) -> List[T]:
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            return [self._decode(entry) for entry in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Stored {self.storage_key} is malformed, starting fresh: {e}")
            return self._default_items()

    def serialize(self, items: Optional[List[T]] = None) -> str:
        items = self._items if items is None else items
        return json.dumps([self._encode(item) for item in items])

    async def _commit(self, items: List[T]) -> None:
        """Swap in the new collection, then write it through"""
        self._items = items
        await self.persist()

    async def persist(self) -> bool:
        """Write the current collection; returns False when the write failed"""
        key = self.storage_key
        try:
            with log_store_operation(logger, "save", key) as op:
                op.item_count = len(self._items)
                await self.storage.set(key, self.serialize())
        except Exception as e:
            self.last_persist_error = e
            if self.on_persist_error:
                self.on_persist_error(key, e)
            return False
        self.last_persist_error = None
        return True
