"""
Lookup history with order-preserving deduplication.

The full list is written to storage after every mutation and read back
once, when the store is created.
"""

import json
import logging
from typing import Iterable, List

from pydantic import TypeAdapter, ValidationError

from ipmap.client.storage import KeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_KEY = "history"

_history_adapter = TypeAdapter(List[str])


class HistoryStore:
    """
    Ordered, duplicate-free list of looked-up addresses.

    This is the only writer of the "history" storage key.
    """

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage
        self._items: List[str] = self._load()

    def _load(self) -> List[str]:
        raw = self._storage.get(HISTORY_KEY)
        if raw is None:
            return []

        try:
            items = _history_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed stored history: {e.error_count()} errors")
            return []

        # Keep the first occurrence if a hand-edited file repeats an entry
        deduped = list(dict.fromkeys(items))
        if len(deduped) != len(items):
            logger.warning("Stored history contained duplicates; keeping first occurrences")
        return deduped

    def _persist(self) -> None:
        self._storage.set(HISTORY_KEY, json.dumps(self._items))

    def add(self, ip: str) -> List[str]:
        """Append ``ip`` unless it is already present. Returns the list."""
        if ip not in self._items:
            self._items.append(ip)
            self._persist()
        return self.list()

    def list(self) -> List[str]:
        """Current entries, oldest first."""
        return list(self._items)

    def remove(self, selected: Iterable[str]) -> List[str]:
        """Drop every entry in ``selected``; survivors keep their order."""
        selected = set(selected)
        self._items = [ip for ip in self._items if ip not in selected]
        self._persist()
        return self.list()

    def clear(self) -> None:
        self._items = []
        self._persist()

    def __contains__(self, ip: object) -> bool:
        return ip in self._items

    def __len__(self) -> int:
        return len(self._items)
