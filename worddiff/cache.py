"""
Caller-owned cache of diff results, keyed by a content hash of the text pair.

Create one DiffCache per view that needs it; there is no module-level cache.
"""

from __future__ import annotations

import hashlib
from collections import OrderedDict
from typing import Optional

from .lcs import DEFAULT_TABLE_CELL_LIMIT, Strategy
from .models import TextDiffResult
from .worddiff import compute_word_diff


def content_key(original_text: str, transformed_text: str) -> str:
    """SHA-256 over both texts. Length prefixes keep ("a b", "c") and ("a", "b c") apart."""
    h = hashlib.sha256()
    for part in (original_text, transformed_text):
        data = part.encode("utf-8")
        h.update(f"{len(data)}:".encode("ascii"))
        h.update(data)
    return h.hexdigest()


class DiffCache:
    """Small LRU of TextDiffResult objects."""

    def __init__(
        self,
        maxsize: int = 128,
        *,
        strategy: Strategy = "auto",
        table_cell_limit: int = DEFAULT_TABLE_CELL_LIMIT,
    ):
        if maxsize <= 0:
            raise ValueError("maxsize must be positive.")
        self.maxsize = maxsize
        self.strategy = strategy
        self.table_cell_limit = table_cell_limit
        self._items: "OrderedDict[str, TextDiffResult]" = OrderedDict()

    def lookup(self, original_text: str, transformed_text: str) -> Optional[TextDiffResult]:
        return self._lookup(content_key(original_text, transformed_text))

    def _lookup(self, key: str) -> Optional[TextDiffResult]:
        result = self._items.get(key)
        if result is not None:
            self._items.move_to_end(key)
        return result

    def get(self, original_text: str, transformed_text: str) -> TextDiffResult:
        """Cached diff for the pair, computing and storing it on a miss."""
        key = content_key(original_text, transformed_text)
        result = self._lookup(key)
        if result is not None:
            return result

        result = compute_word_diff(
            original_text,
            transformed_text,
            strategy=self.strategy,
            table_cell_limit=self.table_cell_limit,
        )
        self._items[key] = result
        if len(self._items) > self.maxsize:
            self._items.popitem(last=False)
        return result

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, pair) -> bool:
        original_text, transformed_text = pair
        return content_key(original_text, transformed_text) in self._items
