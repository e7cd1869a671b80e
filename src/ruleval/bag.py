"""Ordered, append-only container of failure messages."""

from typing import Iterator, List, Optional


class ErrorBag:
    """Failure messages in the order they were reported.

    No deduplication or per-field grouping: the insertion order is the
    only structure.
    """

    def __init__(self):
        self._items: List[str] = []

    def push(self, message: str) -> 'ErrorBag':
        self._items.append(message)
        return self

    def first(self) -> Optional[str]:
        """Return the earliest message, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def all(self) -> List[str]:
        """Return a copy of every message."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ErrorBag({self._items!r})"
