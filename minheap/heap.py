from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

from .errors import EmptyHeapError

logger = logging.getLogger(__name__)


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


class MinHeap(Generic[T]):
    """An array-backed binary min-heap.

    The list ``_data`` stores an implicit complete binary tree: the children
    of position ``i`` live at ``2i + 1`` and ``2i + 2``. Elements are only
    appended at and removed from the end, so the tree never has gaps and the
    storage order is already a breadth-first traversal.

    The heap does no locking; share it between threads only behind a lock.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        if items is not None:
            # One insert at a time (no bulk heapify) so the layout matches
            # the equivalent chain of insert() calls.
            for item in items:
                self.insert(item)

    # -----------------------------
    # Index arithmetic
    # -----------------------------
    @staticmethod
    def _parent_index(idx: int) -> int:
        return (idx - 1) // 2

    @staticmethod
    def _left_index(idx: int) -> int:
        return 2 * idx + 1

    @staticmethod
    def _right_index(idx: int) -> int:
        return 2 * idx + 2

    # -----------------------------
    # Invariant maintenance
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        """Move the element at *idx* toward the root until its parent is not larger."""
        data = self._data
        while idx > 0:
            parent = self._parent_index(idx)
            if not data[idx] < data[parent]:
                break
            data[idx], data[parent] = data[parent], data[idx]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        """Move the element at *idx* toward the leaves, swapping with the smaller child.

        Only `<` is used on elements. Equal children resolve to the left one.
        """
        data = self._data
        n = len(data)
        while True:
            left = self._left_index(idx)
            right = self._right_index(idx)
            if left >= n:
                break  # leaf
            if right >= n:
                child = left
            else:
                child = right if data[right] < data[left] else left
            if not data[child] < data[idx]:
                break
            data[idx], data[child] = data[child], data[idx]
            idx = child

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> MinHeap[T]:
        """Add *value* (O(log n)) and return the heap so calls can be chained."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)
        return self

    def extract_minimum(self) -> T:
        """Remove and return the smallest element (O(log n)).

        Raises EmptyHeapError, leaving the heap untouched, when it is empty.
        """
        data = self._data
        if not data:
            logger.debug("extract_minimum called on an empty heap")
            raise EmptyHeapError("extract_minimum")
        minimum = data[0]
        data[0], data[-1] = data[-1], data[0]
        data.pop()
        self._sift_down(0)
        return minimum

    def peek(self) -> T:
        """Return the smallest element without removing it (O(1))."""
        if not self._data:
            logger.debug("peek called on an empty heap")
            raise EmptyHeapError("peek")
        return self._data[0]

    def breadth_first_view(self) -> List[T]:
        """Return a copy of the elements in level order, root first."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        # Breadth-first order over a snapshot, not sorted order
        return iter(self.breadth_first_view())

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"
