from .errors import EmptyHeapError
from .heap import MinHeap

__all__ = [
    "EmptyHeapError",
    "MinHeap",
]
