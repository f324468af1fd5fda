from __future__ import annotations


class EmptyHeapError(IndexError):
    """Raised when reading or removing the minimum of an empty heap.

    Subclasses IndexError so callers expecting the built-in
    "pop from empty heap" behaviour keep working.
    """

    def __init__(self, operation: str = "extract_minimum") -> None:
        super().__init__(f"{operation} from empty heap")
        self.operation = operation
