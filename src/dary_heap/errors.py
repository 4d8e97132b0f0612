class HeapError(Exception):
    """Base class for every error raised by the d-ary heap package."""


class ConstructionError(HeapError, ValueError):
    """Malformed input list or invalid branching factor."""


class IndexNotFound(HeapError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"index {index} is out of range for a heap of {size} node(s)"
        )


class KeyNotIncreasing(HeapError, ValueError):
    def __init__(self, index: int, current: int, key: int) -> None:
        self.index = index
        self.current = current
        self.key = key
        super().__init__(
            f"new key {key} is smaller than the current key {current} "
            f"at index {index}"
        )


class KeyOutOfRange(HeapError, OverflowError):
    """Key does not fit in a 32-bit signed integer."""


class EmptyHeap(HeapError, RuntimeError):
    """Operation needs at least one node."""


class InvalidOperation(HeapError, AssertionError):
    """
    Contract violation in the index arithmetic, e.g. asking for the parent
    of the root. Not reachable through the public mutating operations.
    """
