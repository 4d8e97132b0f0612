from src.dary_heap.dary_heap import KEY_MAX, KEY_MIN, DaryHeap
from src.dary_heap.errors import (
    ConstructionError,
    EmptyHeap,
    HeapError,
    IndexNotFound,
    InvalidOperation,
    KeyNotIncreasing,
    KeyOutOfRange,
)
