from .comparator import (
    ALPHANUM,
    AlphanumComparator,
    Chunk,
    alphanum_key,
    compare,
    get_chunk,
    is_digit,
    iter_chunks,
    sort_alphanum,
)

__all__ = [
    "ALPHANUM",
    "AlphanumComparator",
    "Chunk",
    "alphanum_key",
    "compare",
    "get_chunk",
    "is_digit",
    "iter_chunks",
    "sort_alphanum",
]
