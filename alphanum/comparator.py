"""Alphanum comparison: digit runs compare as numbers, so "item2" < "item10".

Strings are split into chunks, maximal runs of either ASCII digits or
non-digits, and compared chunk by chunk. Two digit chunks compare by length
first and then digit by digit; any other pair compares as plain text.
Leading zeros are not normalised: "007" sorts after "7".
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

DIGIT_LOWER_BOUND = 48  # "0"
DIGIT_UPPER_BOUND = 57  # "9"


def is_digit(character: str) -> bool:
    # ASCII only; str.isdigit() would also accept "٣" or "５".
    return DIGIT_LOWER_BOUND <= ord(character) <= DIGIT_UPPER_BOUND


@dataclass(frozen=True)
class Chunk:
    source: str
    start: int
    length: int
    numeric: bool

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]


def get_chunk(string: str, length: int, offset: int) -> Chunk:
    """Chunk of ``string`` starting at ``offset``.

    ``length`` is ``len(string)``, passed in so callers walking a string
    compute it once.
    """
    if not 0 <= offset < length:
        raise IndexError(f"chunk offset {offset} out of range for length {length}")

    numeric = is_digit(string[offset])
    index = offset + 1
    while index < length and is_digit(string[index]) == numeric:
        index += 1
    return Chunk(source=string, start=offset, length=index - offset, numeric=numeric)


def iter_chunks(string: str) -> Iterator[Chunk]:
    length = len(string)
    marker = 0
    while marker < length:
        chunk = get_chunk(string, length, marker)
        yield chunk
        marker = chunk.end


def _compare_numeric(this: str, that: str) -> int:
    # Longer digit run is the bigger number.
    result = len(this) - len(that)
    if result:
        return result
    for c1, c2 in zip(this, that):
        if c1 != c2:
            return ord(c1) - ord(c2)
    return 0


def _compare_text(this: str, that: str) -> int:
    for c1, c2 in zip(this, that):
        if c1 != c2:
            return ord(c1) - ord(c2)
    return len(this) - len(that)


def _check_str(what: str, value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be str, not {type(value).__name__}")


def compare(a: str, b: str) -> int:
    """Negative, zero or positive as ``a`` sorts before, with or after ``b``."""
    _check_str("compare() argument 'a'", a)
    _check_str("compare() argument 'b'", b)

    a_length = len(a)
    b_length = len(b)
    this_marker = 0
    that_marker = 0

    while this_marker < a_length and that_marker < b_length:
        this_chunk = get_chunk(a, a_length, this_marker)
        this_marker = this_chunk.end
        that_chunk = get_chunk(b, b_length, that_marker)
        that_marker = that_chunk.end

        if this_chunk.numeric and that_chunk.numeric:
            result = _compare_numeric(this_chunk.text, that_chunk.text)
        else:
            result = _compare_text(this_chunk.text, that_chunk.text)

        if result:
            return result

    return a_length - b_length


alphanum_key = functools.cmp_to_key(compare)


class AlphanumComparator:
    """Stateless comparator value.

    Call it like ``compare`` or hand ``.key`` to ``sorted``/``list.sort``.
    Every instance behaves identically; ``ALPHANUM`` is a shared one.
    """

    __slots__ = ()

    def __call__(self, a: str, b: str) -> int:
        return compare(a, b)

    @property
    def key(self):
        return alphanum_key

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AlphanumComparator):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(AlphanumComparator)

    def __repr__(self) -> str:
        return "AlphanumComparator()"


ALPHANUM = AlphanumComparator()


def sort_alphanum(
    items: Iterable[T],
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Sorted copy of ``items`` in alphanum order (stable).

    Without ``key`` the items themselves must be strings. Every sort value is
    checked before sorting, so a single non-string item still raises
    ``TypeError``.
    """
    items = list(items)
    values = items if key is None else [key(item) for item in items]
    for value in values:
        _check_str("sort_alphanum() value", value)
    order = sorted(range(len(items)), key=lambda i: alphanum_key(values[i]), reverse=reverse)
    return [items[i] for i in order]
