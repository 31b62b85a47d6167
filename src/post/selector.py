"""Range selection over the stored (oldest-first) sequence.

Top(n) is the n most recently added notes, Tail(n) the n oldest. Both come
back in stored order, lowest index first. Counts larger than the stack are
clamped; only Index(i) is bounds-checked.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from post.errors import IndexOutOfRange
from post.models import Record


@dataclass(frozen=True)
class All:
    pass


@dataclass(frozen=True)
class Index:
    i: int


@dataclass(frozen=True)
class Top:
    n: int


@dataclass(frozen=True)
class Tail:
    n: int


RangeSpec = All | Index | Top | Tail

DEFAULT_VIEW = Top(10)


def _check_count(n: int) -> None:
    if n < 0:
        msg = f"count must be non-negative, got {n}"
        raise ValueError(msg)


def select(records: list[Record], spec: RangeSpec) -> list[Record]:
    """Return the records a range refers to."""
    if isinstance(spec, All):
        return list(records)
    if isinstance(spec, Index):
        if spec.i < 0 or spec.i >= len(records):
            raise IndexOutOfRange(spec.i, len(records))
        return [records[spec.i]]
    if isinstance(spec, Top):
        _check_count(spec.n)
        return list(records[len(records) - min(spec.n, len(records)) :])
    if isinstance(spec, Tail):
        _check_count(spec.n)
        return list(records[: spec.n])
    msg = f"unsupported range: {spec!r}"
    raise TypeError(msg)


def split(records: list[Record], spec: Top | Tail) -> tuple[list[Record], list[Record]]:
    """Split into (selected, remaining) for an end-anchored range."""
    if not isinstance(spec, Top | Tail):
        msg = f"can only clear a Top or Tail range, got {spec!r}"
        raise TypeError(msg)
    _check_count(spec.n)
    n = min(spec.n, len(records))
    if isinstance(spec, Top):
        cut = len(records) - n
        return records[cut:], records[:cut]
    return records[:n], records[n:]


def renumber(records: list[Record]) -> list[Record]:
    """Reassign index = position so there are no gaps or duplicates."""
    return [r if r.index == pos else replace(r, index=pos) for pos, r in enumerate(records)]
