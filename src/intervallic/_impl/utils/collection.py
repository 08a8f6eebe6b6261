from __future__ import annotations

from collections.abc import Iterable, Sequence
import typing as t

if t.TYPE_CHECKING:
    from typing import overload, Protocol
    from _typeshed import SupportsAdd, SupportsMul

    class SupportsAddAndMul(SupportsAdd, SupportsMul, Protocol): ...

    @overload
    def cycGet[T](seq: Sequence[T], idx: int) -> T: ...

    @overload
    def cycGet[T: SupportsAddAndMul](seq: Sequence[T], idx: int, increment: T) -> T: ...


def cycGet(seq, idx, increment=None):
    """
    Cyclic indexing. When `increment` is given, it is added once for every full cycle that
    `idx` wraps around, e.g. `cycGet(MAJOR_SCALE_TONES, 8, 12)` is the tone of a ninth.
    """
    q, r = divmod(idx, len(seq))
    res = seq[r]
    if increment is not None:
        res += increment * q
    return res


def splitNotations[T](src: str | Iterable[T]) -> tuple[str | T, ...]:
    """Accepts either a space-separated string or an iterable of items."""
    if isinstance(src, str):
        return tuple(src.split())
    return tuple(src)
