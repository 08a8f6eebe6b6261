from __future__ import annotations

from typing import Callable
from functools import partial
from threading import RLock

__all__ = ["cachedGetter"]

_DUMMY = object()
_lock = RLock()

type FGet[T, P] = Callable[[T], P]


def _cachedGetter[T, P](fget: FGet[T, P], *, key: str | None = None) -> FGet[T, P]:
    if key is None:
        fname = fget.__name__
        if fname.startswith("__") and fname.endswith("__"):
            # "dunder" method
            key = f"_{fname[2:-2]}"
        else:
            key = f"_{fname}"

    def wrapper(self: T) -> P:
        if (value := getattr(self, key, _DUMMY)) is _DUMMY:
            with _lock:
                if (value := getattr(self, key, _DUMMY)) is _DUMMY:
                    value = fget(self)
                    setattr(self, key, value)
        return value

    wrapper.__name__ = fget.__name__
    wrapper.__doc__ = fget.__doc__
    return wrapper


def cachedGetter(arg1=None, /, *, key: str | None = None):
    """
    Caches the result of a getter on the instance. The cached value is stored in a private
    attribute named after the getter with a leading underscore (`__hash__` is stored in
    `_hash`), or under `key` when given. Slotted classes must declare that attribute in
    `__slots__`.
    """
    if isinstance(arg1, str):
        return partial(_cachedGetter, key=arg1)
    if arg1 is None:
        return partial(_cachedGetter, key=key)
    return _cachedGetter(arg1, key=key)
