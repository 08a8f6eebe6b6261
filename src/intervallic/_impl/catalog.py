from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
import logging

import pyrsistent as pyr

from .interval import Interval
from .bitindex import INTERVAL_BITS
from .errors import UnknownName
from .utils import splitNotations
from .data import CHORD_INTERVALS, CHORD_ALIASES, SCALE_INTERVALS, SCALE_ALIASES

__all__ = ["Catalog", "CHORDS", "SCALES"]

_logger = logging.getLogger(__name__)


class Catalog(Mapping[str, tuple[str, ...]]):
    """
    A catalog of named interval sets, such as chords or scales, mapping each name to the
    interval notations of its members measured from the root.

    Names are looked up among the entries first and then among the aliases, so an alias can
    never hide an entry of the same name. Both levels are resolved once on construction into
    a single immutable mapping. Iterating a catalog yields the entry names in declaration
    order, without aliases.
    """

    __slots__ = ("_names", "_entries", "_lookup")

    def __init__(
        self,
        entries: Mapping[str, Iterable[str] | str],
        aliases: Mapping[str, str] | None = None,
    ):
        resolved = {}
        for name, intervals in entries.items():
            notations = tuple(str(Interval(n)) for n in splitNotations(intervals))
            if missing := [n for n in notations if n not in INTERVAL_BITS]:
                _logger.warning(
                    "entry %r has intervals without a bit and cannot be matched on them: %s",
                    name,
                    " ".join(missing),
                )
            resolved[name] = notations
        lookup = dict(resolved)
        for alias, target in (aliases or {}).items():
            if target not in resolved:
                raise UnknownName(f"alias {alias!r} refers to unknown entry {target!r}")
            if alias in resolved:
                _logger.debug("alias %r is shadowed by an entry of the same name", alias)
                continue
            lookup[alias] = resolved[target]
        self._names = tuple(resolved)
        self._entries: pyr.PMap[str, tuple[str, ...]] = pyr.pmap(resolved)
        self._lookup: pyr.PMap[str, tuple[str, ...]] = pyr.pmap(lookup)

    def names(self) -> tuple[str, ...]:
        """Entry names in declaration order."""
        return self._names

    def aliases(self) -> tuple[str, ...]:
        return tuple(name for name in self._lookup if name not in self._entries)

    def intervals(self, name: str) -> tuple[Interval, ...]:
        """Intervals of an entry or alias as `Interval` objects."""
        return tuple(map(Interval.fromString, self[name]))

    def __getitem__(self, name: str) -> tuple[str, ...]:
        try:
            return self._lookup[name]
        except KeyError:
            raise UnknownName(f"unknown name {name!r}") from None

    def __contains__(self, name: Any) -> bool:
        return name in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} entries, {len(self.aliases())} aliases)"


CHORDS = Catalog(CHORD_INTERVALS, CHORD_ALIASES)
"""Bundled chords: triads, sixth, seventh, added tone and suspended chords."""

SCALES = Catalog(SCALE_INTERVALS, SCALE_ALIASES)
"""Bundled scales: major and minor, pentatonic, diatonic modes, blues, bebop and others."""
