"""
Reverse lookup of chords and scales from a set of intervals.

Every catalog entry is encoded once as a bitmask (see `bitindex`), so matching a query against
a whole catalog is a handful of vectorised bitwise operations.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from threading import Lock
from typing import NamedTuple
import logging

import numpy as np
from sortedcontainers import SortedKeyList

from .interval import IntervalLike
from .bitindex import bitmask
from .catalog import Catalog, CHORDS, SCALES
from .utils import splitNotations

__all__ = [
    "CatalogKind",
    "SearchFilter",
    "Match",
    "SearchIndex",
    "DEFAULT_INDEX",
    "SearchResult",
    "PatternResult",
    "search",
]

_logger = logging.getLogger(__name__)


class CatalogKind(StrEnum):
    CHORDS = "chords"
    SCALES = "scales"


class SearchFilter(StrEnum):
    """
    How a catalog entry must relate to the searched intervals. Subsets and supersets are named
    from the point of view of the catalog entry.
    """

    EXACT = "exact"
    """The entry has exactly the searched intervals."""

    SUBSETS = SUB = "subsets"
    """The entry only has intervals among the searched ones."""

    SUPERSETS = SUP = "supersets"
    """The entry has all the searched intervals, and possibly more."""


class Match(NamedTuple):
    name: str
    ratio: float
    """
    Size of the smaller of the two interval sets divided by the size of the larger one, `1.0`
    for an exact match.
    """


@dataclass(frozen=True)
class _IndexTable:
    names: tuple[str, ...]
    masks: np.ndarray
    sizes: np.ndarray

    def select(self, needle: int, filter: SearchFilter) -> np.ndarray:
        """Boolean array selecting the entries that pass the filter."""
        match filter:
            case SearchFilter.EXACT:
                return self.masks == needle
            case SearchFilter.SUBSETS:
                return (self.masks & ~needle) == 0
            case SearchFilter.SUPERSETS:
                return (~self.masks & needle) == 0
        raise ValueError(f"unknown search filter {filter!r}")


def _buildTable(catalog: Catalog, enharmonic: bool) -> _IndexTable:
    masks = np.array([bitmask(catalog[name], enharmonic) for name in catalog], dtype=np.int64)
    sizes = np.array([int(m).bit_count() for m in masks], dtype=np.int64)
    masks.flags.writeable = False
    sizes.flags.writeable = False
    return _IndexTable(catalog.names(), masks, sizes)


class SearchIndex:
    """
    Bitmask index over a chord catalog and a scale catalog.

    The table of each catalog and enharmonic mode is built the first time it is needed and
    reused afterwards. Building is guarded by a lock, so an index can be shared between
    threads. Call `warm()` to build all tables upfront.
    """

    __slots__ = ("_catalogs", "_tables", "_lock")

    def __init__(self, chords: Catalog = CHORDS, scales: Catalog = SCALES):
        self._catalogs = {CatalogKind.CHORDS: chords, CatalogKind.SCALES: scales}
        self._tables: dict[tuple[CatalogKind, bool], _IndexTable] = {}
        self._lock = Lock()

    def catalog(self, kind: CatalogKind | str) -> Catalog:
        return self._catalogs[CatalogKind(kind)]

    def table(self, kind: CatalogKind | str, enharmonic: bool = True) -> _IndexTable:
        key = (CatalogKind(kind), bool(enharmonic))
        if (table := self._tables.get(key)) is None:
            with self._lock:
                if (table := self._tables.get(key)) is None:
                    table = _buildTable(self._catalogs[key[0]], key[1])
                    self._tables[key] = table
                    _logger.debug(
                        "built %s index (%s) with %d entries",
                        key[0],
                        "enharmonic" if key[1] else "exact",
                        len(table.names),
                    )
        return table

    def warm(self) -> None:
        """Builds the tables of both catalogs in both modes."""
        for kind in CatalogKind:
            for enharmonic in (True, False):
                self.table(kind, enharmonic)

    def match(
        self,
        kind: CatalogKind | str,
        needle: int,
        filter: SearchFilter | str = SearchFilter.EXACT,
        enharmonic: bool = True,
    ) -> list[str]:
        """Names of the catalog entries matching the needle bitmask, in catalog order."""
        table = self.table(kind, enharmonic)
        selected = table.select(needle, SearchFilter(filter))
        return [table.names[i] for i in np.flatnonzero(selected)]

    def rank(
        self,
        kind: CatalogKind | str,
        needle: int,
        filter: SearchFilter | str = SearchFilter.EXACT,
        enharmonic: bool = True,
    ) -> SortedKeyList[Match]:
        """
        Matching entries ordered by decreasing match ratio. Entries with the same ratio keep
        their catalog order.
        """
        filter = SearchFilter(filter)
        table = self.table(kind, enharmonic)
        needleSize = needle.bit_count()
        matches = []
        for i in np.flatnonzero(table.select(needle, filter)):
            size = int(table.sizes[i])
            match filter:
                case SearchFilter.SUBSETS:
                    ratio = size / needleSize if needleSize else 1.0
                case SearchFilter.SUPERSETS:
                    ratio = needleSize / size if size else 1.0
                case _:
                    ratio = 1.0
            matches.append(Match(table.names[i], ratio))
        return SortedKeyList(matches, key=lambda m: -m.ratio)


DEFAULT_INDEX = SearchIndex()
"""Index over the bundled chords and scales."""


class PatternResult:
    """Entries of both catalogs matching a search under one filter."""

    __slots__ = ("_result", "_filter")

    def __init__(self, result: SearchResult, filter: SearchFilter):
        self._result = result
        self._filter = filter

    @property
    def filter(self) -> SearchFilter:
        return self._filter

    def _match(self, kind: CatalogKind) -> list[str]:
        r = self._result
        return r.index.match(kind, r.needle, self._filter, r.enharmonic)

    def chords(self) -> list[str]:
        return self._match(CatalogKind.CHORDS)

    def scales(self) -> list[str]:
        return self._match(CatalogKind.SCALES)

    def chord(self) -> str | None:
        """The first matching chord, or `None`."""
        return next(iter(self.chords()), None)

    def scale(self) -> str | None:
        """The first matching scale, or `None`."""
        return next(iter(self.scales()), None)

    def ranked(self, kind: CatalogKind | str) -> Sequence[Match]:
        """Matching entries of a catalog, best match first."""
        r = self._result
        return r.index.rank(kind, r.needle, self._filter, r.enharmonic)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._result!r}, {self._filter.value!r})"


class SearchResult:
    """
    A search for chords and scales related to a set of intervals. Pick the relation with
    `exact()`, `subsets()` or `supersets()`.
    """

    __slots__ = ("_intervals", "_enharmonic", "_index", "_needle")

    def __init__(
        self,
        intervals: Iterable[IntervalLike] | str,
        enharmonic: bool = True,
        index: SearchIndex | None = None,
    ):
        self._intervals = tuple(str(i) for i in splitNotations(intervals))
        self._enharmonic = bool(enharmonic)
        self._index = DEFAULT_INDEX if index is None else index
        self._needle = bitmask(self._intervals, self._enharmonic)

    @property
    def intervals(self) -> tuple[str, ...]:
        return self._intervals

    @property
    def enharmonic(self) -> bool:
        return self._enharmonic

    @property
    def index(self) -> SearchIndex:
        return self._index

    @property
    def needle(self) -> int:
        """Bitmask of the searched intervals."""
        return self._needle

    def exact(self) -> PatternResult:
        return PatternResult(self, SearchFilter.EXACT)

    def subsets(self) -> PatternResult:
        """Entries made up only of the searched intervals."""
        return PatternResult(self, SearchFilter.SUBSETS)

    def supersets(self) -> PatternResult:
        """Entries containing all the searched intervals."""
        return PatternResult(self, SearchFilter.SUPERSETS)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({' '.join(self._intervals)!r}, "
            f"enharmonic={self._enharmonic})"
        )


def search(
    intervals: Iterable[IntervalLike] | str,
    enharmonic: bool = True,
    index: SearchIndex | None = None,
) -> SearchResult:
    """
    Searches the chords and scales related to a set of intervals, given as `Interval` objects
    or notations, or as a space-separated string.

    In enharmonic mode, intervals spanning the same number of semitones are not told apart.
    Intervals that no catalog entry can contain, like descending intervals, match nothing.

    ```python
    >>> search("P1 M3 P5").exact().chord()
    'major'
    >>> "minor" in search("P1 m3").supersets().scales()
    True
    ```
    """
    return SearchResult(intervals, enharmonic, index)
