from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import cmp_to_key
from typing import Any, Self, overload
import typing as t
import re

from .interval import Interval, IntervalLike, _resolveInterval
from .note import Note, NoteLike
from .catalog import Catalog, CHORDS, SCALES
from .search import SearchIndex, SearchResult, PatternResult, search as _search
from .errors import InvalidNotation, CannotSearchMixedCollection
from .utils import cachedGetter, splitNotations

__all__ = ["NoteList", "notes", "scale", "chord"]

_MISSING = object()
_namedRe = re.compile(r"^([A-G][b#]*-?[0-9]?)?\s*(.*)$")


class NoteList(Sequence[Note]):
    """
    An immutable, ordered sequence of notes, played either at once or one after another.

    A note list mixing pitches and pitch classes can be created and worked with, but has no
    intervals and therefore cannot be searched.
    """

    __slots__ = ("_notes", "_intervals", "_hash")

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __new__(cls, notes: Iterable[NoteLike] | str = ()) -> Self:
            """
            Creates a note list from notes or their notations, or from a space-separated
            string of notations.
            """
            ...

        @overload
        def __new__(cls, root: NoteLike, intervals: Iterable[IntervalLike] | str) -> Self:
            """Creates a note list by transposing a root note by each interval."""
            ...

        @overload
        def __getitem__(self, key: int) -> Note: ...

        @overload
        def __getitem__(self, key: slice) -> NoteList: ...

    def __new__(cls, arg1=(), arg2=_MISSING, /) -> Self:
        if arg2 is _MISSING:
            if isinstance(arg1, NoteList):
                return arg1
            return cls._newHelper(tuple(map(Note, splitNotations(arg1))))
        root = Note(arg1)
        intervals = tuple(map(_resolveInterval, splitNotations(arg2)))
        if len(intervals) == 0:
            raise ValueError("a note list built from a root needs at least one interval")
        return cls._newHelper(tuple(root.transpose(i) for i in intervals), intervals)

    @classmethod
    def _newHelper(
        cls, notes: tuple[Note, ...], intervals: tuple[Interval, ...] | None = None
    ) -> Self:
        self = super().__new__(cls)
        self._notes = notes
        if intervals is None:
            # there are no intervals between pitches and pitch classes
            if len(notes) == 0:
                intervals = ()
            elif not self.isMixed():
                intervals = tuple(notes[0].intervalTo(n) for n in notes)
        self._intervals = intervals
        return self

    @classmethod
    def fromString(cls, src: str) -> Self:
        """Creates a note list from space-separated note notations."""
        try:
            return cls._newHelper(tuple(map(Note.fromString, src.split())))
        except InvalidNotation as e:
            raise InvalidNotation(f"'{src}' is not a valid note list") from e

    @classmethod
    def _fromCatalog(cls, catalog: Catalog, tonic: NoteLike, name: str) -> Self:
        tonic = Note(tonic)
        intervals = catalog.intervals(name)
        return cls._newHelper(tuple(tonic.transpose(i) for i in intervals), intervals)

    @classmethod
    def fromScale(cls, tonic: NoteLike, name: str, catalog: Catalog = SCALES) -> Self:
        """Spells a scale from its tonic and name, e.g. `NoteList.fromScale("D", "minor")`."""
        return cls._fromCatalog(catalog, tonic, name)

    @classmethod
    def fromChord(cls, tonic: NoteLike, name: str, catalog: Catalog = CHORDS) -> Self:
        """Spells a chord from its root and name, e.g. `NoteList.fromChord("A#", "dom7")`."""
        return cls._fromCatalog(catalog, tonic, name)

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._notes

    @property
    def intervals(self) -> tuple[Interval, ...] | None:
        """
        Intervals from the first note to each note, the first always being a unison. `None`
        if the list mixes pitches and pitch classes.
        """
        return self._intervals

    def root(self) -> Note | None:
        """
        The first note. This is not necessarily the lowest, as a note list need not be in
        ascending order.
        """
        return self._notes[0] if self._notes else None

    def transpose(self, interval: IntervalLike | int) -> NoteList:
        interval = _resolveInterval(interval)
        return NoteList._newHelper(tuple(n.transpose(interval) for n in self._notes))

    def simplify(self) -> NoteList:
        """Simplifies the spelling of every note."""
        return NoteList._newHelper(tuple(n.simplify() for n in self._notes))

    def add(self, note: NoteLike) -> NoteList:
        return NoteList._newHelper(self._notes + (Note(note),))

    def remove(self, note: NoteLike, enharmonic: bool = False) -> NoteList:
        """Removes all occurrences of a note, or of any enharmonic note if `enharmonic`."""
        note = Note(note)
        same = Note.isEnharmonic if enharmonic else Note.isEqual
        return NoteList._newHelper(tuple(n for n in self._notes if not same(n, note)))

    def toggle(self, note: NoteLike, enharmonic: bool = False) -> NoteList:
        """Removes a note if the list includes it, and adds it otherwise."""
        note = Note(note)
        if self.includes(note, enharmonic):
            return self.remove(note, enharmonic)
        return self.add(note)

    def includes(self, note: NoteLike, enharmonic: bool = False) -> bool:
        note = Note(note)
        if enharmonic:
            return any(n.isEnharmonic(note) for n in self._notes)
        return any(n.isEqual(note) for n in self._notes)

    def includesAll(self, notes: Iterable[NoteLike] | str, enharmonic: bool = False) -> bool:
        return all(self.includes(n, enharmonic) for n in splitNotations(notes))

    def sort(self) -> NoteList:
        """Sorts the notes by pitch, with pitch classes before all pitches."""
        return NoteList._newHelper(tuple(sorted(self._notes, key=cmp_to_key(Note.compare))))

    def isEmpty(self) -> bool:
        return len(self._notes) == 0

    def isMixed(self) -> bool:
        """Checks if the list has both pitches and pitch classes."""
        if not self._notes:
            return False
        rootIsPitch = self._notes[0].isPitch()
        return any(n.isPitch() != rootIsPitch for n in self._notes)

    def isPitches(self) -> bool:
        return all(n.isPitch() for n in self._notes)

    def isPitchClasses(self) -> bool:
        return all(n.isPitchClass() for n in self._notes)

    def toPitches(self, octave: int) -> NoteList:
        """Places every note in the same octave, moving existing pitches too."""
        return NoteList._newHelper(tuple(n.toPitch(octave) for n in self._notes))

    def toPitchClasses(self) -> NoteList:
        return NoteList._newHelper(tuple(n.toPitchClass() for n in self._notes))

    def search(self, enharmonic: bool = True, index: SearchIndex | None = None) -> SearchResult:
        """
        Searches the chords and scales these notes form, measured from the first note. In
        enharmonic mode the intervals are simplified first, so `C Fb G` is found as a
        major chord too.
        """
        if self._intervals is None:
            raise CannotSearchMixedCollection(
                "a note list mixing pitches and pitch classes cannot be searched; convert it "
                "with toPitches(octave) or toPitchClasses() first"
            )
        intervals = self._intervals
        if enharmonic:
            intervals = tuple(i.simplify() for i in intervals)
        return _search(intervals, enharmonic, index)

    def exact(self, enharmonic: bool = True, index: SearchIndex | None = None) -> PatternResult:
        """Chords and scales with exactly these notes."""
        return self.search(enharmonic, index).exact()

    def subsets(
        self, enharmonic: bool = True, index: SearchIndex | None = None
    ) -> PatternResult:
        """Chords and scales using only notes from this list."""
        return self.search(enharmonic, index).subsets()

    def supersets(
        self, enharmonic: bool = True, index: SearchIndex | None = None
    ) -> PatternResult:
        """Chords and scales containing all notes of this list."""
        return self.search(enharmonic, index).supersets()

    def __len__(self) -> int:
        return len(self._notes)

    def __getitem__(self, key: int | slice) -> Note | NoteList:
        if isinstance(key, slice):
            return NoteList._newHelper(self._notes[key])
        return self._notes[key]

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __contains__(self, value: Any) -> bool:
        if not isinstance(value, (Note, str)):
            return False
        return self.includes(value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NoteList):
            return NotImplemented
        return self._notes == other._notes

    @cachedGetter
    def __hash__(self) -> int:
        return hash(self._notes)

    def __str__(self) -> str:
        return " ".join(map(str, self._notes))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'


# shortcut for creating a note list from space-separated notes
notes = NoteList.fromString


def _splitNamed(src: str, what: str) -> tuple[str, str]:
    match = _namedRe.match(src.strip())
    if match is None:
        raise InvalidNotation(f"'{src}' is not a valid {what}")
    tonic, name = match.groups()
    return tonic or "C", name.strip()


def scale(src: str) -> NoteList:
    """
    Spells a scale from a tonic and a scale name, e.g. `scale("D minor")`. The tonic defaults
    to `C` when omitted.
    """
    tonic, name = _splitNamed(src, "scale")
    return NoteList.fromScale(tonic, name)


def chord(src: str) -> NoteList:
    """
    Spells a chord from a root and a chord name or symbol, e.g. `chord("F#m7")` or
    `chord("A# dom7")`. The root defaults to `C` when omitted.
    """
    tonic, name = _splitNamed(src, "chord")
    return NoteList.fromChord(tonic, name)
