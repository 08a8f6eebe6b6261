from __future__ import annotations

from functools import lru_cache
from numbers import Integral, Real
from typing import Any, Self, overload
import typing as t
import math
import re

import numpy as np

from .tables import MAJOR_SCALE_TONES, STEP_NAMES, STEP_NAMES_SET, DEFAULT_SPELLINGS
from .interval import Interval, _resolveInterval
from .errors import (
    InvalidNotation,
    InvalidLetter,
    InvalidAccidentals,
    InvalidOctave,
    InvalidMidi,
    InvalidFrequency,
    MixedComparison,
)
from .utils import cachedGetter

__all__ = ["Note", "note", "NoteLike"]

_MISSING = object()
_noteRe = re.compile(r"^([A-Ga-g])(#*|b*)(-?[0-9]?)$")


def _parseAcci(src: str) -> int:
    if len(src) == 0:  # natural
        return 0
    if src == "#" * len(src):
        return len(src)
    if src == "b" * len(src):
        return -len(src)
    raise InvalidAccidentals(f"accidentals can only be '#'s or 'b's, got {src!r}")


def _acci2Str(acci: int) -> str:
    return "#" * acci if acci > 0 else "b" * -acci


def _resolveLetter(letter: Any) -> str:
    if isinstance(letter, str) and letter.upper() in STEP_NAMES_SET:
        return letter.upper()
    raise InvalidLetter(f"letter must be one of {', '.join(STEP_NAMES)}, got {letter!r}")


def _resolveAcci(acci: Any) -> int:
    if isinstance(acci, str):
        return _parseAcci(acci)
    if isinstance(acci, Integral) and not isinstance(acci, bool):
        return int(acci)
    raise InvalidAccidentals(f"accidentals must be a string or an integer, got {acci!r}")


def _resolveOctave(octave: Any) -> int | None:
    if octave is None:
        return None
    if isinstance(octave, Integral) and not isinstance(octave, bool):
        return int(octave)
    if isinstance(octave, float) and math.isnan(octave):
        # NaN marks a pitch class, as `None` does
        return None
    raise InvalidOctave(f"octave must be an integer or None, got {octave!r}")


class Note:
    """
    A **note** is either a specific pitch (e.g. `C#4`) or a pitch class (e.g. `C#`), the
    latter standing for all octave transpositions of a pitch collectively.

    A note is named by a letter from A to G, accidentals (`#` raises and `b` lowers the pitch
    by a semitone, never mixed) and an optional octave in scientific pitch notation, where
    `C4` is middle C and `A4` sounds at 440 Hz.

    Notes spelled differently can sound the same, e.g. `C##4`, `D4` and `Ebb4`. These are
    called *enharmonic*, and are still distinct notes.
    """

    __slots__ = ("_letter", "_acci", "_octave", "_hash")

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __new__(cls, src: str | Note) -> Self:
            """
            Creates a note from scientific pitch notation, e.g. `"C"`, `"D#4"` or `"Ebb-1"`.
            The letter is case insensitive.
            """
            ...

        @overload
        def __new__(
            cls, letter: str, accidentals: str | int = "", octave: int | None = None
        ) -> Self:
            """
            Creates a note from a letter, accidentals given as a run of `#` or `b` or as a
            signed count, and an octave, `None` for a pitch class.
            """
            ...

    def __new__(cls, arg1=_MISSING, arg2=_MISSING, arg3=None, /) -> Self:
        if arg2 is _MISSING and arg3 is None:
            if isinstance(arg1, Note):
                return arg1
            if isinstance(arg1, str):
                return cls.fromString(arg1)
            raise TypeError(f"expected a note notation string, got {arg1.__class__.__name__}")
        letter = _resolveLetter(arg1)
        acci = 0 if arg2 is _MISSING else _resolveAcci(arg2)
        octave = _resolveOctave(arg3)
        return cls._newHelper(letter, acci, octave)

    @classmethod
    @lru_cache
    def _newHelper(cls, letter: str, acci: int, octave: int | None) -> Self:
        self = super().__new__(cls)
        self._letter = letter
        self._acci = acci
        self._octave = octave
        return self

    @classmethod
    def _fromOffsets(cls, step: int, acci: int, octave: int | None) -> Self:
        return cls._newHelper(STEP_NAMES.inv[step], acci, octave)

    @classmethod
    def fromString(cls, notation: str) -> Self:
        """Creates a note from scientific pitch notation."""
        if not isinstance(notation, str):
            raise TypeError(f"expected a string, got {notation.__class__.__name__}")
        match = _noteRe.match(notation)
        if match is None:
            raise InvalidNotation(f"'{notation}' is not a valid note")
        letter, acci, octave = match.groups()
        if octave == "-":
            raise InvalidNotation(f"'{notation}' is not a valid note")
        return cls._newHelper(letter.upper(), _parseAcci(acci), int(octave) if octave else None)

    @classmethod
    def fromMidi(cls, midi: int) -> Self:
        """
        Creates a pitch from a MIDI note number between 0 and 127, where 60 is `C4`. The
        simplest spelling is chosen, preferring sharps.
        """
        if not isinstance(midi, Integral) or isinstance(midi, bool) or not 0 <= midi <= 127:
            raise InvalidMidi(f"MIDI number must be an integer from 0 to 127, got {midi!r}")
        return _MIDDLE_C.transpose(int(midi) - 60).simplify()

    @classmethod
    def fromFrequency(cls, hz: float, A4: float = 440) -> Self:
        """
        Creates the 12-tone equal temperament pitch closest to the frequency in Hz.
        """
        if not isinstance(hz, Real) or isinstance(hz, bool) or not math.isfinite(hz) or hz <= 0:
            raise InvalidFrequency(f"frequency must be a positive finite number, got {hz!r}")
        semitones = int(np.round(12 * np.log2(hz / A4)))
        return _A4.transpose(semitones).simplify()

    @property
    def letter(self) -> str:
        return self._letter

    @property
    def acci(self) -> int:
        """Accidentals as a signed count, positive for sharps and negative for flats."""
        return self._acci

    @property
    def accidentals(self) -> str:
        """Accidentals as a run of `#` or `b`."""
        return _acci2Str(self._acci)

    @property
    def octave(self) -> int | None:
        """Octave of a pitch, or `None` for a pitch class."""
        return self._octave

    @property
    def diatonicOffset(self) -> int:
        """Index of the letter in `C D E F G A B`."""
        return STEP_NAMES[self._letter]

    @property
    def chromaticOffset(self) -> int:
        """
        Semitones from C in the note's own octave, e.g. `11` for `B` and `-1` for `Cb`.
        """
        return int(MAJOR_SCALE_TONES[self.diatonicOffset]) + self._acci

    def isPitch(self) -> bool:
        return self._octave is not None

    def isPitchClass(self) -> bool:
        return self._octave is None

    def toPitch(self, octave: int) -> Note:
        """Places the note in an octave. Existing pitches are moved to the new octave."""
        octave = _resolveOctave(octave)
        if octave is None:
            raise InvalidOctave("octave of a pitch cannot be None")
        return Note._newHelper(self._letter, self._acci, octave)

    def toPitchClass(self) -> Note:
        if self.isPitchClass():
            return self
        return Note._newHelper(self._letter, self._acci, None)

    def transpose(self, interval: Interval | str | int) -> Note:
        """
        Moves the note by an interval, given as an `Interval`, its short-hand notation, or a
        number of semitones. Pitches transpose to pitches and pitch classes to pitch classes.

        The new letter and octave are determined by the diatonic steps alone. The accidentals
        make up whatever difference remains to the exact number of semitones, which may take
        many sharps or flats.
        """
        interval = _resolveInterval(interval)
        octaves, step = divmod(self.diatonicOffset + interval.diatonicSteps, 7)
        chromaticTarget = self.chromaticOffset + interval.chromaticSteps
        acci = chromaticTarget - int(MAJOR_SCALE_TONES[step]) - 12 * octaves
        octave = None if self.isPitchClass() else self._octave + octaves
        return Note._fromOffsets(step, acci, octave)

    @staticmethod
    def octaveDiff(a: NoteLike, b: NoteLike) -> int:
        """
        Octave difference from `a` to `b`. For pitches this is a plain subtraction. Pitch
        classes are assumed to move upwards, so if `a` is higher than `b` within the octave,
        `b` is taken to be in the octave above.
        """
        a, b = Note(a), Note(b)
        if a.isPitchClass() != b.isPitchClass():
            raise MixedComparison(f"cannot compare pitch and pitch class: {a}, {b}")
        if a.isPitchClass():
            return 1 if a.chromaticOffset > b.chromaticOffset else 0
        return b.octave - a.octave

    def distance(self, other: NoteLike) -> int:
        """Number of semitones from this note to `other`."""
        other = Note(other)
        octaves = Note.octaveDiff(self, other)
        return other.chromaticOffset - self.chromaticOffset + 12 * octaves

    def intervalTo(self, other: NoteLike) -> Interval:
        """The interval transposing this note into `other`."""
        other = Note(other)
        octaves = Note.octaveDiff(self, other)
        return Interval.fromSteps(
            other.diatonicOffset - self.diatonicOffset + 7 * octaves,
            other.chromaticOffset - self.chromaticOffset + 12 * octaves,
        )

    def intervalFrom(self, other: NoteLike) -> Interval:
        """The interval transposing `other` into this note."""
        return Note(other).intervalTo(self)

    def frequency(self, A4: float = 440) -> float:
        """Frequency in Hz in 12-tone equal temperament. Only defined for pitches."""
        return float(A4 * np.power(2.0, -self.distance(_A4) / 12))

    def midi(self) -> int | None:
        """MIDI note number, or `None` if the pitch is out of the MIDI range."""
        midi = 60 - self.distance(_MIDDLE_C)
        return midi if 0 <= midi <= 127 else None

    def simplify(self) -> Note:
        """
        Returns the enharmonic note with the fewest accidentals, choosing sharps over flats.
        """
        octaves, otone = divmod(self.chromaticOffset, 12)
        letter, acci = DEFAULT_SPELLINGS[otone]
        octave = None if self.isPitchClass() else self._octave + octaves
        return Note._newHelper(letter, acci, octave)

    def isEqual(self, other: NoteLike) -> bool:
        """Equal letter, accidentals and octave, or both pitch classes."""
        other = Note(other)
        return (
            self._letter == other._letter
            and self._acci == other._acci
            and self._octave == other._octave
        )

    def isEnharmonic(self, other: NoteLike) -> bool:
        """
        Checks if both notes sound the same. A pitch is never enharmonic to a pitch class.
        """
        other = Note(other)
        if self.isPitchClass() != other.isPitchClass():
            return False
        if self.isPitchClass():
            return (self.chromaticOffset - other.chromaticOffset) % 12 == 0
        return self.distance(other) == 0

    @staticmethod
    def compare(a: Note, b: Note) -> int:
        """
        Comparator sorting pitch classes before all pitches, then by octave, semitones and
        letter.
        """
        ka, kb = a._sortKey(), b._sortKey()
        return (ka > kb) - (ka < kb)

    def _sortKey(self) -> tuple[float, int, int]:
        octave = -math.inf if self.isPitchClass() else self._octave
        return (octave, self.chromaticOffset, self.diatonicOffset)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._sortKey() < other._sortKey()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.isEqual(other)

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._letter, self._acci, self._octave))

    def __str__(self) -> str:
        octave = "" if self.isPitchClass() else str(self._octave)
        return f"{self._letter}{self.accidentals}{octave}"

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __reduce__(self):
        return (Note._newHelper, (self._letter, self._acci, self._octave))


type NoteLike = Note | str
"""A `Note` object or its scientific pitch notation."""

_MIDDLE_C = Note._newHelper("C", 0, 4)
_A4 = Note._newHelper("A", 0, 4)

# shortcut for creating a note from scientific pitch notation
note = Note.fromString
