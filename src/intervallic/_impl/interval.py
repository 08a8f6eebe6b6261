from __future__ import annotations

from functools import lru_cache
from numbers import Integral, Real
from typing import Any, Self, overload
import typing as t
import re

import numpy as np
from bidict import bidict

from .tables import MAJOR_SCALE_TONES, PERFECTABLE_STEPS, DEFAULT_INTERVALS
from .errors import (
    InvalidNotation,
    InvalidQuality,
    InvalidNumber,
    InvalidSign,
    IncompatibleQuality,
    NoSuchInterval,
)
from .utils import cachedGetter, cycGet

__all__ = ["Interval", "interval", "IntervalLike"]

_MISSING = object()
_intervalRe = re.compile(r"^([+-]?)(P|M|m|A+|d+)(\d+)$")
_qualityRe = re.compile(r"^(P|M|m|A+|d+)$")

# inversion of qualities other than "P", which inverts to itself
_qualityInversions = bidict(M="m", A="d")


def _perfectQualityDiff(quality: str) -> int:
    """Semitones added by `quality` to a unison, fourth or fifth."""
    match quality[0]:
        case "P":
            return 0
        case "A":
            return len(quality)
        case "d":
            return -len(quality)
    raise IncompatibleQuality(f"quality '{quality}' cannot qualify a perfect interval")


def _majorQualityDiff(quality: str) -> int:
    """Semitones added by `quality` to a second, third, sixth or seventh."""
    match quality[0]:
        case "M":
            return 0
        case "m":
            return -1
        case "A":
            return len(quality)
        case "d":
            return -len(quality) - 1
    raise IncompatibleQuality(f"quality '{quality}' cannot qualify a major interval")


def _perfectQuality(diff: int) -> str:
    if diff == 0:
        return "P"
    elif diff > 0:
        return "A" * diff
    else:
        return "d" * -diff


def _majorQuality(diff: int) -> str:
    if diff == 0:
        return "M"
    elif diff == -1:
        return "m"
    elif diff > 0:
        return "A" * diff
    else:
        return "d" * (-diff - 1)


def _degreeInfo(number: int) -> tuple[bool, int]:
    """
    Returns whether the diatonic number is perfectable, and its default number of semitones
    including full octaves.
    """
    return (number - 1) % 7 in PERFECTABLE_STEPS, int(cycGet(MAJOR_SCALE_TONES, number - 1, 12))


def _isWhole(x: Any) -> bool:
    if isinstance(x, Integral):
        return not isinstance(x, bool)
    return isinstance(x, Real) and float(x).is_integer()


def _resolveSign(sign: Any) -> int:
    if not isinstance(sign, bool):
        match sign:
            case "+" | 1:
                return 1
            case "-" | -1:
                return -1
    raise InvalidSign(f"sign must be '+' or '-', got {sign!r}")


def _validate(quality: Any, number: Any, sign: Any) -> int:
    if not isinstance(quality, str) or _qualityRe.match(quality) is None:
        raise InvalidQuality(
            f"quality must be one of 'P', 'M', 'm' or a run of 'A' or 'd', got {quality!r}"
        )
    if not isinstance(number, Integral) or isinstance(number, bool) or number < 1:
        raise InvalidNumber(f"number must be an integer of 1 or higher, got {number!r}")
    sign = _resolveSign(sign)
    perfectable = (number - 1) % 7 in PERFECTABLE_STEPS
    if perfectable and quality in ("M", "m") or not perfectable and quality == "P":
        raise IncompatibleQuality(f"{quality}{number} is not a valid interval")
    return sign


class Interval:
    """
    An **interval** is the signed difference between two pitches or pitch classes.

    Besides the number of semitones it spans (`chromaticSteps`), an interval specifies how
    many note letters it moves a note by (`diatonicSteps`). Two intervals spanning the same
    number of semitones with different diatonic numbers are *enharmonic*, e.g. `M3` and `d4`.

    An interval is named by three components:

    - `quality`: perfect (`P`), major (`M`), minor (`m`), augmented (`A`, `AA`, ...) or
      diminished (`d`, `dd`, ...).
    - `number`: the diatonic number, counting the origin note, so a third spans from C to E.
    - `sign`: `1` for ascending and `-1` for descending intervals.

    The short-hand notation is sign, quality and number in that order, e.g. `"M3"` or `"-P5"`.
    """

    __slots__ = ("_quality", "_number", "_sign", "_diatonicSteps", "_chromaticSteps", "_hash")

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __new__(cls, src: str | Interval) -> Self:
            """
            Creates an interval from short-hand notation, in the form of an optional `+` or `-`
            sign, a quality and a diatonic number, e.g. `"P5"`, `"-m3"` or `"+dd44"`.
            """
            ...

        @overload
        def __new__(cls, quality: str, number: int, sign: str = "+") -> Self:
            """
            Creates an interval from quality, diatonic number and sign (`"+"` or `"-"`).
            """
            ...

    def __new__(cls, arg1=_MISSING, arg2=_MISSING, arg3="+", /) -> Self:
        if arg2 is _MISSING:
            if isinstance(arg1, Interval):
                return arg1
            if isinstance(arg1, str):
                return cls.fromString(arg1)
            raise TypeError(
                f"expected an interval notation string, got {arg1.__class__.__name__}"
            )
        sign = _validate(arg1, arg2, arg3)
        return cls._newHelper(arg1, int(arg2), sign)

    @classmethod
    @lru_cache
    def _newHelper(cls, quality: str, number: int, sign: int) -> Self:
        perfectable, defaultSteps = _degreeInfo(number)
        if perfectable:
            qualitySteps = _perfectQualityDiff(quality)
        else:
            qualitySteps = _majorQualityDiff(quality)
        self = super().__new__(cls)
        self._quality = quality
        self._number = number
        self._sign = sign
        # subtract one from the number to avoid 1-indexing
        self._diatonicSteps = sign * (number - 1)
        self._chromaticSteps = sign * (defaultSteps + qualitySteps)
        return self

    @classmethod
    def fromString(cls, notation: str) -> Self:
        """
        Creates an interval from short-hand notation.

        Raises `InvalidNotation` if the string is not in the form `[+-]QUALITY NUMBER`.
        """
        if not isinstance(notation, str):
            raise TypeError(f"expected a string, got {notation.__class__.__name__}")
        match = _intervalRe.match(notation)
        if match is None:
            raise InvalidNotation(f"'{notation}' is not a valid interval")
        sign, quality, number = match.groups()
        return cls(quality, int(number), sign or "+")

    @classmethod
    def fromSemitones(cls, semitones: int) -> Self:
        """
        Creates an interval spanning the given number of semitones.

        Many intervals span the same number of semitones. The one returned is always the same
        for the same input, preferring qualities in the order P, M, m, A, d.
        """
        if not isinstance(semitones, Integral) or isinstance(semitones, bool):
            raise TypeError(f"semitones must be an integer, got {semitones!r}")
        octaves, otone = divmod(abs(int(semitones)), 12)
        quality, number = DEFAULT_INTERVALS[otone]
        return cls._newHelper(quality, number + 7 * octaves, 1 if semitones >= 0 else -1)

    @classmethod
    def fromSteps(cls, diatonicSteps: int, chromaticSteps: int) -> Self:
        """
        Finds the interval spanning exactly the given numbers of diatonic steps and semitones.

        The diatonic steps fix the number and sign. The quality follows from how far the
        requested semitones deviate from the default size of that number.
        """
        if not isinstance(diatonicSteps, Integral) or not _isWhole(chromaticSteps):
            raise NoSuchInterval(
                f"no interval spans {diatonicSteps} diatonic steps and "
                f"{chromaticSteps} semitones"
            )
        diatonicSteps = int(diatonicSteps)
        number = abs(diatonicSteps) + 1
        sign = 1 if diatonicSteps >= 0 else -1
        perfectable, defaultSteps = _degreeInfo(number)
        diff = sign * int(chromaticSteps) - defaultSteps
        if perfectable:
            quality = _perfectQuality(diff)
        else:
            quality = _majorQuality(diff)
        return cls._newHelper(quality, number, sign)

    @staticmethod
    def isValid(notation: str) -> bool:
        """Checks if a string is a valid interval notation without raising."""
        try:
            Interval.fromString(notation)
        except (InvalidNotation, IncompatibleQuality, TypeError):
            return False
        return True

    @property
    def quality(self) -> str:
        return self._quality

    @property
    def number(self) -> int:
        return self._number

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def diatonicSteps(self) -> int:
        """Number of note letters the interval moves a note by, signed."""
        return self._diatonicSteps

    @property
    def chromaticSteps(self) -> int:
        """Number of semitones the interval spans, signed."""
        return self._chromaticSteps

    def add(self, other: IntervalLike) -> Interval:
        """
        The interval spanning the diatonic and chromatic steps of both intervals combined.
        """
        other = _resolveInterval(other)
        return Interval.fromSteps(
            self.diatonicSteps + other.diatonicSteps,
            self.chromaticSteps + other.chromaticSteps,
        )

    def sub(self, other: IntervalLike) -> Interval:
        other = _resolveInterval(other)
        return Interval.fromSteps(
            self.diatonicSteps - other.diatonicSteps,
            self.chromaticSteps - other.chromaticSteps,
        )

    def simpleTerm(self) -> Interval:
        """
        Removes the octaves from a compound interval, keeping quality and sign. The result is
        generally *not* enharmonic to the original; use `simplify()` for that.
        """
        number = abs(self.diatonicSteps) % 7 + 1
        return Interval._newHelper(self.quality, number, self.sign)

    def simplify(self) -> Interval:
        """Returns an enharmonic interval with the simplest quality possible."""
        return Interval.fromSemitones(self.chromaticSteps)

    def invert(self) -> Interval:
        """
        The interval which, together with this one, raises a note by one or more octaves.
        A simple interval and its inversion make up one octave, e.g. `P5` and `P4`. A compound
        interval inverts to a simple one, e.g. `P11` inverts to `P4`, while `P1` inverts to
        `P8` and compound octaves to `P1`.
        """
        q = self.quality[0]
        if q == "P":
            quality = self.quality
        elif q in _qualityInversions:
            quality = _qualityInversions[q] * len(self.quality)
        else:
            quality = _qualityInversions.inv[q] * len(self.quality)
        number = 8 if self.number == 1 else 9 - ((self.number - 2) % 7 + 2)
        return Interval._newHelper(quality, number, self.sign)

    def frequencyRatio(self) -> float:
        """Frequency ratio in 12-tone equal temperament."""
        return float(np.power(2.0, self.chromaticSteps / 12))

    def cents(self) -> int:
        """Size in cents in 12-tone equal temperament."""
        return 100 * self.chromaticSteps

    def isCompound(self) -> bool:
        return self.number >= 8

    def isEnharmonic(self, other: IntervalLike) -> bool:
        return self.chromaticSteps == _resolveInterval(other).chromaticSteps

    def __add__(self, other: Any) -> Interval:
        if not isinstance(other, (Interval, str)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Interval:
        if not isinstance(other, (Interval, str)):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Interval:
        return Interval.fromSteps(-self.diatonicSteps, -self.chromaticSteps)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (
            self.quality == other.quality
            and self.number == other.number
            and self.sign == other.sign
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self.quality, self.number, self.sign))

    def __str__(self) -> str:
        return f"{'-' if self.sign < 0 else ''}{self.quality}{self.number}"

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __reduce__(self):
        return (Interval._newHelper, (self.quality, self.number, self.sign))


type IntervalLike = Interval | str
"""An `Interval` object or its short-hand notation."""


def _resolveInterval(src: IntervalLike | Integral) -> Interval:
    # semitone counts resolve to the default interval spanning them
    if isinstance(src, Integral) and not isinstance(src, bool):
        return Interval.fromSemitones(src)
    return Interval(src)


# shortcut for creating an interval from short-hand notation
interval = Interval.fromString
