"""
Assignment of one bit per interval notation, used to encode interval sets as integers so that
set comparison reduces to bitwise operations.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from bidict import bidict
import pyrsistent as pyr

from .interval import Interval, IntervalLike
from .utils import splitNotations

__all__ = ["INTERVAL_BITS", "INTERVAL_BITS_ENHARMONIC", "bitmask", "decode"]

_logger = logging.getLogger(__name__)

# every interval notation that the bundled catalogs use, up to a diminished fourteenth
_NOTATIONS = (
    "P1 d2 m2 A1 M2 d3 m3 A2 M3 d4 P4 A3 d5 A4 P5 d6 m6 A5 M6 d7 m7 A6 M7 d8 P8 A7 "
    "d9 m9 A8 M9 d10 m10 A9 M10 d11 P11 A10 d12 A11 P12 d13 m13 A12 M13 d14"
).split()

INTERVAL_BITS: bidict[str, int] = bidict((n, i) for i, n in enumerate(_NOTATIONS))
"""Bit position of each interval notation, distinguishing enharmonic intervals."""

INTERVAL_BITS_ENHARMONIC: pyr.PMap[str, int] = pyr.pmap(
    {n: Interval.fromString(n).chromaticSteps for n in _NOTATIONS}
)
"""
Bit position of each interval notation when enharmonic intervals are not distinguished. The
bit is the number of semitones the interval spans, so `M3` and `d4` share a bit.
"""


def bitmask(intervals: Iterable[IntervalLike] | str, enharmonic: bool = True) -> int:
    """
    Encodes a set of intervals as an integer with one bit set per interval.

    Intervals without a bit (descending and very wide intervals, or malformed notations)
    contribute nothing, so a set containing them can still be matched on its other members.
    """
    table = INTERVAL_BITS_ENHARMONIC if enharmonic else INTERVAL_BITS
    mask = 0
    for item in splitNotations(intervals):
        notation = str(item) if isinstance(item, Interval) else item
        bit = table.get(notation)
        if bit is None:
            _logger.debug("interval %r has no bit and is ignored", notation)
            continue
        mask |= 1 << bit
    return mask


def decode(mask: int) -> tuple[str, ...]:
    """
    Decodes a mask produced by `bitmask(..., enharmonic=False)` back into interval notations,
    in increasing order of size.
    """
    mask = int(mask)
    if mask < 0:
        raise ValueError(f"bitmask cannot be negative, got {mask}")
    result = []
    bit = 0
    while mask:
        if mask & 1:
            if bit not in INTERVAL_BITS.inv:
                raise ValueError(f"bit {bit} does not stand for an interval")
            result.append(INTERVAL_BITS.inv[bit])
        mask >>= 1
        bit += 1
    return tuple(result)
