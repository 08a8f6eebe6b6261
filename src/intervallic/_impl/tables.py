"""
Static tables of the diatonic system shared by intervals and notes.
"""

from collections.abc import Sequence

import numpy as np
from bidict import bidict

__all__ = [
    "MAJOR_SCALE_TONES",
    "PERFECTABLE_STEPS",
    "STEP_NAMES",
    "STEP_NAMES_SET",
    "DEFAULT_SPELLINGS",
    "DEFAULT_INTERVALS",
]

MAJOR_SCALE_TONES: Sequence[int] = np.sort(np.arange(-1, 6) * 7 % 12)
"""
Major scale tones in increasing order, i.e. the default number of semitones spanned by each
simple diatonic interval from a unison to a seventh.

**Value**: `np.array([0, 2, 4, 5, 7, 9, 11])`
"""
MAJOR_SCALE_TONES.flags.writeable = False

PERFECTABLE_STEPS = frozenset((0, 3, 4))
"""
Diatonic steps whose default quality is "perfect" (unison, fourth, fifth). The default quality
of all other steps is "major".
"""

STEP_NAMES = bidict((chr(65 + (i + 2) % 7), i) for i in range(7))
"""note letters from C to B, mapped to their diatonic offsets"""

STEP_NAMES_SET = frozenset(STEP_NAMES)

DEFAULT_SPELLINGS: Sequence[tuple[str, int]] = (
    ("C", 0),
    ("C", 1),
    ("D", 0),
    ("D", 1),
    ("E", 0),
    ("F", 0),
    ("F", 1),
    ("G", 0),
    ("G", 1),
    ("A", 0),
    ("A", 1),
    ("B", 0),
)
"""
Default `(letter, accidental)` spelling of each tone in an octave, indexed by semitones from C.
Sharps are chosen over flats so that the lookup is deterministic.
"""

DEFAULT_INTERVALS: Sequence[tuple[str, int]] = (
    ("P", 1),
    ("m", 2),
    ("M", 2),
    ("m", 3),
    ("M", 3),
    ("P", 4),
    ("A", 4),
    ("P", 5),
    ("m", 6),
    ("M", 6),
    ("m", 7),
    ("M", 7),
)
"""
Default `(quality, number)` of the interval spanning each semitone count in an octave. Qualities
are preferred in the order P, M, m, A, d.
"""
