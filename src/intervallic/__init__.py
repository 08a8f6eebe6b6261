"""
# `intervallic`: Note and Interval Algebra for Western Music Notation

Parses and spells notes (`C#4`, `Ebb`) and intervals (`M3`, `-P5`), transposes notes, measures
the intervals between them, and finds the chords and scales a set of notes or intervals forms.
"""

import logging

from ._impl import *  # noqa: F401, F403

logging.getLogger(__name__).addHandler(logging.NullHandler())
