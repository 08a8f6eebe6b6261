from .chords import CHORD_INTERVALS, CHORD_ALIASES
from .scales import SCALE_INTERVALS, SCALE_ALIASES

__all__ = ["CHORD_INTERVALS", "CHORD_ALIASES", "SCALE_INTERVALS", "SCALE_ALIASES"]
