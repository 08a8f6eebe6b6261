from .errors import *  # noqa: F401, F403
from .interval import *  # noqa: F401, F403
from .note import *  # noqa: F401, F403
from .bitindex import *  # noqa: F401, F403
from .catalog import *  # noqa: F401, F403
from .search import *  # noqa: F401, F403
from .notelist import *  # noqa: F401, F403

__all__ = [
    # errors
    "IntervallicError",
    "InvalidNotation",
    "InvalidLetter",
    "InvalidAccidentals",
    "InvalidOctave",
    "InvalidQuality",
    "InvalidNumber",
    "InvalidSign",
    "InvalidMidi",
    "InvalidFrequency",
    "IncompatibleQuality",
    "NoSuchInterval",
    "MixedComparison",
    "CannotSearchMixedCollection",
    "UnknownName",
    # notes and intervals
    "Interval",
    "interval",
    "IntervalLike",
    "Note",
    "note",
    "NoteLike",
    "NoteList",
    "notes",
    "scale",
    "chord",
    # catalogs and search
    "INTERVAL_BITS",
    "INTERVAL_BITS_ENHARMONIC",
    "bitmask",
    "decode",
    "Catalog",
    "CHORDS",
    "SCALES",
    "CatalogKind",
    "SearchFilter",
    "Match",
    "SearchIndex",
    "DEFAULT_INDEX",
    "SearchResult",
    "PatternResult",
    "search",
]
