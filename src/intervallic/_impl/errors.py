"""Exception types raised by `intervallic`."""

__all__ = [
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
]


class IntervallicError(ValueError):
    """Base class of all errors raised by this package."""


class InvalidNotation(IntervallicError):
    """A note or interval notation string is malformed."""


class InvalidLetter(InvalidNotation):
    pass


class InvalidAccidentals(InvalidNotation):
    pass


class InvalidOctave(InvalidNotation):
    pass


class InvalidQuality(InvalidNotation):
    pass


class InvalidNumber(InvalidNotation):
    pass


class InvalidSign(InvalidNotation):
    pass


class InvalidMidi(IntervallicError):
    pass


class InvalidFrequency(IntervallicError):
    pass


class IncompatibleQuality(IntervallicError):
    """
    The quality cannot be used with the diatonic number, e.g. `M1` or `P3`.
    """


class NoSuchInterval(IntervallicError):
    """No interval spans the requested diatonic and chromatic steps."""


class MixedComparison(IntervallicError):
    """A pitch was compared to a pitch class."""


class CannotSearchMixedCollection(IntervallicError):
    """A note list mixing pitches and pitch classes cannot be searched."""


class UnknownName(IntervallicError, KeyError):
    """A scale or chord name is neither a catalog entry nor an alias."""

    def __str__(self) -> str:
        # `KeyError` would wrap the message in quotes
        return str(self.args[0]) if self.args else ""
