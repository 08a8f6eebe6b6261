from .cls import cachedGetter
from .collection import cycGet, splitNotations

__all__ = ["cachedGetter", "cycGet", "splitNotations"]
