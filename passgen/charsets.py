"""
passgen.charsets

Character class registry: canonical pools plus the transforms applied to
them (ambiguous-glyph filtering first, then user exclusions).
"""

import enum
import string
from typing import Iterable, Optional


class CharClass(enum.Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"
    CUSTOM = "custom"


DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# visually similar glyphs
AMBIGUOUS_CHARS = "0O1lI"

# punctuation that is easy to confuse or mangle when copied into shells/configs
LOOKALIKE_SYMBOLS = "{}[]()/\\'\"~;:.><"

BUILTIN_CLASSES = (CharClass.LOWER, CharClass.UPPER, CharClass.DIGIT, CharClass.SYMBOL)

_CANONICAL = {
    CharClass.LOWER: string.ascii_lowercase,
    CharClass.UPPER: string.ascii_uppercase,
    CharClass.DIGIT: string.digits,
}

_ALNUM = frozenset(string.ascii_letters + string.digits)


def dedupe(chars: Iterable[str]) -> str:
    """Drop repeated characters, keeping first occurrences in order."""
    return "".join(dict.fromkeys(chars))


def charset(char_class: CharClass, symbols: Optional[str] = None, custom: str = "") -> str:
    """
    Canonical pool for ``char_class``.

    ``symbols`` overrides the SYMBOL pool; letters and digits in it are
    dropped, and an override may leave the pool empty. The CUSTOM pool is
    ``custom`` minus anything already owned by a built-in class, so no
    character ever belongs to two classes.
    """
    if char_class is CharClass.SYMBOL:
        if symbols is None:
            return DEFAULT_SYMBOLS
        return dedupe(c for c in symbols if c not in _ALNUM)
    if char_class is CharClass.CUSTOM:
        owned = set(_ALNUM)
        owned.update(charset(CharClass.SYMBOL, symbols))
        return dedupe(c for c in custom if c not in owned)
    return _CANONICAL[char_class]


def without(chars: str, excluded: Iterable[str]) -> str:
    excluded = set(excluded)
    return "".join(c for c in chars if c not in excluded)


def filter_ambiguous(chars: str, ambiguous: str = AMBIGUOUS_CHARS) -> str:
    return without(chars, ambiguous)


def available(
    char_class: CharClass,
    exclude: Iterable[str] = (),
    avoid_ambiguous: bool = False,
    avoid_lookalike_symbols: bool = False,
    symbols: Optional[str] = None,
    custom: str = "",
    ambiguous: str = AMBIGUOUS_CHARS,
) -> str:
    """Pool for ``char_class`` after all registry transforms are composed."""
    pool = charset(char_class, symbols, custom)
    if avoid_ambiguous:
        pool = filter_ambiguous(pool, ambiguous)
    if avoid_lookalike_symbols:
        pool = without(pool, LOOKALIKE_SYMBOLS)
    return without(pool, exclude)


def classify(ch: str, symbols: Optional[str] = None, custom: str = "") -> Optional[CharClass]:
    """Return the class owning ``ch`` or None."""
    for cls in BUILTIN_CLASSES + (CharClass.CUSTOM,):
        if ch in charset(cls, symbols, custom):
            return cls
    return None
