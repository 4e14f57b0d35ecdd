"""
passgen.passphrase
Word-based passphrases, optionally peppered with a number and a symbol.
"""

import math
from typing import Optional

from .entropy import EntropySource, default_source
from .errors import InvalidArgument

WORDS = (
    "apple", "banana", "cherry", "dragon", "eagle", "forest", "garden", "house",
    "island", "jungle", "knight", "lemon", "mountain", "ocean", "planet", "queen",
    "river", "sunset", "tiger", "umbrella", "village", "window", "yellow", "zebra",
    "anchor", "bridge", "castle", "diamond", "elephant", "flower", "guitar", "hammer",
    "iceberg", "jacket", "kangaroo", "lighthouse", "moonlight", "notebook", "orange",
    "penguin", "rainbow", "sailboat", "treasure", "volcano", "waterfall", "xylophone",
    "yacht", "zeppelin",
)

PASSPHRASE_SYMBOLS = "!@#$%^&*"
MAX_WORDS = 64


def generate_passphrase(
    words: int = 4,
    separator: str = " ",
    include_numbers: bool = False,
    include_special: bool = False,
    source: Optional[EntropySource] = None,
) -> str:
    if isinstance(words, bool) or not isinstance(words, int) or not 1 <= words <= MAX_WORDS:
        raise InvalidArgument(f"words must be between 1 and {MAX_WORDS}, got {words!r}")
    source = source or default_source()

    parts = [WORDS[source.next_index(len(WORDS))] for _ in range(words)]
    if include_numbers:
        number = str(100 + source.next_index(900))
        parts.insert(source.next_index(len(parts) + 1), number)
    if include_special:
        symbol = PASSPHRASE_SYMBOLS[source.next_index(len(PASSPHRASE_SYMBOLS))]
        parts.insert(source.next_index(len(parts) + 1), symbol)
    return separator.join(parts)


def passphrase_entropy(words: int = 4, include_numbers: bool = False, include_special: bool = False) -> float:
    """Bits of an attacker who knows the word list and the options used."""
    bits = words * math.log2(len(WORDS))
    slots = words
    if include_numbers:
        slots += 1
        bits += math.log2(900) + math.log2(slots)
    if include_special:
        slots += 1
        bits += math.log2(len(PASSPHRASE_SYMBOLS)) + math.log2(slots)
    return bits
