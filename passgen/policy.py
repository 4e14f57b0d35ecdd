"""
passgen.policy

Generation policy and its validator. ``validate`` is the only way to obtain a
ValidatedPolicy, and the synthesizer only accepts ValidatedPolicy, so an
unchecked policy can never reach generation.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from . import charsets
from .charsets import CharClass
from .errors import (
    EmptyClassAfterExclusion,
    LengthOutOfRange,
    NoAvailableCharacters,
    OverconstrainedPolicy,
)

logger = logging.getLogger(__name__)

MAX_LENGTH = 1024


@dataclass(frozen=True)
class Policy:
    """
    Desired password shape.

    ``classes`` maps each permitted class to its minimum count; a minimum of
    0 permits the class without requiring it.
    """

    length: int
    classes: Mapping[CharClass, int] = field(default_factory=dict)
    exclude: FrozenSet[str] = frozenset()
    avoid_ambiguous: bool = False
    avoid_lookalike_symbols: bool = False
    symbols: Optional[str] = None
    custom: str = ""
    ambiguous: str = charsets.AMBIGUOUS_CHARS

    def __post_init__(self):
        items = dict(self.classes)
        for cls, minimum in items.items():
            if not isinstance(cls, CharClass):
                raise ValueError(f"unknown character class: {cls!r}")
            if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 0:
                raise ValueError(f"minimum for {cls.value} must be a non-negative integer")
        if self.custom and CharClass.CUSTOM not in items:
            items[CharClass.CUSTOM] = 0
        # frozen: normalise containers into hashable, immutable forms
        object.__setattr__(self, "classes", tuple(sorted(items.items(), key=lambda kv: kv[0].value)))
        object.__setattr__(self, "exclude", frozenset(self.exclude))

    @property
    def minimums(self) -> Dict[CharClass, int]:
        return dict(self.classes)

    @property
    def required(self) -> Dict[CharClass, int]:
        return {cls: k for cls, k in self.classes if k > 0}

    @classmethod
    def build(
        cls,
        length: int,
        use_upper: bool = True,
        use_lower: bool = True,
        use_digits: bool = True,
        use_symbols: bool = True,
        force_each: bool = True,
        **kwargs,
    ) -> "Policy":
        """Shortcut from on/off flags; every enabled class is required once when ``force_each``."""
        minimum = 1 if force_each else 0
        classes = {}
        for flag, char_class in (
            (use_lower, CharClass.LOWER),
            (use_upper, CharClass.UPPER),
            (use_digits, CharClass.DIGIT),
            (use_symbols, CharClass.SYMBOL),
        ):
            if flag:
                classes[char_class] = minimum
        return cls(length=length, classes=classes, **kwargs)


_TOKEN = object()


class ValidatedPolicy:
    """Result of a successful ``validate`` call. Immutable."""

    __slots__ = ("policy", "pools", "pool")

    def __init__(self, token, policy: Policy, pools: Tuple[Tuple[CharClass, str], ...]):
        if token is not _TOKEN:
            raise TypeError("ValidatedPolicy can only be produced by passgen.policy.validate()")
        object.__setattr__(self, "policy", policy)
        object.__setattr__(self, "pools", pools)
        object.__setattr__(self, "pool", "".join(chars for _, chars in pools))

    def __setattr__(self, name, value):
        raise AttributeError("ValidatedPolicy is immutable")

    def __eq__(self, other):
        return isinstance(other, ValidatedPolicy) and other.policy == self.policy

    def __hash__(self):
        return hash(self.policy)

    def __repr__(self):
        return f"ValidatedPolicy(length={self.length}, pool_size={self.pool_size})"

    @property
    def length(self) -> int:
        return self.policy.length

    @property
    def pool_size(self) -> int:
        return len(self.pool)

    def pool_for(self, char_class: CharClass) -> str:
        for cls, chars in self.pools:
            if cls is char_class:
                return chars
        return ""


def validate(policy: Policy, max_length: int = MAX_LENGTH) -> ValidatedPolicy:
    """
    Check ``policy`` for satisfiability. Checks run in a fixed order:
    length range, sum of minimums, required classes non-empty after
    ambiguity filtering and exclusion, union non-empty.
    Pure: no entropy is consumed and nothing is mutated.
    """
    length = policy.length
    if isinstance(length, bool) or not isinstance(length, int) or not 1 <= length <= max_length:
        raise LengthOutOfRange(f"length must be between 1 and {max_length}, got {length!r}")

    total = sum(k for _, k in policy.classes)
    if total > length:
        raise OverconstrainedPolicy(
            f"class minimums add up to {total}, more than the requested length {length}"
        )

    pools = []
    for char_class, minimum in policy.classes:
        chars = charsets.available(
            char_class,
            exclude=policy.exclude,
            avoid_ambiguous=policy.avoid_ambiguous,
            avoid_lookalike_symbols=policy.avoid_lookalike_symbols,
            symbols=policy.symbols,
            custom=policy.custom,
            ambiguous=policy.ambiguous,
        )
        if not chars:
            if minimum > 0:
                raise EmptyClassAfterExclusion(
                    f"required class '{char_class.value}' has no characters left after exclusions"
                )
            continue
        pools.append((char_class, chars))

    if not pools:
        raise NoAvailableCharacters("no characters available after exclusions")

    validated = ValidatedPolicy(_TOKEN, policy, tuple(pools))
    logger.debug("validated policy: length=%d pool_size=%d", length, validated.pool_size)
    return validated
