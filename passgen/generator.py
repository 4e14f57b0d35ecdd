"""
passgen.generator
Password synthesis from a validated policy, driven by an injected entropy source.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .charsets import DEFAULT_SYMBOLS  # noqa: F401  (re-exported)
from .entropy import EntropySource, default_source
from .policy import Policy, ValidatedPolicy, validate
from .strength import estimate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    password: str
    policy: ValidatedPolicy
    strength: float

    def __str__(self) -> str:
        return self.password


def synthesize(validated: ValidatedPolicy, source: Optional[EntropySource] = None) -> GenerationResult:
    """
    Assemble one password honoring ``validated``.

    Required characters are drawn from their class and dropped at positions
    chosen uniformly without replacement; every other position is drawn from
    the whole pool, then those free positions are Fisher-Yates shuffled.
    """
    if not isinstance(validated, ValidatedPolicy):
        raise TypeError("synthesize() needs a ValidatedPolicy; call passgen.policy.validate() first")
    source = source or default_source()

    length = validated.length
    slots: List[Optional[str]] = [None] * length
    unfilled = list(range(length))

    for char_class, minimum in validated.policy.required.items():
        chars = validated.pool_for(char_class)
        for _ in range(minimum):
            ch = chars[source.next_index(len(chars))]
            i = source.next_index(len(unfilled))
            # swap-remove keeps the remaining positions a uniform choice set
            unfilled[i], unfilled[-1] = unfilled[-1], unfilled[i]
            slots[unfilled.pop()] = ch

    pool = validated.pool
    free = sorted(unfilled)
    for pos in free:
        slots[pos] = pool[source.next_index(len(pool))]

    drawn = [slots[pos] for pos in free]
    source.shuffle(drawn)
    for pos, ch in zip(free, drawn):
        slots[pos] = ch

    password = "".join(slots)
    return GenerationResult(password=password, policy=validated, strength=estimate(validated))


def generate(
    length: int = 16,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    force_each: bool = True,
    symbols: Optional[str] = None,
    exclude: str = "",
    avoid_ambiguous: bool = False,
    source: Optional[EntropySource] = None,
) -> str:
    """
    Generate a cryptographically secure password in one call.
    Raises a PolicyError (a ValueError) when the options cannot be satisfied.
    """
    policy = Policy.build(
        length,
        use_upper=use_upper,
        use_lower=use_lower,
        use_digits=use_digits,
        use_symbols=use_symbols,
        force_each=force_each,
        symbols=symbols,
        exclude=frozenset(exclude),
        avoid_ambiguous=avoid_ambiguous,
    )
    return synthesize(validate(policy), source).password
