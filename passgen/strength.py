"""
passgen.strength

Information-theoretic strength of a policy. The attacker is assumed to know
the policy but not the draw, so strength depends on the available pool size,
never on the characters that happen to appear in a password.
"""

import math
from typing import Union

from .policy import Policy, ValidatedPolicy, validate

# (upper bound exclusive, label)
LABELS = (
    (20.0, "Very Weak"),
    (30.0, "Weak"),
    (40.0, "Medium"),
    (50.0, "Strong"),
)
TOP_LABEL = "Very Strong"


def bits(length: int, pool_size: int) -> float:
    """``length * log2(pool_size)``; a single-character pool carries no information."""
    if length <= 0 or pool_size <= 1:
        return 0.0
    return length * math.log2(pool_size)


def estimate(target: Union[ValidatedPolicy, Policy, object]) -> float:
    """
    Strength in bits for a GenerationResult, a ValidatedPolicy or a Policy.
    A raw Policy is validated first (and may raise PolicyError).
    """
    if isinstance(target, Policy):
        target = validate(target)
    # a GenerationResult carries the ValidatedPolicy it was drawn under
    validated = target if isinstance(target, ValidatedPolicy) else getattr(target, "policy", None)
    if not isinstance(validated, ValidatedPolicy):
        raise TypeError(f"cannot estimate strength of {type(target).__name__}")
    return bits(validated.length, validated.pool_size)


def strength_label(value: float) -> str:
    for limit, label in LABELS:
        if value < limit:
            return label
    return TOP_LABEL


def keyspace(validated: ValidatedPolicy) -> int:
    """
    Exact number of distinct passwords honoring every per-class minimum.

    Classes are disjoint, so a password is an interleaving of per-class
    subsequences: extending length ``t`` strings with ``j`` characters of a
    class of size ``s`` multiplies by ``C(t + j, j) * s**j``.
    """
    length = validated.length
    minimums = validated.policy.minimums
    counts = [1] + [0] * length
    for char_class, chars in validated.pools:
        size = len(chars)
        lowest = minimums.get(char_class, 0)
        nxt = [0] * (length + 1)
        for t, ways in enumerate(counts):
            if not ways:
                continue
            for j in range(lowest, length - t + 1):
                nxt[t + j] += ways * math.comb(t + j, j) * size ** j
        counts = nxt
    return counts[length]


def keyspace_at_least(validated: ValidatedPolicy, count: int) -> bool:
    """True when at least ``count`` distinct passwords exist under ``validated``."""
    if count <= 1:
        return True
    # cheap lower bound: mandatory characters in a fixed block, the rest free
    minimums = validated.policy.minimums
    fixed = 1
    mandatory = 0
    for char_class, chars in validated.pools:
        k = minimums.get(char_class, 0)
        fixed *= len(chars) ** k
        mandatory += k
    free = validated.length - mandatory
    if fixed * validated.pool_size ** free >= count:
        return True
    return keyspace(validated) >= count
