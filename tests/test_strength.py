import math
from itertools import product

import pytest

from passgen.charsets import CharClass
from passgen.errors import OverconstrainedPolicy
from passgen.generator import synthesize
from passgen.policy import Policy, validate
from passgen.strength import bits, estimate, keyspace, keyspace_at_least, strength_label


def test_estimate_accepts_policy_validated_and_result(seeded):
    policy = Policy(length=8, classes={CharClass.LOWER: 0, CharClass.DIGIT: 0})
    validated = validate(policy)
    expected = 8 * math.log2(36)
    assert estimate(policy) == pytest.approx(expected)
    assert estimate(validated) == pytest.approx(expected)
    assert estimate(synthesize(validated, seeded)) == pytest.approx(expected)


def test_estimate_validates_raw_policy():
    with pytest.raises(OverconstrainedPolicy):
        estimate(Policy(length=5, classes={CharClass.LOWER: 6}))


def test_estimate_rejects_other_types():
    with pytest.raises(TypeError):
        estimate("hunter2")


def test_uses_pool_size_not_characters_used():
    # a password of eight 'a's still carries the full pool's strength
    validated = validate(Policy(length=8, classes={CharClass.LOWER: 0, CharClass.UPPER: 0}))
    assert estimate(validated) == pytest.approx(8 * math.log2(52))


def test_monotonic_in_length_and_pool():
    for pool in (2, 10, 26, 94):
        values = [bits(n, pool) for n in range(1, 40)]
        assert values == sorted(values)
    for length in (1, 8, 32):
        values = [bits(length, p) for p in range(1, 120)]
        assert values == sorted(values)


def test_single_character_pool_has_no_strength():
    assert bits(10, 1) == 0.0


def test_labels():
    assert strength_label(0) == "Very Weak"
    assert strength_label(25) == "Weak"
    assert strength_label(35) == "Medium"
    assert strength_label(45) == "Strong"
    assert strength_label(128) == "Very Strong"


def test_keyspace_without_minimums():
    validated = validate(Policy(length=3, classes={CharClass.DIGIT: 0}))
    assert keyspace(validated) == 1000


def test_keyspace_exact_fit():
    validated = validate(Policy(length=4, classes={CharClass.LOWER: 2, CharClass.UPPER: 2}))
    assert keyspace(validated) == 6 * 26 ** 4


def test_keyspace_matches_enumeration():
    policy = Policy(
        length=4,
        classes={CharClass.LOWER: 1, CharClass.DIGIT: 1},
        exclude=frozenset("cdefghijklmnopqrstuvwxyz23456789"),
    )
    validated = validate(policy)
    pool = validated.pool  # 0, 1, a and b
    brute = sum(
        1
        for combo in product(pool, repeat=4)
        if any(c in "ab" for c in combo) and any(c in "01" for c in combo)
    )
    assert keyspace(validated) == brute


def test_keyspace_at_least():
    validated = validate(Policy(length=2, classes={CharClass.DIGIT: 0}))
    assert keyspace_at_least(validated, 100)
    assert not keyspace_at_least(validated, 101)
    big = validate(Policy.build(64))
    assert keyspace_at_least(big, 10 ** 60)


def test_symbol_override_overlap_does_not_inflate_strength():
    policy = Policy(length=8, classes={CharClass.LOWER: 1, CharClass.SYMBOL: 1}, symbols="a!")
    assert estimate(policy) == pytest.approx(8 * math.log2(27))
