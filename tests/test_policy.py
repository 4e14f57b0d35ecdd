import string

import pytest

from passgen.charsets import CharClass
from passgen.errors import (
    EmptyClassAfterExclusion,
    LengthOutOfRange,
    NoAvailableCharacters,
    OverconstrainedPolicy,
)
from passgen.policy import MAX_LENGTH, Policy, ValidatedPolicy, validate


@pytest.mark.parametrize("length", [0, -3, MAX_LENGTH + 1, 4.0, "8", True])
def test_length_out_of_range(length):
    with pytest.raises(LengthOutOfRange):
        validate(Policy(length=length, classes={CharClass.LOWER: 0}))


def test_configured_max_length():
    policy = Policy(length=40, classes={CharClass.LOWER: 0})
    assert validate(policy, max_length=40).length == 40
    with pytest.raises(LengthOutOfRange):
        validate(policy, max_length=39)


def test_overconstrained_scenario():
    with pytest.raises(OverconstrainedPolicy):
        validate(Policy(length=5, classes={CharClass.LOWER: 6}))


def test_length_checked_before_minimums():
    with pytest.raises(LengthOutOfRange):
        validate(Policy(length=0, classes={CharClass.LOWER: 6}))


def test_required_class_emptied_by_exclusion():
    policy = Policy(length=8, classes={CharClass.LOWER: 1, CharClass.DIGIT: 1}, exclude=frozenset(string.digits))
    with pytest.raises(EmptyClassAfterExclusion):
        validate(policy)


def test_ambiguity_and_exclusion_compose():
    # ambiguity removes 0 and 1, exclusion removes the rest of the digits
    policy = Policy(
        length=8,
        classes={CharClass.DIGIT: 1},
        exclude=frozenset("23456789"),
        avoid_ambiguous=True,
    )
    with pytest.raises(EmptyClassAfterExclusion):
        validate(policy)


def test_permitted_class_that_empties_is_dropped():
    policy = Policy(
        length=8,
        classes={CharClass.LOWER: 1, CharClass.DIGIT: 0},
        exclude=frozenset(string.digits),
    )
    validated = validate(policy)
    assert validated.pool == string.ascii_lowercase
    assert validated.pool_for(CharClass.DIGIT) == ""


def test_no_available_characters():
    with pytest.raises(NoAvailableCharacters):
        validate(Policy(length=8))
    policy = Policy(length=8, classes={CharClass.DIGIT: 0}, exclude=frozenset(string.digits))
    with pytest.raises(NoAvailableCharacters):
        validate(policy)


def test_negative_minimum_rejected_on_construction():
    with pytest.raises(ValueError):
        Policy(length=8, classes={CharClass.LOWER: -1})


def test_policy_is_immutable_and_hashable():
    policy = Policy(length=8, classes={CharClass.LOWER: 1}, exclude={"a"})
    with pytest.raises(AttributeError):
        policy.length = 9
    assert policy == Policy(length=8, classes={CharClass.LOWER: 1}, exclude=frozenset("a"))
    assert hash(policy) == hash(Policy(length=8, classes={CharClass.LOWER: 1}, exclude=frozenset("a")))


def test_build_forces_each_enabled_class():
    policy = Policy.build(12, use_symbols=False)
    assert policy.required == {CharClass.LOWER: 1, CharClass.UPPER: 1, CharClass.DIGIT: 1}
    assert Policy.build(12, force_each=False).required == {}


def test_custom_characters_form_their_own_class():
    validated = validate(Policy(length=6, classes={CharClass.DIGIT: 0}, custom="äöü"))
    assert validated.pool_for(CharClass.CUSTOM) == "äöü"
    assert validated.pool_size == 13


def test_validated_policy_cannot_be_forged():
    with pytest.raises(TypeError):
        ValidatedPolicy(object(), Policy(length=4), ())


def test_validated_policy_is_immutable():
    validated = validate(Policy(length=4, classes={CharClass.LOWER: 0}))
    with pytest.raises(AttributeError):
        validated.pool = "abc"


def test_symbol_override_never_shares_characters():
    validated = validate(Policy(
        length=8,
        classes={CharClass.LOWER: 1, CharClass.SYMBOL: 1},
        symbols="a!",
    ))
    assert validated.pool_for(CharClass.SYMBOL) == "!"
    assert validated.pool_size == len(set(validated.pool)) == 27


def test_empty_symbol_override():
    permitted = Policy(length=8, classes={CharClass.LOWER: 1, CharClass.SYMBOL: 0}, symbols="")
    assert validate(permitted).pool == string.ascii_lowercase
    required = Policy(length=8, classes={CharClass.LOWER: 1, CharClass.SYMBOL: 1}, symbols="")
    with pytest.raises(EmptyClassAfterExclusion):
        validate(required)


@pytest.mark.parametrize("minimum", [True, False, 1.0, "2"])
def test_non_integer_minimum_rejected(minimum):
    with pytest.raises(ValueError):
        Policy(length=8, classes={CharClass.LOWER: minimum})
