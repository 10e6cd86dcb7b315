import pytest

from markov_walk import validate
from markov_walk.errors import MarkovError, OutOfBoundsError, SizeMismatchError


def test_passing_checks_do_nothing():
    validate.is_true(True, "unused")
    validate.is_greater_than(1, 0, "unused")
    validate.is_equal(3, 3, "unused")
    validate.inclusive_between(0, 0, 2, "unused")
    validate.inclusive_between(2, 0, 2, "unused")


def test_failing_checks_raise_with_exact_message():
    with pytest.raises(MarkovError, match="^must be positive$"):
        validate.is_greater_than(0, 0, "must be positive")
    with pytest.raises(SizeMismatchError, match="^sizes differ$"):
        validate.is_equal(2, 3, "sizes differ", SizeMismatchError)


@pytest.mark.parametrize("value", [-1, 3])
def test_inclusive_between_rejects_outside_values(value):
    with pytest.raises(OutOfBoundsError, match="out of range"):
        validate.inclusive_between(value, 0, 2, "out of range", OutOfBoundsError)


def test_index_between_returns_plain_int():
    assert validate.index_between(True, 0, 2, "unused") == 1
    assert validate.index_between(2, 0, 2, "unused") == 2


@pytest.mark.parametrize("value", [1.5, 1.0, "1"])
def test_index_between_rejects_non_integers(value):
    with pytest.raises(OutOfBoundsError, match="not an index"):
        validate.index_between(value, 0, 2, "not an index", OutOfBoundsError)
