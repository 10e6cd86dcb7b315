from __future__ import annotations

import operator

from markov_walk.errors import MarkovError


def is_true(condition: bool, message: str, error: type[MarkovError] = MarkovError) -> None:
    if not condition:
        raise error(message)


def is_greater_than(
    value: float,
    bound: float,
    message: str,
    error: type[MarkovError] = MarkovError,
) -> None:
    is_true(value > bound, message, error)


def is_equal(
    value: float,
    expected: float,
    message: str,
    error: type[MarkovError] = MarkovError,
) -> None:
    is_true(value == expected, message, error)


def inclusive_between(
    value: float,
    low: float,
    high: float,
    message: str,
    error: type[MarkovError] = MarkovError,
) -> None:
    """
    Raise `error(message)` unless low <= value <= high.
    """
    is_true(low <= value <= high, message, error)


def index_between(
    value,
    low: int,
    high: int,
    message: str,
    error: type[MarkovError] = MarkovError,
) -> int:
    """
    Like `inclusive_between`, but `value` must also be an integer index.
    Returns it as a plain int.
    """
    try:
        index = operator.index(value)
    except TypeError:
        raise error(message) from None
    inclusive_between(index, low, high, message, error)
    return index
