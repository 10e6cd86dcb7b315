"""
Error kinds raised by markov_walk.

Every error derives from ValueError, so generic numeric validation handlers
keep working.
"""


class MarkovError(ValueError):
    """Base class for invalid chain or matrix input."""


class EmptyInputError(MarkovError):
    pass


class SizeMismatchError(MarkovError):
    pass


class NotSquareError(MarkovError):
    pass


class NotProbabilisticError(MarkovError):
    pass


class OutOfBoundsError(MarkovError):
    pass
