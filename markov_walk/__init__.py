from markov_walk.chain import MarkovChain, NumberMatrix, ProbabilityMatrix, StateTransitionFn
from markov_walk.errors import (
    EmptyInputError,
    MarkovError,
    NotProbabilisticError,
    NotSquareError,
    OutOfBoundsError,
    SizeMismatchError,
)
from markov_walk.random_source import UniformSource

__version__ = "0.1.0"

__all__ = [
    "MarkovChain",
    "NumberMatrix",
    "ProbabilityMatrix",
    "StateTransitionFn",
    "UniformSource",
    "MarkovError",
    "EmptyInputError",
    "SizeMismatchError",
    "NotSquareError",
    "NotProbabilisticError",
    "OutOfBoundsError",
]
