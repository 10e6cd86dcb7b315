from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

from markov_walk import validate
from markov_walk.chain.matrix import NumberMatrix, ProbabilityMatrix
from markov_walk.errors import EmptyInputError, OutOfBoundsError, SizeMismatchError
from markov_walk.random_source import RandomLike, as_uniform_source

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (previous state, next state) -> probabilities used for the following step
StateTransitionFn = Callable[[int, int], NumberMatrix]


class MarkovChain(Generic[T]):
    """
    Finite, discrete-time Markov chain over labelled states.

    `values[i]` labels row i of the transition matrix. A chain built without
    `initial_state` is not started: `current` is None and `has_next` is True
    until the first `next()`, which draws from row 0.
    """

    def __init__(
        self,
        values: Sequence[T],
        probabilities: Union[NumberMatrix, ProbabilityMatrix],
        initial_state: Optional[int] = None,
        rng: RandomLike = None,
    ):
        if isinstance(probabilities, ProbabilityMatrix):
            # regenerated matrices keep drawing from the same stream
            self._source = probabilities.source if rng is None else as_uniform_source(rng)
            self._matrix = probabilities
        else:
            self._source = as_uniform_source(rng)
            self._matrix = ProbabilityMatrix(probabilities, rng=self._source)

        n = self._matrix.size
        validate.is_greater_than(len(values), 0, "No values provided to MarkovChain", EmptyInputError)
        validate.is_equal(
            len(values),
            n,
            f"Number values should match provided matrix size of {n}",
            SizeMismatchError,
        )
        self._values = list(values)

        self._state: Optional[int] = None
        if initial_state is not None:
            self._state = validate.index_between(
                initial_state,
                0,
                n - 1,
                f'initialState "{initial_state}" is out of bounds. Must be between [0, {n}).',
                OutOfBoundsError,
            )

        self._transition_fn: Optional[StateTransitionFn] = None
        logger.debug("MarkovChain with %d states, initial state %s", n, self._state)

    @property
    def state(self) -> Optional[int]:
        """
        Current state index, or None before the first transition.
        """
        return self._state

    @property
    def current(self) -> Optional[T]:
        if self._state is None:
            return None
        return self._values[self._state]

    @property
    def length(self) -> int:
        return self._matrix.size

    def __len__(self) -> int:
        return self.length

    @property
    def is_terminal(self) -> bool:
        """
        True when the current row puts all its mass on itself.
        """
        if self._state is None:
            return False
        return self._matrix.row_vector(self._state)[self._state] == 1

    @property
    def has_next(self) -> bool:
        return not self.is_terminal

    @property
    def has_transition_fn(self) -> bool:
        return self._transition_fn is not None

    @property
    def probability_matrix(self) -> list[list[float]]:
        return self._matrix.value()

    def next(self) -> T:
        """
        Move to the next state and return its value.

        With a transition function installed, the matrix it returns for
        (previous, next) replaces the current one. The state only changes
        once that matrix has been validated.
        """
        prev_state = 0 if self._state is None else self._state
        next_state = self._matrix.select_from(prev_state)

        if self._transition_fn is not None:
            self._matrix = self._regenerate(prev_state, next_state)

        self._state = next_state
        return self._values[next_state]

    def _regenerate(self, prev_state: int, next_state: int) -> ProbabilityMatrix:
        n = self._matrix.size
        new_matrix = self._transition_fn(prev_state, next_state)
        validate.is_equal(
            len(new_matrix),
            n,
            f"transition function must create NumberMatrix of length {n}",
            SizeMismatchError,
        )
        logger.debug("Regenerated matrix after transition %d -> %d", prev_state, next_state)
        return ProbabilityMatrix(new_matrix, rng=self._source)

    def set_transition_fn(self, fn: Optional[StateTransitionFn]) -> None:
        """
        Install a function that rebuilds the transition matrix after each
        `next()`. Passing None removes it.
        """
        self._transition_fn = fn
        logger.debug("Transition function %s", "installed" if fn is not None else "removed")
