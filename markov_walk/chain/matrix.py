from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from markov_walk import validate
from markov_walk.config import settings
from markov_walk.errors import (
    EmptyInputError,
    NotProbabilisticError,
    NotSquareError,
    OutOfBoundsError,
)
from markov_walk.random_source import RandomLike, UniformSource, as_uniform_source

logger = logging.getLogger(__name__)

NumberMatrix = Union[Sequence[Sequence[float]], np.ndarray]

NOT_PROBABILISTIC_MESSAGE = "Each probability vector must sum to 1 using values in [0, 1]"


class ProbabilityMatrix:
    """
    Row-stochastic transition matrix P = [p_ij].

    Entry p_ij is the probability of moving from row i to row j, so every
    row is a distribution over next states:

      [[0,   1, 0  ],   # row 0 always moves to 1
       [0.5, 0, 0.5],   # row 1 moves to 0 or 2 with equal odds
       [1,   0, 0  ]]   # row 2 always moves to 0

    The input is copied on construction and never handed out by reference.
    """

    def __init__(self, probabilities: NumberMatrix, rng: RandomLike = None):
        validate.is_greater_than(
            len(probabilities),
            0,
            "Probabilities array must contain entries",
            EmptyInputError,
        )
        validate.is_true(
            self._is_square(probabilities),
            "Probabilities array must be square",
            NotSquareError,
        )

        try:
            p = np.array(probabilities, dtype=float)
        except (TypeError, ValueError) as exc:
            raise NotProbabilisticError(NOT_PROBABILISTIC_MESSAGE) from exc

        validate.is_true(
            self._is_probabilistic(p),
            NOT_PROBABILISTIC_MESSAGE,
            NotProbabilisticError,
        )

        p.setflags(write=False)
        self._p = p
        self._source = as_uniform_source(rng)
        logger.debug("Built %dx%d probability matrix", p.shape[0], p.shape[1])

    @staticmethod
    def _is_square(probabilities: NumberMatrix) -> bool:
        n = len(probabilities)
        for row in probabilities:
            if np.ndim(row) != 1 or len(row) != n:
                return False
        return True

    @staticmethod
    def _is_probabilistic(p: np.ndarray) -> bool:
        if not np.all(np.isfinite(p)):
            return False
        if np.any(p < 0.0) or np.any(p > 1.0):
            return False
        return bool(np.all(np.abs(p.sum(axis=1) - 1.0) <= settings.row_sum_tolerance))

    @property
    def size(self) -> int:
        return self._p.shape[0]

    @property
    def source(self) -> UniformSource:
        return self._source

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"ProbabilityMatrix({self.value()!r})"

    def value(self) -> list[list[float]]:
        """
        Copy of the full matrix as nested lists.
        """
        return self._p.tolist()

    def _check_row(self, row: int) -> int:
        return validate.index_between(
            row,
            0,
            self.size - 1,
            f'aRow "{row}" is out of bounds. Must be between [0, {self.size}).',
            OutOfBoundsError,
        )

    def row_vector(self, row: int) -> list[float]:
        row = self._check_row(row)
        return self._p[row].tolist()

    def select_from(self, row: int) -> int:
        """
        Draw the next index from `row` by cumulative-sum inversion.

        With u on (0, 1], returns the first j where p_r0 + ... + p_rj >= u.
        Zero-probability entries never satisfy that for the first time, so
        they are never picked. If rounding keeps the running sum below u the
        last index with non-zero probability is returned.
        """
        row = self._check_row(row)
        u = self._source.draw()

        total = 0.0
        for j, p_rj in enumerate(self._p[row]):
            total += float(p_rj)
            if u <= total:
                return j

        return int(np.flatnonzero(self._p[row])[-1])
