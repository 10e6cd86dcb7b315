from __future__ import annotations

from typing import Protocol, Union

import numpy as np


class SupportsRandom(Protocol):
    def random(self) -> float: ...


class UniformSource:
    """
    Uniform draws on (0, 1].

    The wrapped generator yields values on [0, 1); an exact 0.0 is mapped to
    1.0 so a cumulative scan over a row summing to 1 always finds an index.
    """

    def __init__(self, rng: SupportsRandom | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def draw(self) -> float:
        u = float(self.rng.random())
        if u == 0.0:
            return 1.0
        return u


RandomLike = Union[None, int, SupportsRandom, UniformSource]


def as_uniform_source(rng: RandomLike = None) -> UniformSource:
    if isinstance(rng, UniformSource):
        return rng
    if rng is None or isinstance(rng, (int, np.integer)):
        return UniformSource(np.random.default_rng(rng))
    if not hasattr(rng, "random"):
        raise TypeError("rng must be None, an int seed, or provide a random() method")
    return UniformSource(rng)
