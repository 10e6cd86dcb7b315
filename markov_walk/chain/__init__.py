from markov_walk.chain.markov import MarkovChain, StateTransitionFn
from markov_walk.chain.matrix import NumberMatrix, ProbabilityMatrix

__all__ = [
    "MarkovChain",
    "StateTransitionFn",
    "NumberMatrix",
    "ProbabilityMatrix",
]
