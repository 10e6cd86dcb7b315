from __future__ import annotations

import argparse
import logging

import numpy as np
import pandas as pd

from markov_walk.chain import MarkovChain
from markov_walk.config import settings
from markov_walk.logging_config import setup_logging
from markov_walk.plotting import plot_visit_frequencies
from markov_walk.runtime_utils import add_common_walk_args

logger = logging.getLogger(__name__)

WEATHER_STATES = ["sunny", "cloudy", "rainy"]


def build_weather_chain(initial_state: int | None = None, seed: int | None = None) -> MarkovChain[str]:
    p = np.array(
        [
            [0.70, 0.20, 0.10],
            [0.30, 0.40, 0.30],
            [0.20, 0.40, 0.40],
        ],
        dtype=float,
    )
    return MarkovChain(WEATHER_STATES, p, initial_state=initial_state, rng=seed)


def visit_frequencies(visited: list[str], states: list[str]) -> pd.DataFrame:
    counts = pd.Series(visited, dtype=object).value_counts().reindex(states, fill_value=0)
    n = max(len(visited), 1)
    return pd.DataFrame(
        {
            "state": states,
            "visits": counts.to_numpy(dtype=int),
            "frequency": counts.to_numpy(dtype=float) / n,
        }
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk a three-state weather Markov chain.")
    add_common_walk_args(parser, default_seed=settings.default_seed)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.n_steps < 0:
        raise ValueError("n_steps must be >= 0")

    chain = build_weather_chain(initial_state=args.initial_state, seed=args.seed)
    logger.info("Walking %d steps from %s", args.n_steps, chain.current or "not started")

    visited = [chain.next() for _ in range(args.n_steps)]
    print("Walk:", " -> ".join(visited))

    freq = visit_frequencies(visited, WEATHER_STATES)
    print("=== Visit frequencies ===")
    print(freq.to_string(index=False, float_format=lambda x: f"{x:.3f}"))

    if args.no_plots:
        return

    out_path = plot_visit_frequencies(
        freq,
        settings.output_dir / "weather_visit_frequency.png",
        title=f"Visit frequency over {args.n_steps} steps",
    )
    print("Saved plot:", out_path)


if __name__ == "__main__":
    main()
