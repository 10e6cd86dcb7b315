from __future__ import annotations

import argparse


def add_common_walk_args(
    parser: argparse.ArgumentParser,
    *,
    default_n_steps: int = 20,
    default_seed: int = 10_000,
) -> argparse.ArgumentParser:
    parser.add_argument("--n-steps", type=int, default=default_n_steps, help="Number of transitions to take.")
    parser.add_argument("--seed", type=int, default=default_seed, help="RNG seed.")
    parser.add_argument(
        "--initial-state",
        type=int,
        default=None,
        help="Start the chain at this state index instead of the not-started state.",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Run without generating plot files.",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level.")
    return parser
