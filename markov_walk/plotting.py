from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pandas as pd


def _pyplot():
    # matplotlib needs a writable cache dir and, without a display, Agg
    os.environ.setdefault("MPLCONFIGDIR", str(Path(tempfile.gettempdir()) / "markov_walk_mpl"))
    Path(os.environ["MPLCONFIGDIR"]).mkdir(parents=True, exist_ok=True)

    import matplotlib

    if "DISPLAY" not in os.environ and "MPLBACKEND" not in os.environ:
        matplotlib.use("Agg", force=True)

    import matplotlib.pyplot as plt

    return plt


def plot_visit_frequencies(freq: pd.DataFrame, out_path: Path, title: str) -> Path:
    """
    Bar chart of a `state`/`frequency` table, saved to `out_path`.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt = _pyplot()
    fig, ax = plt.subplots()
    ax.bar(freq["state"], freq["frequency"])
    ax.set_title(title)
    ax.set_xlabel("State")
    ax.set_ylabel("Frequency")
    ax.set_ylim(0.0, 1.0)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path
