from __future__ import annotations

"""
Plot of the lambda search: cost and accuracy for every candidate.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def plot_lambda_search(history: pd.DataFrame, path: Path, best_lambda: float | None = None) -> Path:
    """
    Save a two-axis plot of ``history`` (columns lambda, cost, accuracy) as
    produced by Regression.minimize_cost. Returns the written path.
    """
    path = Path(path)
    fig, ax_cost = plt.subplots(figsize=(8, 5))
    ax_cost.plot(history["lambda"], history["cost"], marker="o", color="darkorange", label="cost")
    ax_cost.set_xscale("symlog", linthresh=1e-3)
    ax_cost.set_xlabel("lambda")
    ax_cost.set_ylabel("cost")

    ax_acc = ax_cost.twinx()
    ax_acc.plot(history["lambda"], history["accuracy"], marker="s", color="navy", label="accuracy")
    ax_acc.set_ylim([0.0, 1.05])
    ax_acc.set_ylabel("accuracy")

    if best_lambda is not None:
        ax_cost.axvline(best_lambda, color="grey", linestyle="--", label=f"best lambda = {best_lambda:g}")

    handles = ax_cost.get_legend_handles_labels()[0] + ax_acc.get_legend_handles_labels()[0]
    ax_cost.legend(handles=handles, loc="upper left")
    ax_cost.grid(True)
    ax_cost.set_title("Lambda search")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
