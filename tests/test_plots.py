import pandas as pd

from regularized_regression.plots import plot_lambda_search


def test_plot_lambda_search(tmp_path):
    history = pd.DataFrame(
        {
            "lambda": [0.0, 0.01, 1.0, 100.0],
            "cost": [0.2, 0.25, 0.5, float("nan")],
            "accuracy": [0.5, 0.5, 0.25, 0.0],
        }
    )
    path = plot_lambda_search(history, tmp_path / "scan.png", best_lambda=0.0)
    assert path.exists()
    assert path.stat().st_size > 0
