import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from regularized_regression import Regression


@pytest.fixture
def line_model() -> Regression:
    """y = 2x with the bias column first."""
    return Regression([[1, 1], [1, 2], [1, 3]], [2, 4, 6], linear=True)


@pytest.fixture
def separable_model() -> Regression:
    return Regression([[1, 0], [1, 1], [1, 2], [1, 3]], [0, 0, 1, 1], linear=False)


@pytest.fixture
def random_data():
    rng = np.random.default_rng(7)
    X = np.hstack([np.ones((20, 1)), rng.normal(size=(20, 3))])
    y = rng.normal(size=20)
    return X, y


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "train.txt"
    path.write_text("1 1 2\n1 2 4\n1 3 6\n")
    return path
