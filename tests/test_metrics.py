import math

import numpy as np
import pytest

from regularized_regression import compute_classification_metrics, compute_regression_metrics, summarize_theta


def test_classification_metrics():
    result = compute_classification_metrics([0, 0, 1, 1], np.array([0.1, 0.6, 0.7, 0.9]))
    assert result["accuracy"] == pytest.approx(0.75)
    assert result["precision"] == pytest.approx(2 / 3)
    assert result["recall"] == pytest.approx(1.0)
    assert result["roc_auc"] == pytest.approx(1.0)
    assert result["confusion_matrix"].tolist() == [[1, 1], [0, 2]]


def test_classification_metrics_single_class():
    result = compute_classification_metrics([0, 0], np.array([0.2, 0.7]))
    assert math.isnan(result["roc_auc"])
    assert result["precision"] == 0


def test_regression_metrics():
    result = compute_regression_metrics([2.0, 4.0, 6.0], np.array([2.0, 4.0, 7.0]))
    assert result["mse"] == pytest.approx(1 / 3)
    assert result["mae"] == pytest.approx(1 / 3)
    assert result["r2"] == pytest.approx(1 - 1 / 8)


def test_summarize_theta():
    summary = summarize_theta(np.array([0.5, 2.0, -1.0]))
    assert summary.index.tolist() == ["bias", "x1", "x2"]
    assert summary["x1"] == 2.0

    named = summarize_theta(np.array([1.0, 3.0]), ["intercept", "size"])
    assert named["size"] == 3.0
