from __future__ import annotations

"""
Reporting helpers: standard classification and regression scores and a
labelled view of the fitted parameters.
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import DECISION_THRESHOLD


def compute_classification_metrics(y_true, probs: np.ndarray, threshold: float = DECISION_THRESHOLD):
    """
    Scores of the thresholded logistic output against 0/1 labels. Unlike
    Regression.accuracy, negatives predicted as negatives count as hits here.
    ROC-AUC is nan when the labels hold a single class.
    """
    labels = np.asarray(y_true).astype(int)
    predicted = (np.asarray(probs) >= threshold).astype(int)

    cm = metrics.confusion_matrix(labels, predicted, labels=[0, 1])
    if np.unique(labels).size < 2:
        roc_auc = float("nan")
    else:
        roc_auc = metrics.roc_auc_score(labels, probs)

    return {
        "accuracy": metrics.accuracy_score(labels, predicted),
        "precision": metrics.precision_score(labels, predicted, zero_division=0),
        "recall": metrics.recall_score(labels, predicted, zero_division=0),
        "f1": metrics.f1_score(labels, predicted, zero_division=0),
        "roc_auc": roc_auc,
        "confusion_matrix": cm,
    }


def compute_regression_metrics(y_true, preds: np.ndarray):
    return {
        "mse": metrics.mean_squared_error(y_true, preds),
        "mae": metrics.mean_absolute_error(y_true, preds),
        "r2": metrics.r2_score(y_true, preds),
    }


def summarize_theta(theta: np.ndarray, feature_names: list[str] | None = None) -> pd.Series:
    """Theta as a Series; unnamed columns become bias, x1, x2, ..."""
    if feature_names is None:
        feature_names = ["bias"] + [f"x{i}" for i in range(1, len(theta))]
    return pd.Series(theta, index=feature_names, name="theta")
