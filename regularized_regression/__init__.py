"""
Linear and logistic regression fitted by regularized cost minimization, with
a scan over regularization strengths to choose lambda.

This package contains the model and its cost function, pluggable iterative
minimizers, a loader for whitespace separated training sets, and reporting
helpers used by main.py.
"""

from .constants import DECISION_THRESHOLD, DEFAULT_MAX_ITERS, LAMBDAS, SEARCH_ITERS
from .data_prep import add_bias, load_file
from .metrics import compute_classification_metrics, compute_regression_metrics, summarize_theta
from .optimizers import ConjugateGradient, GradientDescent, Optimizer
from .regression import Regression, sigmoid

__all__ = [
    "DECISION_THRESHOLD",
    "DEFAULT_MAX_ITERS",
    "LAMBDAS",
    "SEARCH_ITERS",
    "add_bias",
    "load_file",
    "compute_classification_metrics",
    "compute_regression_metrics",
    "summarize_theta",
    "ConjugateGradient",
    "GradientDescent",
    "Optimizer",
    "Regression",
    "sigmoid",
]
