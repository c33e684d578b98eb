from __future__ import annotations

"""
Linear and logistic regression trained by minimizing a regularized cost
function, plus a scan over regularization strengths to pick lambda.
"""

from typing import Sequence

import numpy as np
import pandas as pd

from .constants import DECISION_THRESHOLD, LAMBDAS, SEARCH_ITERS
from .optimizers import ConjugateGradient, Optimizer


def sigmoid(z):
    """Element-wise logistic function. Saturates to exactly 0 or 1 for large |z|."""
    return 1.0 / (1.0 + np.exp(-z))


class Regression:
    """
    Training set, targets and parameters of a linear or logistic regression.

    ``X`` holds one row per training case and is expected to carry the bias
    column (all ones) first; ``theta`` has one entry per column of ``X``.
    ``linear`` selects the hypothesis and cost variant and never changes.
    """

    def __init__(self, X, y, theta=None, linear: bool = True):
        self.X = np.asarray(X, dtype=float)
        if self.X.ndim == 1 and self.X.size == 0:
            self.X = self.X.reshape(0, 0)
        self.y = np.asarray(y, dtype=float)
        self.linear = linear
        if theta is None:
            self.initialize_theta()
        else:
            self.theta = np.array(theta, dtype=float)
        self.search_history_: pd.DataFrame | None = None

    @property
    def n_features(self) -> int:
        return self.X.shape[1] if self.X.ndim == 2 else 0

    def initialize_theta(self):
        """Reset theta to zeros, one per feature column."""
        self.theta = np.zeros(self.n_features)

    def copy(self) -> Regression:
        return Regression(self.X.copy(), self.y.copy(), self.theta.copy(), linear=self.linear)

    def linear_hypothesis(self, x) -> float:
        return float(np.dot(np.asarray(x, dtype=float), self.theta))

    def logistic_hypothesis(self, x) -> float:
        return float(sigmoid(np.dot(np.asarray(x, dtype=float), self.theta)))

    def hypothesis(self, x) -> float:
        """Prediction for a single row using the variant chosen at construction."""
        if self.linear:
            return self.linear_hypothesis(x)
        return self.logistic_hypothesis(x)

    def predict_proba(self, X=None) -> np.ndarray:
        """Return P(y=1) for each row of X (defaults to the training rows)."""
        if self.linear:
            raise RuntimeError("predict_proba is only defined for logistic regression.")
        X_arr = self.X if X is None else np.asarray(X, dtype=float)
        return sigmoid(X_arr @ self.theta)

    def predict(self, X=None, threshold: float = DECISION_THRESHOLD) -> np.ndarray:
        """Raw predictions for linear models, 0/1 labels for logistic ones."""
        X_arr = self.X if X is None else np.asarray(X, dtype=float)
        if self.linear:
            return X_arr @ self.theta
        return (self.predict_proba(X_arr) >= threshold).astype(int)

    def cost_function(self, lam: float, calc_grad: bool = True):
        """
        Regularized cost for the current theta, and its gradient when
        ``calc_grad`` is true (otherwise the gradient slot is None).

        ``lam`` is the regularization strength: 0 disables regularization,
        larger values push every non-bias parameter towards zero. Raises
        ValueError when X, y and theta disagree on their dimensions.
        """
        if len(self.y) != len(self.X):
            raise ValueError(
                f"row/label count mismatch: X has {len(self.X)} rows but y has {len(self.y)} values"
            )
        if len(self.theta) != self.n_features:
            raise ValueError(
                f"parameter/feature width mismatch: theta has {len(self.theta)} values "
                f"but X has {self.n_features} columns"
            )

        if self.linear:
            return self._linear_cost(lam, calc_grad)
        return self._logistic_cost(lam, calc_grad)

    def _linear_cost(self, lam: float, calc_grad: bool):
        theta = self.theta.copy()
        m = np.float64(len(self.X))

        pred = self.X @ theta
        errors = np.sum((pred - self.y) ** 2) / (2 * m)
        reg_term = (lam / (2 * m)) * np.sum(theta[1:] ** 2)
        j = errors + reg_term

        grad = None
        if calc_grad:
            # the bias is regularized here, unlike in the cost
            grad = ((pred - self.y) @ self.X) * (1 / m) + theta * (lam / m)
        return float(j), grad

    def _logistic_cost(self, lam: float, calc_grad: bool):
        theta = self.theta.copy()
        m = np.float64(len(self.X))

        hx = sigmoid(self.X @ theta)
        j = (-self.y @ np.log(hx) - (1 - self.y) @ np.log(1 - hx)) / m

        # Regularization
        if theta.size:
            theta[0] = 0.0
        j += lam / (2 * m) * np.sum(theta**2)

        grad = None
        if calc_grad:
            grad = ((hx - self.y) @ self.X) * (1 / m) + theta * (lam / m)
        return float(j), grad

    def accuracy(self) -> float:
        """
        Fraction of rows with a positive label that the logistic hypothesis
        puts at or above the 0.5 threshold. Rows labelled 0 never count as
        correct. Returns nan for an empty training set.
        """
        m = len(self.X)
        if m == 0:
            return float("nan")

        hx = sigmoid(self.X @ self.theta)
        correct = np.count_nonzero((hx >= DECISION_THRESHOLD) & (self.y == 1))
        return correct / m

    def shuffle(self, rng=None) -> Regression:
        """
        Copy of the instance with the rows of X and y permuted together.
        ``rng`` is a numpy Generator, a seed, or None for fresh entropy.
        """
        rng = np.random.default_rng(rng)
        perm = rng.permutation(len(self.X))
        return Regression(self.X[perm], self.y[perm], self.theta.copy(), linear=self.linear)

    def minimize_cost(
        self,
        max_iters: int,
        shuffle_data: bool = False,
        verbose: bool = False,
        *,
        optimizer: Optimizer | None = None,
        rng=None,
        lambdas: Sequence[float] = LAMBDAS,
    ):
        """
        Pick lambda by training briefly with every candidate and keeping the
        one with the best accuracy, then train with it for ``max_iters``.

        The fitted theta is copied back onto this instance. Returns
        ``(final_cost, training_data, best_lambda, test_data)``. The data is
        meant to be split into training (60%), cross validation (20%) and
        test (20%) sets, but every row is currently used for training and
        ``test_data`` is None.
        """
        if optimizer is None:
            optimizer = ConjugateGradient()

        data = self.shuffle(rng) if shuffle_data else self
        training_data = Regression(data.X, data.y, data.theta.copy(), linear=self.linear)
        init_theta = training_data.theta.copy()

        best_accuracy = 0.0
        best_lambda = lambdas[0]
        rows = []
        for lam in lambdas:
            if verbose:
                print(f"Checking lambda: {lam}")
            training_data.theta = init_theta.copy()
            optimizer.minimize(training_data, lam, SEARCH_ITERS, verbose)

            j, _ = training_data.cost_function(lam, calc_grad=False)
            accuracy = training_data.accuracy()
            rows.append({"lambda": lam, "cost": j, "accuracy": accuracy})

            if accuracy > best_accuracy:
                best_accuracy = accuracy
                best_lambda = lam

        self.search_history_ = pd.DataFrame(rows, columns=["lambda", "cost", "accuracy"])

        # Refit starts from the parameters left by the last candidate.
        optimizer.minimize(training_data, best_lambda, max_iters, verbose)
        self.theta = training_data.theta.copy()

        final_cost, _ = training_data.cost_function(best_lambda, calc_grad=False)
        if verbose:
            print(f"Best lambda: {best_lambda} (accuracy {best_accuracy:.3f}), final cost {final_cost:.6f}")

        return final_cost, training_data, best_lambda, None
