from __future__ import annotations

"""
Iterative minimizers for Regression.minimize_cost. Each one refines
``model.theta`` in place by calling ``model.cost_function`` repeatedly.
"""

from typing import Protocol

import numpy as np
from scipy.optimize import minimize


class Optimizer(Protocol):
    def minimize(self, model, lam: float, max_iters: int, verbose: bool = False) -> None:
        ...


class ConjugateGradient:
    """
    Nonlinear conjugate gradient (scipy's CG) driven by the model's cost
    and gradient. Default minimizer for the lambda search.
    """

    def __init__(self):
        self.n_iter_: int = 0
        self.message_: str = ""

    def minimize(self, model, lam: float, max_iters: int, verbose: bool = False) -> None:
        self.n_iter_ = 0
        if max_iters <= 0 or model.theta.size == 0:
            return

        def cost(theta: np.ndarray):
            model.theta[:] = theta
            return model.cost_function(lam, calc_grad=True)

        res = minimize(
            cost,
            model.theta.copy(),
            jac=True,
            method="CG",
            options={"maxiter": max_iters},
        )
        model.theta[:] = res.x
        self.n_iter_ = int(res.nit)
        self.message_ = str(res.message)

        if verbose:
            print(f"[CG] lambda={lam}, iterations={res.nit}, cost={res.fun:.6f}")


class GradientDescent:
    """
    Plain batch gradient descent with a fixed learning rate. Stops early
    once a step moves theta by less than ``tol``.
    """

    def __init__(self, lr: float = 0.1, tol: float = 1e-6):
        self.lr = lr
        self.tol = tol
        self.n_iter_: int = 0

    def minimize(self, model, lam: float, max_iters: int, verbose: bool = False) -> None:
        self.n_iter_ = 0
        for step in range(1, max_iters + 1):
            j, grad = model.cost_function(lam, calc_grad=True)
            new_theta = model.theta - self.lr * grad
            delta = np.linalg.norm(new_theta - model.theta)

            model.theta[:] = new_theta
            self.n_iter_ = step

            if verbose and step % 500 == 0:
                print(f"[GD] step={step}, lambda={lam}, cost={j:.4f}")
            if delta < self.tol:
                break
