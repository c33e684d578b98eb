from __future__ import annotations

"""
CLI entrypoint: load a training set, pick lambda with the regularization
scan and report the fitted model. Choose the variant via --model.
"""

import argparse
from pathlib import Path

import pandas as pd

from regularized_regression import (
    DEFAULT_MAX_ITERS,
    ConjugateGradient,
    GradientDescent,
    compute_classification_metrics,
    compute_regression_metrics,
    load_file,
    summarize_theta,
)
from regularized_regression.plots import plot_lambda_search


def print_metrics(label: str, scores: dict):
    """One summary line of classification scores plus the confusion counts."""
    columns = [("Acc", "accuracy"), ("Prec", "precision"), ("Rec", "recall"), ("F1", "f1"), ("ROC-AUC", "roc_auc")]
    summary = " | ".join(f"{name} {scores[key]:.3f}" for name, key in columns)
    print(f"[{label}] {summary}")
    tn, fp, fn, tp = scores["confusion_matrix"].ravel()
    print(f"    TN {tn}, FP {fp}, FN {fn}, TP {tp}")


def build_arg_parser():
    """CLI parser with knobs for the data file, model variant and optimizer."""
    parser = argparse.ArgumentParser(
        description="Fit a regularized linear or logistic regression and choose lambda."
    )
    parser.add_argument("--data-path", type=Path, default=Path("data/train.txt"))
    parser.add_argument(
        "--model",
        choices=["linear", "logistic"],
        default="linear",
        help="linear: squared error cost; logistic: cross-entropy cost with sigmoid hypothesis.",
    )
    parser.add_argument(
        "--max-iter",
        type=int,
        default=DEFAULT_MAX_ITERS,
        help="Optimizer iterations for the final fit with the chosen lambda.",
    )
    parser.add_argument("--shuffle", action="store_true", help="Shuffle rows before training.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the row shuffle.")
    parser.add_argument(
        "--optimizer",
        choices=["cg", "gd"],
        default="cg",
        help="cg: conjugate gradient (scipy); gd: batch gradient descent.",
    )
    parser.add_argument("--lr", type=float, default=0.1, help="Learning rate for --optimizer gd.")
    parser.add_argument(
        "--add-bias", action="store_true", help="Prepend a column of ones to the features."
    )
    parser.add_argument("--plot-path", type=Path, default=None, help="Save the lambda scan plot here.")
    parser.add_argument("--verbose", action="store_true")
    return parser


def build_optimizer(args: argparse.Namespace):
    if args.optimizer == "gd":
        return GradientDescent(lr=args.lr)
    return ConjugateGradient()


def main(args: argparse.Namespace | None = None):
    """Run the lambda scan and the final fit, then print a report."""
    args = args or build_arg_parser().parse_args()

    model = load_file(args.data_path, linear=args.model == "linear", with_bias=args.add_bias)
    print(f"Training cases: {len(model.X)}, features: {model.n_features}, model: {args.model}")

    final_cost, training_data, best_lambda, _ = model.minimize_cost(
        args.max_iter,
        shuffle_data=args.shuffle,
        verbose=args.verbose,
        optimizer=build_optimizer(args),
        rng=args.seed,
    )

    print("\nLambda scan:")
    with pd.option_context("display.float_format", "{:.6f}".format):
        print(model.search_history_.to_string(index=False))

    print(f"\nBest lambda: {best_lambda}")
    print(f"Final cost: {final_cost:.6f}")
    print("\nTheta:")
    print(summarize_theta(model.theta))

    if model.linear:
        reg = compute_regression_metrics(model.y, model.predict())
        print(f"\nMSE {reg['mse']:.4f} | MAE {reg['mae']:.4f} | R2 {reg['r2']:.4f}")
    else:
        print(f"\nPositive-label accuracy: {model.accuracy():.3f}")
        print_metrics("Logistic regression", compute_classification_metrics(model.y, model.predict_proba()))

    if args.plot_path is not None:
        plot_lambda_search(model.search_history_, args.plot_path, best_lambda=best_lambda)
        print(f"Saved lambda scan plot to {args.plot_path}")

    return final_cost, training_data, best_lambda


if __name__ == "__main__":
    main()
