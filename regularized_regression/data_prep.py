from __future__ import annotations

"""
Loading training sets from whitespace separated text files.
"""

import io
from pathlib import Path

import numpy as np
import pandas as pd

from .regression import Regression


def _read_until_blank(file_path: Path) -> str:
    """Text of the file up to (not including) the first blank line."""
    lines = []
    for line in Path(file_path).read_text().splitlines():
        if line == "":
            break
        lines.append(line)
    return "\n".join(lines)


def add_bias(X) -> np.ndarray:
    """Prepend a column of ones to X."""
    X_arr = np.asarray(X, dtype=float)
    return np.hstack([np.ones((X_arr.shape[0], 1)), X_arr])


def load_file(file_path: Path, linear: bool = True, with_bias: bool = False) -> Regression:
    """
    Parse a training set and return a Regression with theta set to zeros.

    The file format is:
        X11 X12 ... X1N Y1
        X21 X22 ... X2N Y2
        ... ... ... ... ..

    The last column is the value to predict. Parsing stops at the first
    blank line, and every row must have the same number of values. With
    ``with_bias`` a column of ones is prepended to X.
    """
    text = _read_until_blank(file_path)
    if not text:
        return Regression(np.empty((0, 0)), np.empty(0), linear=linear)

    df = pd.read_csv(io.StringIO(text), sep=r"\s+", header=None, dtype=float)
    if df.isna().any().any():
        raise ValueError(f"rows of {file_path} have different numbers of columns")
    X = df.iloc[:, :-1].to_numpy()
    y = df.iloc[:, -1].to_numpy()
    if with_bias:
        X = add_bias(X)
    return Regression(X, y, linear=linear)
