"""Least-squares linear regression solved in closed form with the normal equations."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_DTYPE = np.float32


def _solve_normal_equations(X: np.ndarray, y: np.ndarray) -> np.ndarray:
    if X.ndim != 2:
        raise ValueError("X must be a two-dimensional matrix")
    if X.shape[0] != y.shape[0]:
        raise ValueError(f"X has {X.shape[0]} rows but y has {y.shape[0]} values")
    gram = X.T @ X
    try:
        inverse = np.linalg.inv(gram)
    except np.linalg.LinAlgError as exc:
        raise ValueError("X^T X is singular; the system has no unique solution") from exc
    return (inverse @ X.T @ y).astype(_DTYPE)


class MoorePenrose:
    """Linear regression whose weights are (X^T X)^-1 X^T y.

    The bias is not added implicitly: include a column of ones in X to fit one.
    """

    def __init__(self) -> None:
        self._weights = np.zeros(0, dtype=_DTYPE)

    @property
    def weights(self) -> list[float]:
        """A copy of the fitted weights."""
        return [float(w) for w in self._weights]

    def train(self, X: Sequence[Sequence[float]], y: Sequence[float]) -> None:
        """Fit the weights to the rows of X and the targets y."""
        matrix = np.asarray(X, dtype=_DTYPE)
        targets = np.asarray(y, dtype=_DTYPE).reshape(-1)
        self._weights = _solve_normal_equations(matrix, targets)

    def predict(self, x: Sequence[float]) -> float:
        """Return the dot product of the weights with x."""
        vector = np.asarray(x, dtype=_DTYPE).reshape(-1)
        if vector.shape[0] != self._weights.shape[0]:
            raise ValueError(
                f"expected {self._weights.shape[0]} features, got {vector.shape[0]}"
            )
        return float(self._weights @ vector)


def train_moore_penrose(
    X: Sequence[Sequence[float]], y: Sequence[float]
) -> tuple[list[float], float]:
    """Fit weights and a bias to X and y; return (weights, bias)."""
    matrix = np.asarray(X, dtype=_DTYPE)
    if matrix.ndim != 2:
        raise ValueError("X must be a two-dimensional matrix")
    with_bias = np.hstack([matrix, np.ones((matrix.shape[0], 1), dtype=_DTYPE)])
    targets = np.asarray(y, dtype=_DTYPE).reshape(-1)
    solution = _solve_normal_equations(with_bias, targets)
    return [float(w) for w in solution[:-1]], float(solution[-1])


def predict_moore_penrose(weights: Sequence[float], x: Sequence[float]) -> float:
    """Return the dot product of weights and x (the bias is not included)."""
    w = np.asarray(weights, dtype=_DTYPE).reshape(-1)
    v = np.asarray(x, dtype=_DTYPE).reshape(-1)
    if w.shape != v.shape:
        raise ValueError(f"weights have {w.shape[0]} values but x has {v.shape[0]}")
    return float(w @ v)