"""Linear regression trained by stochastic gradient descent (y = w.x + b)."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import numpy as np

_DTYPE = np.float32


def _as_vector(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=_DTYPE).reshape(-1)


class LinearModel:
    """A single-output linear model with weights and a bias, trained per sample."""

    def __init__(self, input_size: int, learning_rate: float = 0.01) -> None:
        if input_size < 0:
            raise ValueError(f"input_size must be non-negative, got {input_size}")
        self._weights = np.zeros(input_size, dtype=_DTYPE)
        self._bias = _DTYPE(0.0)
        self.learning_rate = _DTYPE(learning_rate)

    @property
    def weights(self) -> list[float]:
        """A copy of the current weights."""
        return [float(w) for w in self._weights]

    @property
    def bias(self) -> float:
        """The current bias."""
        return float(self._bias)

    @property
    def input_size(self) -> int:
        return len(self._weights)

    def _check_sample(self, x: np.ndarray) -> None:
        if x.shape[0] != self._weights.shape[0]:
            raise ValueError(
                f"expected {self._weights.shape[0]} features, got {x.shape[0]}"
            )

    def _predict_vector(self, x: np.ndarray) -> np.float32:
        total = self._bias
        for w, v in zip(self._weights, x):
            total = _DTYPE(total + w * v)
        return total

    def predict(self, x: Sequence[float]) -> float:
        """Return bias + sum of weight * feature for one sample."""
        vector = _as_vector(x)
        self._check_sample(vector)
        return float(self._predict_vector(vector))

    def train(
        self,
        X: Sequence[Sequence[float]],
        y: Sequence[float],
        epochs: int,
    ) -> None:
        """Update weights and bias sample by sample for the given number of epochs."""
        samples = [_as_vector(row) for row in X]
        targets = _as_vector(y)
        if len(samples) != targets.shape[0]:
            raise ValueError(
                f"X has {len(samples)} samples but y has {targets.shape[0]} targets"
            )
        for sample in samples:
            self._check_sample(sample)

        lr = self.learning_rate
        for _ in range(epochs):
            for sample, target in zip(samples, targets):
                error = _DTYPE(target - self._predict_vector(sample))
                step = _DTYPE(lr * error)
                self._weights = (self._weights + step * sample).astype(_DTYPE)
                self._bias = _DTYPE(self._bias + step)


def train_linear_model(
    X: Sequence[Sequence[float]],
    y: Sequence[float],
    epochs: int,
    learning_rate: float = 0.01,
) -> tuple[list[float], float]:
    """Train a fresh model on X and y and return its (weights, bias)."""
    rows = [list(row) for row in X]
    if not rows:
        raise ValueError("X must hold at least one sample")
    model = LinearModel(len(rows[0]), learning_rate)
    model.train(rows, y, epochs)
    return model.weights, model.bias


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_point(x: Sequence[float]) -> str:
    if len(x) == 1:
        return _fmt(x[0])
    return "(" + ", ".join(_fmt(v) for v in x) + ")"


def _demo(title: str, X, y, extra=(), epochs: int = 1000, lr: float = 0.01) -> None:
    print()
    print(f"{title}:")
    model = LinearModel(len(X[0]), lr)
    model.train(X, y, epochs)
    print(f"Training on X = {X}, y = {y}")
    print()
    print("Weights : " + ", ".join(_fmt(w) for w in model.weights))
    print(f"Bias : {_fmt(model.bias)}")
    print()
    for x, target in zip(X, y):
        print(
            f"x = {_fmt_point(x)} -> prediction (training data) = "
            f"{_fmt(model.predict(x))} (y = {_fmt(target)})"
        )
    for x, expected in extra:
        print(
            f"x = {_fmt_point(x)} -> prediction = {_fmt(model.predict(x))}"
            f" (y ~= {_fmt(expected)})"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Train the model on a few small datasets and print the results."""
    parser = argparse.ArgumentParser(
        description="Train linear models on sample datasets and print predictions."
    )
    parser.add_argument("--epochs", type=int, default=1000)
    parser.add_argument("--learning-rate", type=float, default=0.01)
    args = parser.parse_args(argv)
    epochs, lr = args.epochs, args.learning_rate

    _demo("y = 2x + 1", [[1], [2], [3], [4]], [3, 5, 7, 9], [([5], 11)], epochs, lr)
    _demo("Linear simple 2D (y = x + 1)", [[1], [2]], [2, 3], [([1.5], 2.5)], epochs, lr)
    _demo(
        "Non-linear simple 2D (best straight-line fit only)",
        [[1], [2], [3]],
        [2, 3, 2.5],
        [([1.5], 2.69), ([2.5], 2.7), ([3.5], 1.69)],
        epochs,
        lr,
    )
    _demo("Linear simple 3D", [[1, 1], [2, 2], [3, 1]], [2, 3, 2.5], (), epochs, lr)
    _demo("Linear tricky 3D", [[1, 1], [2, 2], [3, 3]], [1, 2, 3], (), epochs, lr)
    _demo(
        "Non-linear simple 3D (XOR-like, not linearly representable)",
        [[1, 0], [0, 1], [1, 1], [0, 0]],
        [2, 1, -2, -1],
        (),
        epochs,
        lr,
    )
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())