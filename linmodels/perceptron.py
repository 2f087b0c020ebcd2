"""A single-layer perceptron with a step activation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


class Perceptron:
    """Binary classifier that outputs 1 when bias + w.x >= 0, else 0."""

    def __init__(self, input_size: int, learning_rate: float = 0.1) -> None:
        if input_size < 0:
            raise ValueError(f"input_size must be non-negative, got {input_size}")
        self._weights = [0.0] * input_size
        self.bias = 0.0
        self.learning_rate = learning_rate

    @property
    def weights(self) -> list[float]:
        """A copy of the current weights."""
        return list(self._weights)

    def _check(self, inputs: Sequence[float]) -> None:
        if len(inputs) != len(self._weights):
            raise ValueError(f"expected {len(self._weights)} inputs, got {len(inputs)}")

    def activate(self, total: float) -> int:
        """Step function: 1 for a non-negative sum, 0 otherwise."""
        value = float(total)
        if value >= 0.0:
            return 1
        return 0

    def predict(self, inputs: Sequence[float]) -> int:
        """Classify one sample as 0 or 1."""
        self._check(inputs)
        total = self.bias + sum(w * x for w, x in zip(self._weights, inputs))
        return self.activate(total)

    def train(self, inputs: Sequence[float], target: int) -> None:
        """Apply the perceptron update rule for one sample."""
        error = target - self.predict(inputs)
        step = self.learning_rate * error
        self._weights = [w + step * x for w, x in zip(self._weights, inputs)]
        self.bias += step

    def __str__(self) -> str:
        weights = " ".join(f"{w:g}" for w in self._weights)
        return f"Weights: {weights} | Bias: {self.bias:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Train on an AND-like dataset, printing weights per epoch, then test."""
    parser = argparse.ArgumentParser(
        description="Train a perceptron on an AND-like dataset."
    )
    parser.add_argument("--epochs", type=int, default=10)
    parser.add_argument("--learning-rate", type=float, default=0.1)
    args = parser.parse_args(argv)

    X = [[0, 0], [0, 1], [1, 0], [1, 1], [0.5, 0.5], [1, 0.5]]
    Y = [0, 0, 0, 1, 0, 1]
    train_set = list(zip(X[:4], Y[:4]))
    test_set = list(zip(X[4:], Y[4:]))

    perceptron = Perceptron(2, args.learning_rate)
    for epoch in range(1, args.epochs + 1):
        for inputs, target in train_set:
            perceptron.train(inputs, target)
        print(f"Epoch {epoch}: {perceptron}")

    print("\nTesting on unseen data:")
    for inputs, target in test_set:
        prediction = perceptron.predict(inputs)
        print(
            f"Input: ({inputs[0]:g},{inputs[1]:g}) => Prediction: {prediction}"
            f" | Target: {target}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())