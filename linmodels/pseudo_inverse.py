"""Two-feature linear regression with a bias, solved by inverting a 3x3 matrix by hand."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


class LinearRegression:
    """Fits y = b + w1 * x1 + w2 * x2 with (X^T X)^-1 X^T Y."""

    def __init__(self) -> None:
        self.w1 = 0.0
        self.w2 = 0.0
        self.b = 0.0

    def fit(self, X: Sequence[Sequence[float]], Y: Sequence[float]) -> None:
        """Solve for the bias and both weights; raise ValueError if singular."""
        if len(X) != len(Y):
            raise ValueError(f"X has {len(X)} samples but Y has {len(Y)} targets")

        n = float(len(X))
        s_x1 = s_x2 = s_x1x1 = s_x2x2 = s_x1x2 = 0.0
        s_y = s_x1y = s_x2y = 0.0
        for row, y in zip(X, Y):
            x1, x2 = float(row[0]), float(row[1])
            s_x1 += x1
            s_x2 += x2
            s_y += y
            s_x1x1 += x1 * x1
            s_x2x2 += x2 * x2
            s_x1x2 += x1 * x2
            s_x1y += x1 * y
            s_x2y += x2 * y

        a, b, c = n, s_x1, s_x2
        d, e, f = s_x1, s_x1x1, s_x1x2
        g, h, i = s_x2, s_x1x2, s_x2x2

        det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
        if det == 0:
            raise ValueError("X^T X is singular; the system has no unique solution")

        inverse = (
            ((e * i - f * h) / det, -(b * i - c * h) / det, (b * f - c * e) / det),
            (-(d * i - f * g) / det, (a * i - c * g) / det, -(a * f - c * d) / det),
            ((d * h - e * g) / det, -(a * h - b * g) / det, (a * e - b * d) / det),
        )
        xty = (s_y, s_x1y, s_x2y)
        self.b, self.w1, self.w2 = (
            sum(m * v for m, v in zip(inv_row, xty)) for inv_row in inverse
        )

    def predict(self, x1: float, x2: float) -> float:
        """Return b + w1 * x1 + w2 * x2."""
        return self.b + self.w1 * x1 + self.w2 * x2

    def __str__(self) -> str:
        return f"b = {self.b:g}, w1 = {self.w1:g}, w2 = {self.w2:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Fit the sample dataset and print the coefficients and one prediction."""
    parser = argparse.ArgumentParser(
        description="Fit a two-feature linear regression on a sample dataset."
    )
    parser.parse_args(argv)

    X = [[1, 2], [2, 5], [3, 7], [4, 8]]
    Y = [4, 9, 13, 16]
    model = LinearRegression()
    model.fit(X, Y)
    print(model)
    print(f"Prediction (3, 6): {model.predict(3, 6):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())