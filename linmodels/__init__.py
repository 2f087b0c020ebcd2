"""Small linear models: gradient-descent regression, closed-form least squares and a perceptron."""

__version__ = "0.1.0"
__all__ = ["linear_model", "moore_penrose", "pseudo_inverse", "perceptron"]