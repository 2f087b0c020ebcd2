# linmodels

Small linear models for learning and experimenting:

- `linmodels.linear_model.LinearModel`: linear regression (`y = w·x + b`)
  trained sample by sample with gradient descent, in 32-bit floats.
- `linmodels.moore_penrose.MoorePenrose`: least-squares regression solved in
  closed form with the normal equations, `W = (XᵀX)⁻¹ Xᵀ y`.
- `linmodels.pseudo_inverse.LinearRegression`: the same closed form written
  out by hand for two features and a bias.
- `linmodels.perceptron.Perceptron`: a binary classifier with a step
  activation (1 when `bias + w·x >= 0`, otherwise 0).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Gradient-descent regression

```python
from linmodels.linear_model import LinearModel, train_linear_model

model = LinearModel(1, 0.01)
model.train([[1], [2], [3], [4]], [3, 5, 7, 9], 1000)
print(model.predict([5]))          # close to 11
print(model.weights, model.bias)

weights, bias = train_linear_model([[1], [2], [3], [4]], [3, 5, 7, 9], 1000, 0.01)
```

`LinearModel.train` runs the given number of epochs over the samples and
updates the weights and bias after each sample. Samples whose length does not
match `input_size`, or an `X` and `y` of different lengths, raise
`ValueError`. `train_linear_model` builds a fresh model sized from the first
row of `X`, trains it and returns `(weights, bias)`.

### Closed-form least squares

```python
from linmodels.moore_penrose import MoorePenrose, train_moore_penrose, predict_moore_penrose

weights, bias = train_moore_penrose([[1], [2], [3]], [3, 5, 7])   # about [2.0], 1.0
print(predict_moore_penrose([*weights, bias], [4, 1]))             # about 9.0

model = MoorePenrose()
model.train([[1, 1], [2, 1], [3, 1]], [3, 5, 7])   # last column of ones gives the bias
print(model.weights)                                # about [2.0, 1.0]
print(model.predict([4, 1]))                        # about 9.0
```

`train_moore_penrose` adds the bias column itself; `MoorePenrose.train` does
not, so include a column of ones in `X` to fit a bias. `predict_moore_penrose`
is a plain dot product of the weights and `x`. A singular `XᵀX` raises
`ValueError`.

### Two-feature regression

```python
from linmodels.pseudo_inverse import LinearRegression

model = LinearRegression()
model.fit([[1, 2], [2, 5], [3, 7], [4, 8]], [4, 9, 13, 16])
print(model)                 # b = ..., w1 = ..., w2 = ...
print(model.predict(3, 6))
```

The fitted coefficients are the attributes `b`, `w1` and `w2`. `fit` raises
`ValueError` when the system is singular or when `X` and `Y` differ in length.

### Perceptron

```python
from linmodels.perceptron import Perceptron

p = Perceptron(2, 0.1)
for _ in range(10):
    for inputs, target in zip([[0, 0], [0, 1], [1, 0], [1, 1]], [0, 0, 0, 1]):
        p.train(inputs, target)
print(p)                     # Weights: ... | Bias: ...
print(p.predict([1, 0.5]))
```

## Command-line demos

Each command trains on small built-in datasets and prints what was learned:

```
linmodels-linear [--epochs N] [--learning-rate LR]
linmodels-regression
linmodels-perceptron [--epochs N] [--learning-rate LR]
```

- `linmodels-linear` trains `LinearModel` on several one- and two-feature
  datasets (defaults: 1000 epochs, learning rate 0.01) and prints weights,
  bias and predictions.
- `linmodels-regression` fits `LinearRegression` on a four-sample dataset and
  prints the coefficients and one prediction.
- `linmodels-perceptron` trains `Perceptron` on an AND-like dataset
  (defaults: 10 epochs, learning rate 0.1), printing the weights after each
  epoch and predictions for two held-out points.

## What it does not do

The models live in memory only: there is no saving or loading of trained
weights, no plotting, and no multi-layer networks. `MoorePenrose` has no
command of its own; use it from Python.