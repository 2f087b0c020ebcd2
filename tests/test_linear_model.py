import numpy as np
import pytest

from linmodels.linear_model import LinearModel, main, train_linear_model


def test_untrained_model_predicts_zero():
    model = LinearModel(3)
    assert model.predict([1.0, 2.0, 3.0]) == 0.0
    assert model.weights == [0.0, 0.0, 0.0]
    assert model.bias == 0.0


def test_zero_epochs_leaves_model_unchanged():
    model = LinearModel(1, 0.01)
    model.train([[1], [2]], [3, 5], 0)
    assert model.weights == [0.0]
    assert model.bias == 0.0


def test_learns_two_x_plus_one():
    model = LinearModel(1, 0.01)
    model.train([[1], [2], [3], [4]], [3, 5, 7, 9], 1000)
    assert model.predict([5]) == pytest.approx(11, abs=0.05)
    assert model.weights[0] == pytest.approx(2, abs=0.05)
    assert model.bias == pytest.approx(1, abs=0.05)


def test_training_points_are_fitted():
    X = [[1], [2], [3], [4]]
    y = [3, 5, 7, 9]
    model = LinearModel(1, 0.01)
    model.train(X, y, 1000)
    for x, target in zip(X, y):
        assert model.predict(x) == pytest.approx(target, abs=0.05)


def test_two_point_course_case_midpoint():
    model = LinearModel(1, 0.01)
    model.train([[1], [2]], [2, 3], 1000)
    assert model.predict([1.5]) == pytest.approx(2.5, abs=0.05)


def test_tricky_case_splits_weight_evenly():
    model = LinearModel(2, 0.01)
    model.train([[1, 1], [2, 2], [3, 3]], [1, 2, 3], 1000)
    w1, w2 = model.weights
    assert w1 == w2
    for x, target in zip([[1, 1], [2, 2], [3, 3]], [1, 2, 3]):
        assert model.predict(x) == pytest.approx(target, abs=0.05)


def test_nonlinear_case_approaches_least_squares():
    X = [[1], [2], [3]]
    y = [2, 3, 2.5]
    model = LinearModel(1, 0.01)
    model.train(X, y, 1000)
    design = np.hstack([np.array(X, dtype=float), np.ones((3, 1))])
    solution, *_ = np.linalg.lstsq(design, np.array(y, dtype=float), rcond=None)
    for row in X:
        best = solution[0] * row[0] + solution[1]
        assert model.predict(row) == pytest.approx(best, abs=0.1)


def test_weights_property_returns_copy():
    model = LinearModel(2)
    weights = model.weights
    weights[0] = 42.0
    assert model.weights == [0.0, 0.0]


def test_mismatched_sample_count_raises():
    model = LinearModel(1)
    with pytest.raises(ValueError):
        model.train([[1], [2]], [1], 10)


def test_wrong_feature_count_raises():
    model = LinearModel(2)
    with pytest.raises(ValueError):
        model.predict([1.0])
    with pytest.raises(ValueError):
        model.train([[1.0, 2.0, 3.0]], [1.0], 1)


def test_negative_input_size_raises():
    with pytest.raises(ValueError):
        LinearModel(-1)


def test_train_linear_model_matches_model():
    X = [[1, 1], [2, 2], [3, 1]]
    y = [2, 3, 2.5]
    weights, bias = train_linear_model(X, y, 200, 0.01)
    model = LinearModel(2, 0.01)
    model.train(X, y, 200)
    assert weights == model.weights
    assert bias == model.bias
    assert len(weights) == 2


def test_train_linear_model_empty_raises():
    with pytest.raises(ValueError):
        train_linear_model([], [], 10, 0.01)


def test_main_prints_results(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "y = 2x + 1" in out
    assert "Weights :" in out
    assert "Bias :" in out