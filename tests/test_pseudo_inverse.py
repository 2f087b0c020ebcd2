import pytest

from linmodels.pseudo_inverse import LinearRegression, main


def test_untrained_model_predicts_zero():
    assert LinearRegression().predict(3, 4) == 0


def test_recovers_exact_plane():
    X = [[1, 2], [2, 5], [3, 7], [4, 9], [0, 1]]
    Y = [1 + 2 * a + 3 * b for a, b in X]
    model = LinearRegression()
    model.fit(X, Y)
    assert model.b == pytest.approx(1, abs=1e-6)
    assert model.w1 == pytest.approx(2, abs=1e-6)
    assert model.w2 == pytest.approx(3, abs=1e-6)
    assert model.predict(10, 20) == pytest.approx(1 + 2 * 10 + 3 * 20, abs=1e-5)


def test_sample_dataset_satisfies_normal_equations():
    X = [[1, 2], [2, 5], [3, 7], [4, 8]]
    Y = [4, 9, 13, 16]
    model = LinearRegression()
    model.fit(X, Y)
    residuals = [t - model.predict(a, b) for (a, b), t in zip(X, Y)]
    assert sum(residuals) == pytest.approx(0, abs=1e-9)
    assert sum(r * a for r, (a, _) in zip(residuals, X)) == pytest.approx(0, abs=1e-9)
    assert sum(r * b for r, (_, b) in zip(residuals, X)) == pytest.approx(0, abs=1e-9)


def test_collinear_features_raise():
    model = LinearRegression()
    with pytest.raises(ValueError):
        model.fit([[1, 2], [2, 4], [3, 6]], [1, 2, 3])


def test_single_sample_is_singular():
    with pytest.raises(ValueError):
        LinearRegression().fit([[1, 2]], [3])


def test_failed_fit_leaves_coefficients_unchanged():
    model = LinearRegression()
    with pytest.raises(ValueError):
        model.fit([[1, 1], [2, 2]], [1, 2])
    assert (model.b, model.w1, model.w2) == (0, 0, 0)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        LinearRegression().fit([[1, 2], [2, 5], [3, 7]], [1, 2])


def test_str_lists_coefficients():
    model = LinearRegression()
    assert str(model) == "b = 0, w1 = 0, w2 = 0"


def test_main_prints_coefficients(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("b = ")
    assert "Prediction (3, 6):" in out