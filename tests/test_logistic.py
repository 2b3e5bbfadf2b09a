import math

import pytest

from atlasml.dataframe import DataFrame
from atlasml.logistic import LogisticRegressionModel


def _separable():
    data = [[-2.0, 1.0], [-1.0, 0.5], [1.0, -0.5], [2.0, -1.0]]
    target = [0.0, 0.0, 1.0, 1.0]
    return DataFrame(data, target)


def _log_loss(model, df):
    total = 0.0
    for row, y in df:
        p = model.predict(row)
        total += -y * math.log(p) - (1 - y) * math.log(1 - p)
    return total / len(df)


def test_logit_clamps():
    model = LogisticRegressionModel(0.1, 1)
    assert model.logit(-100.0) == 1e-10
    assert model.logit(100.0) == 1 - 1e-10


def test_logit_midpoint_and_symmetry():
    model = LogisticRegressionModel(0.1, 1)
    assert model.logit(0.0) == 0.5
    assert model.logit(2.0) + model.logit(-2.0) == pytest.approx(1.0)


def test_unfitted_predict_is_logit_of_zero():
    model = LogisticRegressionModel(0.1, 1)
    assert model.predict((3.0, 4.0)) == model.logit(0.0)


def test_fit_sets_weight_count():
    df = _separable()
    model = LogisticRegressionModel(0.1, 1)
    model.fit(df)
    assert len(model.weights) == df.num_features


def test_fit_separates_classes():
    df = _separable()
    model = LogisticRegressionModel(0.5, 500)
    model.fit(df)
    for row, y in df:
        assert (model.predict(row) >= 0.5) == (y == 1.0)


def test_more_epochs_lower_loss():
    df = _separable()
    short = LogisticRegressionModel(0.1, 5)
    long = LogisticRegressionModel(0.1, 50)
    short.fit(df)
    long.fit(df)
    untrained = LogisticRegressionModel(0.1, 0)
    assert _log_loss(long, df) < _log_loss(short, df) < _log_loss(untrained, df)


def test_refit_continues_training():
    df = _separable()
    twice = LogisticRegressionModel(0.2, 1)
    twice.fit(df)
    twice.fit(df)
    once = LogisticRegressionModel(0.2, 2)
    once.fit(df)
    assert twice.weights == pytest.approx(once.weights)
    assert twice.bias == pytest.approx(once.bias)


def test_fractional_epochs_round_up():
    df = _separable()
    fractional = LogisticRegressionModel(0.2, 1.5)
    whole = LogisticRegressionModel(0.2, 2)
    fractional.fit(df)
    whole.fit(df)
    assert fractional.weights == pytest.approx(whole.weights)
    assert fractional.bias == pytest.approx(whole.bias)


def test_fit_empty_frame_raises():
    with pytest.raises(ValueError):
        LogisticRegressionModel(0.1, 10).fit(DataFrame([], [], ["a", "y"]))