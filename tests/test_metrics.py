import math

import pytest

from atlasml.dataframe import DataFrame
from atlasml.metrics import accuracy, f1_score, precision, recall
from atlasml.model import Model


class EchoModel(Model):
    """Predicts the first feature of a row."""

    def predict(self, row):
        return row[0]

    def fit(self, df):
        pass


def _frame(predictions, targets):
    return DataFrame([[p] for p in predictions], targets)


def test_accuracy_perfect():
    df = _frame([1.0, 0.0, 2.0], [1.0, 0.0, 2.0])
    assert accuracy(EchoModel(), df) == 1.0


def test_accuracy_truncates_target():
    df = _frame([1.0, 0.0], [1.7, 0.9])
    assert accuracy(EchoModel(), df) == 1.0


def test_accuracy_all_wrong():
    df = _frame([0.5, 0.25], [0.0, 1.0])
    assert accuracy(EchoModel(), df) == 0.0


def test_accuracy_empty_raises():
    with pytest.raises(ValueError):
        accuracy(EchoModel(), DataFrame([], [], ["x", "y"]))


def test_perfect_binary_scores():
    df = _frame([1.0, 1.0, 0.0, 0.0], [1.0, 1.0, 0.0, 0.0])
    model = EchoModel()
    assert f1_score(model, df) == 1.0
    assert recall(model, df) == 1.0
    assert precision(model, df) == 1.0


def test_mixed_binary_scores():
    df = _frame([1.0, 0.0, 1.0, 0.0], [1.0, 1.0, 0.0, 0.0])
    model = EchoModel()
    assert recall(model, df) == pytest.approx(0.5)
    assert precision(model, df) == pytest.approx(0.5)
    assert f1_score(model, df) == pytest.approx(0.5)


def test_f1_is_harmonic_mean_of_precision_and_recall():
    df = _frame([1.0, 1.0, 1.0, 0.0, 0.0, 1.0], [1.0, 0.0, 1.0, 1.0, 0.0, 0.0])
    model = EchoModel()
    p = precision(model, df)
    r = recall(model, df)
    assert f1_score(model, df) == pytest.approx(2 * p * r / (p + r))


def test_f1_undefined_is_nan():
    df = _frame([0.3, 0.7], [1.0, 0.0])
    assert f1_score(EchoModel(), df) == pytest.approx(math.nan, nan_ok=True)


def test_recall_without_positive_labels_raises():
    df = _frame([1.0, 0.0], [0.0, 0.0])
    with pytest.raises(ValueError, match="no positives"):
        recall(EchoModel(), df)


def test_precision_without_positive_predictions_raises():
    df = _frame([0.0, 0.0], [1.0, 0.0])
    with pytest.raises(ValueError, match="no positives"):
        precision(EchoModel(), df)