"""Scores of a model's predictions against a data frame's targets."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atlasml.dataframe import DataFrame
    from atlasml.model import Model


def accuracy(model: Model, df: DataFrame) -> float:
    """Share of rows whose prediction equals the target truncated to an integer."""
    if len(df) == 0:
        raise ValueError("data frame is empty")
    correct = sum(1 for row, y in df if model.predict(row) == int(y))
    return correct / len(df)


def f1_score(model: Model, df: DataFrame) -> float:
    """F1 score for binary 0/1 labels; NaN when it is undefined."""
    tp = fp = fn = 0
    for row, y in df:
        y_pred = model.predict(row)
        if y_pred == 1 and y == 1:
            tp += 1
        elif y_pred == 1 and y == 0:
            fp += 1
        elif y_pred == 0 and y == 1:
            fn += 1
    denominator = 2 * tp + fp + fn
    if denominator == 0:
        return math.nan
    return 2 * tp / denominator


def recall(model: Model, df: DataFrame) -> float:
    """Share of rows labelled 1 that are also predicted 1."""
    positives = true_positives = 0
    for row, y in df:
        if y == 1:
            positives += 1
            if model.predict(row) == 1:
                true_positives += 1
    if positives == 0:
        raise ValueError("dataframe has no positives in it")
    return true_positives / positives


def precision(model: Model, df: DataFrame) -> float:
    """Share of rows predicted 1 that are also labelled 1."""
    positives = true_positives = 0
    for row, y in df:
        if model.predict(row) == 1:
            positives += 1
            if y == 1:
                true_positives += 1
    if positives == 0:
        raise ValueError("dataframe has no positives in it")
    return true_positives / positives