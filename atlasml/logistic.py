"""Binary logistic regression trained by batch gradient descent."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from atlasml.model import Model

if TYPE_CHECKING:
    from atlasml.dataframe import DataFrame


class LogisticRegressionModel(Model):
    """Logistic regression whose ``predict`` returns the probability of class 1."""

    def __init__(self, learning_rate: float = 0.001, epochs: float = 1000) -> None:
        self.learning_rate = learning_rate
        self.epochs = epochs
        self.weights: list[float] = []
        self.bias = 0.0

    def logit(self, z: float) -> float:
        """Sigmoid of ``z``, clamped away from exactly 0 and 1."""
        if z < -50:
            return 1e-10
        if z > 50:
            return 1 - 1e-10
        return 1.0 / (1.0 + math.exp(-z))

    def predict(self, row: Sequence[float]) -> float:
        z = self.bias + sum(w * x for w, x in zip(self.weights, row))
        return self.logit(z)

    def fit(self, df: DataFrame) -> None:
        """Run gradient descent, continuing from any weights already learned."""
        n_samples = len(df)
        if n_samples == 0:
            raise ValueError("cannot fit on an empty data frame")
        n_features = df.num_features
        self.weights = self.weights[:n_features] + [0.0] * (n_features - len(self.weights))

        for _ in range(max(0, math.ceil(self.epochs))):
            dw = [0.0] * n_features
            db = 0.0
            for row, y in df:
                error = self.predict(row) - y
                dw = [acc + x * error for acc, x in zip(dw, row)]
                db += error
            step = self.learning_rate / n_samples
            self.weights = [w - step * g for w, g in zip(self.weights, dw)]
            self.bias -= step * db