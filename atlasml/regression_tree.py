"""Regression tree that splits on the lowest weighted mean squared error."""

from __future__ import annotations

import math
from collections.abc import Sequence
from statistics import fmean
from typing import TYPE_CHECKING

from atlasml.model import Model, Node

if TYPE_CHECKING:
    from atlasml.dataframe import DataFrame


class RegressionTreeModel(Model):
    """Regression tree whose leaves hold the mean target of their rows.

    A node becomes a leaf once its mean squared error is at most
    ``min_error_value`` or it sits at depth ``max_depth``.
    """

    def __init__(self, min_error_value: float = 0.1, max_depth: int = 3) -> None:
        self.min_error_value = min_error_value
        self.max_depth = max_depth
        self._root: Node | None = None

    def calculate_mse(self, indexes: Sequence[int], df: DataFrame) -> float:
        """Mean squared error of the targets around their mean; inf if empty."""
        if not indexes:
            return math.inf
        values = [df.target[i] for i in indexes]
        mean = fmean(values)
        return sum((value - mean) ** 2 for value in values) / len(values)

    def predict(self, row: Sequence[float]) -> float:
        if self._root is None:
            raise RuntimeError("model is not fitted")
        return self._root.walk(row)

    def fit(self, df: DataFrame) -> None:
        """Build the tree from scratch, discarding any earlier training."""
        if len(df) == 0:
            raise ValueError("cannot fit on an empty data frame")
        self._root = None
        self._root = self._build(df, list(range(len(df))), 0)

    def _leaf(self, df: DataFrame, indexes: list[int]) -> Node:
        return Node(value=fmean(df.target[i] for i in indexes))

    def _build(self, df: DataFrame, indexes: list[int], depth: int) -> Node:
        if self.calculate_mse(indexes, df) <= self.min_error_value or depth == self.max_depth:
            return self._leaf(df, indexes)

        size = len(indexes)
        best: tuple[int, int] | None = None
        best_error = math.inf
        for feature in range(df.num_features):
            indexes.sort(key=lambda i: df.data[i][feature])
            for split in range(1, size):
                lesser, greater = indexes[:split], indexes[split:]
                error = (
                    self.calculate_mse(lesser, df) * len(lesser)
                    + self.calculate_mse(greater, df) * len(greater)
                ) / size
                if error < best_error:
                    best_error = error
                    best = (feature, split)

        if best is None:
            return self._leaf(df, indexes)

        feature, split = best
        indexes.sort(key=lambda i: df.data[i][feature])
        lesser, greater = indexes[:split], indexes[split:]
        return Node(
            index=feature,
            threshold=df.data[greater[0]][feature],
            greater_eq=self._build(df, greater, depth + 1),
            less=self._build(df, lesser, depth + 1),
        )