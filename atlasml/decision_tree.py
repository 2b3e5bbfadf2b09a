"""Classification tree that splits on the lowest summed entropy."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from atlasml.model import Model, Node

if TYPE_CHECKING:
    from atlasml.dataframe import DataFrame


def _entropy(counts: Iterable[int], size: int) -> float:
    """Shannon entropy, in bits, of the non-zero counts out of ``size``."""
    entropy = 0.0
    for count in counts:
        if count:
            p = count / size
            entropy -= p * math.log2(p)
    return entropy


def _sort_by_feature(indexes: list[int], feature: int, df: DataFrame) -> None:
    indexes.sort(key=lambda i: df.data[i][feature])


class DecisionTreeModel(Model):
    """Decision tree whose leaves hold the most common class of their rows.

    A node becomes a leaf once the share of its most common class reaches
    ``min_purity``.
    """

    def __init__(self, min_purity: float = 0.1) -> None:
        if not 0 < min_purity <= 1:
            raise ValueError("min_purity must be between 0 and 1")
        self.min_purity = min_purity
        self._root: Node | None = None

    def predict(self, row: Sequence[float]) -> float:
        if self._root is None:
            raise RuntimeError("model is not fitted")
        return self._root.walk(row)

    def fit(self, df: DataFrame) -> None:
        """Build the tree from scratch, discarding any earlier training."""
        if len(df) == 0:
            raise ValueError("cannot fit on an empty data frame")
        self._root = None
        self._root = self._build(df, list(range(len(df))))

    def _build(self, df: DataFrame, indexes: list[int]) -> Node:
        counts = Counter(df.target[i] for i in indexes)
        # Ties go to the smallest category.
        category, top = max(sorted(counts.items()), key=lambda item: item[1])
        if top / len(indexes) >= self.min_purity:
            return Node(value=category)

        size = len(indexes)
        best: tuple[int, int] | None = None
        min_entropy = math.inf
        for feature in range(df.num_features):
            _sort_by_feature(indexes, feature, df)
            less = Counter(counts)
            greater: Counter[float] = Counter()
            for counter, i in enumerate(indexes, start=1):
                label = df.target[i]
                less[label] -= 1
                greater[label] += 1
                entropy = _entropy(greater.values(), counter) + _entropy(
                    less.values(), size - counter
                )
                if entropy < min_entropy:
                    min_entropy = entropy
                    best = (feature, counter)

        if best is None or best[1] >= size:
            return Node(value=category)

        feature, split = best
        _sort_by_feature(indexes, feature, df)
        less_indexes, greater_indexes = indexes[:split], indexes[split:]
        return Node(
            index=feature,
            threshold=df.data[greater_indexes[0]][feature],
            less=self._build(df, less_indexes),
            greater_eq=self._build(df, greater_indexes),
        )