"""Common interface of the models and the tree node they share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atlasml.dataframe import DataFrame


class Model(ABC):
    """A model trained on a data frame that predicts one row at a time.

    Hyperparameters belong in the constructor, not in ``fit``.
    """

    @abstractmethod
    def predict(self, row: Sequence[float]) -> float:
        """Predict the target of a single row."""

    @abstractmethod
    def fit(self, df: DataFrame) -> None:
        """Train the model on a data frame."""


@dataclass
class Node:
    """A tree node: a leaf when it has no children, else a split.

    A split sends rows whose feature ``index`` is at least ``threshold``
    to ``greater_eq`` and the rest to ``less``.
    """

    value: float = -1.0
    threshold: float = -1.0
    index: int = 0
    greater_eq: Node | None = None
    less: Node | None = None

    def walk(self, row: Sequence[float]) -> float:
        """Follow the splits for ``row`` and return the leaf value."""
        node = self
        while node.greater_eq is not None and node.less is not None:
            node = node.greater_eq if row[node.index] >= node.threshold else node.less
        return node.value