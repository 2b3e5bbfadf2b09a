"""Tabular data set of numeric features paired with a numeric target."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from os import PathLike

Row = tuple[float, ...]


def _parse_line(line: str, delimiter: str, line_number: int) -> list[float]:
    try:
        return [float(field) for field in line.split(delimiter)]
    except ValueError as exc:
        raise ValueError(f"line {line_number}: {exc}") from exc


class DataFrame:
    """Rows of feature values, each paired with a target value.

    The target is always the last column of the source file.
    """

    def __init__(
        self,
        data: Iterable[Sequence[float]],
        target: Iterable[float],
        head_names: Iterable[str] = (),
    ) -> None:
        self.data: list[Row] = [tuple(float(value) for value in row) for row in data]
        self.target: list[float] = [float(value) for value in target]
        self.head_names: list[str] = list(head_names)
        if len(self.data) != len(self.target):
            raise ValueError("Data size mismatch")
        if self.data:
            self._num_features = len(self.data[0])
        else:
            self._num_features = max(len(self.head_names) - 1, 0)
        if any(len(row) != self._num_features for row in self.data):
            raise ValueError("All rows must have the same number of features")

    @classmethod
    def from_csv(
        cls,
        path: str | PathLike[str],
        uses_headers: bool = True,
        delimiter: str = ",",
    ) -> DataFrame:
        """Load a delimited text file whose last column is the target."""
        data: list[list[float]] = []
        target: list[float] = []
        with open(path, encoding="utf-8", newline="") as handle:
            lines = (line.rstrip("\r\n") for line in handle)
            first = next(lines, None)
            if first is None:
                raise ValueError("File is empty")
            if uses_headers:
                head_names = first.split(delimiter)
                num_features = len(head_names) - 1
            else:
                head_names = []
                values = _parse_line(first, delimiter, 1)
                num_features = len(values) - 1
                data.append(values[:-1])
                target.append(values[-1])
            for line_number, line in enumerate(lines, start=2):
                values = _parse_line(line, delimiter, line_number)
                if len(values) != num_features + 1:
                    raise ValueError(
                        f"line {line_number}: expected {num_features + 1} fields, "
                        f"got {len(values)}"
                    )
                data.append(values[:-1])
                target.append(values[-1])
        return cls(data, target, head_names)

    def __getitem__(self, index: int) -> tuple[Row, float]:
        if not 0 <= index < len(self.data):
            raise IndexError("Index is out of bounds")
        return self.data[index], self.target[index]

    def __len__(self) -> int:
        return len(self.data)

    @property
    def num_features(self) -> int:
        """Number of feature columns, not counting the target."""
        return self._num_features

    def _shuffled_pairs(self) -> list[tuple[Row, float]]:
        pairs = list(zip(self.data, self.target))
        random.shuffle(pairs)
        return pairs

    def shuffle(self) -> None:
        """Shuffle the rows in place, keeping each row with its target."""
        pairs = self._shuffled_pairs()
        self.data = [row for row, _ in pairs]
        self.target = [value for _, value in pairs]

    def print_row(self, index: int) -> None:
        """Print one row followed by its target."""
        if not 0 <= index < len(self.data):
            raise IndexError("Row index out of range")
        features = "".join(f"{value:g} " for value in self.data[index])
        print(f"{index}: {features}   {self.target[index]:g}")

    def head(self, num: int = 5) -> None:
        """Print the first ``num`` rows."""
        for index in range(min(num, len(self.data))):
            self.print_row(index)

    def train_test_split(self, test_size: float) -> tuple[DataFrame, DataFrame]:
        """Split shuffled rows into disjoint training and test sets.

        ``test_size`` is the share of rows, strictly between 0 and 1, that go
        to the test set. Returns ``(train, test)``.
        """
        if not 0 < test_size < 1:
            raise ValueError("Test size must be between 0 and 1")
        test_num = int(test_size * len(self.data))
        if test_num == 0:
            raise ValueError("Too small test size for this dataset")

        pairs = self._shuffled_pairs()
        test_pairs, train_pairs = pairs[:test_num], pairs[test_num:]

        def build(chosen: list[tuple[Row, float]]) -> DataFrame:
            return DataFrame(
                [row for row, _ in chosen],
                [value for _, value in chosen],
                self.head_names,
            )

        return build(train_pairs), build(test_pairs)