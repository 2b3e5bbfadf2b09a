"""Command line entry: train a logistic model and a tree, then report scores."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from atlasml.dataframe import DataFrame
from atlasml.decision_tree import DecisionTreeModel
from atlasml.logistic import LogisticRegressionModel
from atlasml.metrics import accuracy, f1_score


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atlasml",
        description="Train logistic regression and a decision tree on a CSV file.",
    )
    parser.add_argument("path", nargs="?", default="reg_test.csv", help="data file")
    parser.add_argument(
        "--no-headers",
        dest="uses_headers",
        action="store_false",
        help="the first line holds data, not column names",
    )
    parser.add_argument("--delimiter", default=",")
    parser.add_argument("--test-size", type=float, default=0.2)
    parser.add_argument("--learning-rate", type=float, default=0.001)
    parser.add_argument("--epochs", type=int, default=1000)
    parser.add_argument("--min-purity", type=float, default=0.1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        df = DataFrame.from_csv(args.path, args.uses_headers, args.delimiter)
        df.shuffle()
        train, test = df.train_test_split(args.test_size)

        logistic = LogisticRegressionModel(args.learning_rate, args.epochs)
        tree = DecisionTreeModel(args.min_purity)
        logistic.fit(train)
        tree.fit(test)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Accuracy of log res: {accuracy(logistic, test):g}")
    print(f"Accuracy of tree: {accuracy(tree, test):g}")
    print(f"F1 Score: {f1_score(logistic, test):g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())