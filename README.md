# atlasml

A small machine-learning toolkit in pure Python, with no third-party dependencies.

## What it contains

- `atlasml.dataframe.DataFrame` holds rows of numeric features, each with a numeric target.
  - `DataFrame(data, target, head_names=())` builds one from sequences. It raises `ValueError` if the row and target counts differ or if the rows have different lengths.
  - `DataFrame.from_csv(path, uses_headers=True, delimiter=",")` loads a delimited text file. The last column of each line is the target and the other columns are features. With `uses_headers=True` the first line is read as column names. It raises `ValueError` for an empty file, a field that is not a number, or a line with the wrong number of fields.
  - `len(df)` returns the number of rows. `df[i]` returns `(row, target)` and raises `IndexError` when `i` is out of range. Because of this, a data frame can be iterated as `for row, y in df`.
  - `df.num_features` is the number of feature columns, not counting the target.
  - `df.shuffle()` shuffles the rows in place and keeps each row with its target.
  - `df.train_test_split(test_size)` shuffles a copy of the rows and returns `(train, test)`. The two sets do not overlap. The test set gets `int(test_size * len(df))` rows. `test_size` must be strictly between 0 and 1, and it must give at least one test row. Otherwise the method raises `ValueError`.
  - `df.print_row(i)` prints one row and its target. `df.head(num=5)` prints the first rows.
- `atlasml.model.Model` is the abstract base class for all models. Every model has `fit(df)` and `predict(row)`. `atlasml.model.Node` is the tree node that both tree models use.
- `atlasml.logistic.LogisticRegressionModel(learning_rate=0.001, epochs=1000)` is binary logistic regression trained by batch gradient descent.
  - `predict` returns the probability of class 1.
  - `logit(z)` is the sigmoid, clamped to `1e-10` below `z = -50` and to `1 - 1e-10` above `z = 50`.
  - Calling `fit` again continues from the weights already learned.
- `atlasml.decision_tree.DecisionTreeModel(min_purity=0.1)` is a classification tree.
  - It splits where the summed entropy of the two sides is lowest.
  - A node becomes a leaf, holding the most common class, once that class makes up at least `min_purity` of the node's rows.
  - `min_purity` must be in `(0, 1]`.
- `atlasml.regression_tree.RegressionTreeModel(min_error_value=0.1, max_depth=3)` is a regression tree.
  - It splits where the size-weighted mean squared error is lowest.
  - A leaf holds the mean target of its rows. A node becomes a leaf when its error is at most `min_error_value` or when it reaches `max_depth`.
  - `calculate_mse(indexes, df)` is exposed. It returns `inf` for an empty index list.
- `atlasml.metrics` provides `accuracy`, `f1_score`, `recall` and `precision` for any model.
  - `accuracy` counts the predictions that equal the target truncated to an integer.
  - `f1_score` returns NaN when it is undefined.
  - `recall` and `precision` raise `ValueError` when there are no positives to divide by.

Calling `fit` on an empty data frame raises `ValueError`. Calling `predict` on an unfitted tree raises `RuntimeError`.

## Installation

```
pip install .
```

## Usage

```python
from atlasml.dataframe import DataFrame
from atlasml.decision_tree import DecisionTreeModel
from atlasml import metrics

df = DataFrame.from_csv("data.csv", uses_headers=True, delimiter=",")
train, test = df.train_test_split(0.2)

tree = DecisionTreeModel(min_purity=0.9)
tree.fit(train)
print("tree accuracy:", metrics.accuracy(tree, test))
print("tree F1:", metrics.f1_score(tree, test))
```

## Command line

```
atlasml [path] [--no-headers] [--delimiter D] [--test-size F]
        [--learning-rate F] [--epochs N] [--min-purity F]
```

The command works in these steps:

1. It loads `path`, which defaults to `reg_test.csv`.
2. It shuffles the rows and splits them into a training set and a test set. The default `--test-size` is 0.2.
3. It trains a logistic regression on the training set and a decision tree on the test set.
4. It prints three scores, all measured on the test set: the accuracy of each model and the F1 score of the logistic model.

If the file cannot be read or the data is invalid, the command prints an error and exits with status 1.

## Limitations

- Predictions are compared with labels exactly, and no threshold is applied. The logistic model's probabilities therefore rarely count as matches in `accuracy`, `f1_score`, `recall` or `precision`.
- Trained models cannot be saved or loaded.
- Only numeric columns are supported.

## Running the tests

```
pip install .[test]
pytest
```