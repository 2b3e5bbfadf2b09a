"""Small machine-learning toolkit: CSV data frames, logistic regression, decision and regression trees, metrics."""

__version__ = "0.1.0"