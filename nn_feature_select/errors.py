"""
nn_feature_select.errors
========================
Exception types raised by the package.

Every error derives from :class:`FeatureSelectionError`, which is itself a
``ValueError`` so that callers treating bad input the scikit-learn way keep
working.
"""

__all__ = [
    "FeatureSelectionError",
    "MalformedInputError",
    "DegenerateColumnError",
    "InsufficientDataError",
    "EmptyFeatureSetError",
]


class FeatureSelectionError(ValueError):
    """Base class for all errors raised by nn_feature_select."""


class MalformedInputError(FeatureSelectionError):
    """The input file is not a rectangular table of numbers."""


class DegenerateColumnError(FeatureSelectionError):
    """A feature column has zero variance and cannot be standardized."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(
            f"Feature column {column} has zero variance; "
            f"it cannot be standardized."
        )


class InsufficientDataError(FeatureSelectionError):
    """Fewer than two instances: leave-one-out is undefined."""

    def __init__(self, n_instances: int):
        self.n_instances = n_instances
        super().__init__(
            f"At least 2 instances are required, got {n_instances}."
        )


class EmptyFeatureSetError(FeatureSelectionError):
    """The dataset has no feature columns besides the label."""
