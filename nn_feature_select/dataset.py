"""
nn_feature_select.dataset
=========================
In-memory labeled dataset, z-score normalization and the text-file loader.

Row layout
----------
Every row holds the class label in column 0 followed by ``F`` real-valued
features in columns ``1..F``.  Feature indices used throughout the package
are therefore 1-based and equal to the column they live in::

    2.0   0.371   -1.204   5.660
    ^     ^--------- features 1..3
    label

Normalization
-------------
Each feature column is standardized to zero mean and unit *sample*
variance (denominator ``n - 1``).  Mean and deviations are computed in two
passes instead of the ``(Σx² - (Σx)²/n)`` shortcut, which loses precision
on large-magnitude columns.
"""

from __future__ import annotations

import logging
import warnings
from os import PathLike
from typing import Sequence

import numpy as np

from .errors import DegenerateColumnError, InsufficientDataError, MalformedInputError


__all__ = ["Dataset", "load_dataset", "normalize", "standardize_columns"]

logger = logging.getLogger(__name__)


class Dataset:
    """Labeled numeric instances stored as one ``(n, F + 1)`` float array.

    Parameters
    ----------
    data : array-like, shape (n_instances, n_features + 1)
        Column 0 is the class label, columns ``1..F`` are features.

    Attributes
    ----------
    data : np.ndarray
        The underlying table.  Treat as read-only once normalized.
    normalized : bool
        ``True`` after :func:`normalize` has standardized the features.
    classes : np.ndarray or None
        Distinct original labels when built by :meth:`from_arrays`.
    """

    def __init__(self, data):
        arr = np.array(data, dtype=float)
        if arr.ndim != 2 or arr.shape[1] < 1:
            raise MalformedInputError(
                f"Expected a 2-D table with a label column, got shape {arr.shape}."
            )
        self.data       = arr
        self.normalized = False
        self.classes    = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Dataset":
        """Build a dataset from rows of ``[label, f1, ..., fF]``."""
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise MalformedInputError(
                f"All rows must have the same number of columns, "
                f"found widths {sorted(widths)}."
            )
        return cls(rows)

    @classmethod
    def from_arrays(cls, X, y) -> "Dataset":
        """Build a dataset from a feature matrix and a label vector.

        Numeric labels are stored as they are.  Any other labels (strings,
        booleans, ...) are stored as their position in ``classes``.
        """
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y)
        if X_arr.ndim != 2 or y_arr.ndim != 1 or len(X_arr) != len(y_arr):
            raise MalformedInputError(
                f"X must be 2-D and y 1-D with matching lengths, "
                f"got X{X_arr.shape} and y{y_arr.shape}."
            )

        classes, codes = np.unique(y_arr, return_inverse=True)
        if np.issubdtype(y_arr.dtype, np.number):
            labels = y_arr.astype(float)
        else:
            labels = codes.reshape(-1).astype(float)

        dataset = cls(np.column_stack([labels, X_arr]))
        dataset.classes = classes
        return dataset

    def copy(self) -> "Dataset":
        clone = Dataset(self.data)
        clone.normalized = self.normalized
        clone.classes    = self.classes
        return clone

    # ------------------------------------------------------------------
    # Shape helpers
    # ------------------------------------------------------------------

    @property
    def n_instances(self) -> int:
        return self.data.shape[0]

    @property
    def n_features(self) -> int:
        return self.data.shape[1] - 1

    @property
    def labels(self) -> np.ndarray:
        return self.data[:, 0]

    @property
    def feature_indices(self) -> range:
        return range(1, self.n_features + 1)

    def __len__(self) -> int:
        return self.n_instances

    def __repr__(self) -> str:
        return (
            f"Dataset(n_instances={self.n_instances}, "
            f"n_features={self.n_features}, normalized={self.normalized})"
        )


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def standardize_columns(values: np.ndarray, *, first_column: int = 0) -> np.ndarray:
    """Return a z-scored copy of ``values`` (columns from ``first_column`` on).

    Parameters
    ----------
    values : array, shape (n_samples, n_columns)
    first_column : int, default=0
        Columns before this index are copied through untouched.

    Returns
    -------
    np.ndarray
        Same shape as ``values``; each standardized column has mean 0 and
        sample variance 1.

    Raises
    ------
    InsufficientDataError
        Fewer than two rows.
    DegenerateColumnError
        A column holds a single repeated value.
    """
    arr = np.array(values, dtype=float)
    n = arr.shape[0]
    if n < 2:
        raise InsufficientDataError(n)

    block = arr[:, first_column:]
    # All-equal columns are caught exactly, before any rounding in the mean.
    constant = np.flatnonzero(np.ptp(block, axis=0) == 0)
    if constant.size:
        raise DegenerateColumnError(int(constant[0]) + first_column)

    mean = block.mean(axis=0)
    std  = block.std(axis=0, ddof=1)
    arr[:, first_column:] = (block - mean) / std
    return arr


def normalize(dataset: Dataset) -> Dataset:
    """Standardize the feature columns of ``dataset`` in place.

    The label column is left untouched.  A dataset is normalized at most
    once; a second call logs a warning and returns it unchanged.

    Raises
    ------
    InsufficientDataError
        Fewer than two instances.
    DegenerateColumnError
        A feature column has zero variance.  The dataset is not modified.
    """
    if dataset.normalized:
        logger.warning("Dataset is already normalized; leaving it unchanged.")
        return dataset

    dataset.data = standardize_columns(dataset.data, first_column=1)
    dataset.normalized = True
    logger.debug(
        "Normalized %d feature column(s) over %d instances.",
        dataset.n_features, dataset.n_instances,
    )
    return dataset


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load_dataset(path: str | PathLike) -> Dataset:
    """Read a whitespace-delimited numeric file into a :class:`Dataset`.

    Each non-blank line is one instance: the class label followed by the
    feature values.

    Raises
    ------
    FileNotFoundError
        ``path`` does not exist.
    MalformedInputError
        Non-numeric tokens, rows of differing width, or no data at all.
    """
    with warnings.catch_warnings():
        # np.loadtxt warns on empty input; it is reported as an error below.
        warnings.simplefilter("ignore", UserWarning)
        try:
            data = np.loadtxt(path, dtype=float, ndmin=2)
        except ValueError as exc:
            raise MalformedInputError(f"Could not parse {path}: {exc}") from exc

    if data.size == 0:
        raise MalformedInputError(f"{path} contains no data.")

    dataset = Dataset(data)
    logger.info(
        "Loaded %s: %d instances, %d features.",
        path, dataset.n_instances, dataset.n_features,
    )
    return dataset
