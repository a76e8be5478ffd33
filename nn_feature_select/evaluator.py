"""
nn_feature_select.evaluator
===========================
Leave-one-out accuracy of a 1-nearest-neighbor classifier restricted to a
feature subset.

For every instance *i* the classifier predicts the label of the closest
other instance *j ≠ i*, using Euclidean distance over the effective feature
set only.  Ties go to the instance that appears first in the dataset, so the
score is fully determined by the dataset order.  The accuracy is::

    acc(S) = (1 / n) * Σ_i  1[ label(nn_S(i)) == label(i) ]

Evaluation modes
----------------
``"forward"``
    The effective feature set is ``subset ∪ {candidate}`` when a candidate
    is given (scoring a feature *addition*).
``"backward"``
    The effective feature set is exactly ``subset``; callers exclude the
    removal candidate themselves.

Early termination
-----------------
With ``miss_budget`` set, evaluation stops as soon as the number of
misclassified instances exceeds the budget.  The subset then cannot beat
whichever subset produced the budget, and the result is reported as pruned
with accuracy 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.spatial.distance import cdist

from .dataset import Dataset
from .errors import InsufficientDataError


__all__ = [
    "LeaveOneOutResult",
    "distance",
    "effective_features",
    "evaluate",
    "leave_one_out",
    "nearest_neighbor",
]

MODES = ("forward", "backward")


@dataclass(frozen=True)
class LeaveOneOutResult:
    """Outcome of one leave-one-out pass."""

    accuracy: float
    n_correct: int
    n_misses: int
    pruned: bool = False


# ---------------------------------------------------------------------------
# Public functions
# ---------------------------------------------------------------------------

def distance(x: np.ndarray, y: np.ndarray, features: Sequence[int]) -> float:
    """Euclidean distance between two rows over the given columns.

    An empty feature set puts every pair of rows at distance 0.
    """
    cols  = list(features)
    x_sub = np.asarray(x, dtype=float)[cols]
    y_sub = np.asarray(y, dtype=float)[cols]
    return float(_distances_from(x_sub, y_sub[None, :])[0])


def effective_features(
    dataset: Dataset,
    subset: Sequence[int],
    candidate: int | None = None,
    mode: str = "forward",
) -> tuple[int, ...]:
    """Resolve the feature indices used for distance computation.

    Raises
    ------
    ValueError
        Unknown ``mode``, an index outside ``1..F``, or a repeated index.
    """
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}.")

    features = tuple(int(f) for f in subset)
    if mode == "forward" and candidate is not None:
        features = features + (int(candidate),)

    n_features = dataset.n_features
    for f in features:
        if not 1 <= f <= n_features:
            raise ValueError(
                f"Feature index {f} is out of range 1..{n_features}."
            )
    if len(set(features)) != len(features):
        raise ValueError(f"Feature subset {features} contains duplicates.")
    return features


def nearest_neighbor(points: np.ndarray, i: int) -> int:
    """Index of the row closest to row ``i`` among all other rows.

    ``points`` holds only the effective feature columns.  The first row at
    the minimal distance wins.
    """
    n = len(points)
    others = np.flatnonzero(np.arange(n) != i)
    dists  = _distances_from(points[i], points[others])
    return int(others[np.argmin(dists)])


def leave_one_out(
    dataset: Dataset,
    subset: Sequence[int],
    candidate: int | None = None,
    mode: str = "forward",
    *,
    miss_budget: int | None = None,
) -> LeaveOneOutResult:
    """Leave-one-out 1-NN evaluation of a feature subset.

    Parameters
    ----------
    dataset : Dataset
        Normalized dataset.
    subset : sequence of int
        1-based feature indices currently selected.
    candidate : int, optional
        Feature whose addition is being scored (``mode="forward"`` only).
    mode : {"forward", "backward"}, default="forward"
    miss_budget : int, optional
        Stop and report a pruned result once misses exceed this number.
        ``None`` means the dataset size, so evaluation always completes.

    Returns
    -------
    LeaveOneOutResult

    Raises
    ------
    InsufficientDataError
        Fewer than two instances.
    """
    n = dataset.n_instances
    if n < 2:
        raise InsufficientDataError(n)

    features = effective_features(dataset, subset, candidate, mode)
    budget   = n if miss_budget is None else miss_budget
    points   = dataset.data[:, list(features)]
    labels   = dataset.labels

    correct = 0
    misses  = 0
    for i in range(n):
        j = nearest_neighbor(points, i)
        if labels[j] == labels[i]:
            correct += 1
        else:
            misses += 1
            if misses > budget:
                return LeaveOneOutResult(0.0, correct, misses, pruned=True)

    return LeaveOneOutResult(correct / n, correct, misses)


def evaluate(
    dataset: Dataset,
    subset: Sequence[int],
    candidate: int | None = None,
    mode: str = "forward",
    *,
    miss_budget: int | None = None,
) -> float:
    """Leave-one-out accuracy in ``[0, 1]`` (0 when pruned).

    Thin wrapper over :func:`leave_one_out`; see there for parameters.

    Examples
    --------
    >>> from nn_feature_select import Dataset, evaluate
    >>> ds = Dataset([[1, 0.0, 5.0], [1, 0.1, 6.0], [2, 9.0, 5.0], [2, 9.2, 6.0]])
    >>> evaluate(ds, [], candidate=1)
    1.0
    """
    return leave_one_out(
        dataset, subset, candidate, mode, miss_budget=miss_budget,
    ).accuracy


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _distances_from(query: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Euclidean distance from ``query`` to every row of ``points``.

    Both hold the same columns.  With no columns every distance is 0.
    """
    if points.shape[1] == 0:
        return np.zeros(len(points))
    return cdist(query[None, :], points)[0]
