"""
nn_feature_select.selector
==========================
Scikit-learn compatible estimator wrapping the greedy 1-NN subset search.

The estimator follows the standard sklearn API:

    selector = NearestNeighborFeatureSelector(strategy="backward")
    selector.fit(X_train, y_train)
    X_reduced = selector.transform(X_train)

Column indices exposed by the estimator are 0-based, as everywhere in
scikit-learn; the underlying :class:`~nn_feature_select.SearchReport` keeps
the 1-based feature numbering of the search.
"""

from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator
from sklearn.feature_selection import SelectorMixin
from sklearn.utils.validation import check_is_fitted

from .dataset import Dataset, normalize
from .report import format_report
from .search import STRATEGIES, run_search


__all__ = ["NearestNeighborFeatureSelector"]


class NearestNeighborFeatureSelector(SelectorMixin, BaseEstimator):
    """Wrapper feature selector driven by leave-one-out 1-NN accuracy.

    ``transform``, ``get_support`` and ``get_feature_names_out`` come from
    scikit-learn's ``SelectorMixin``.

    Parameters
    ----------
    strategy : {"forward", "backward", "pruned"}, default="forward"
        Search strategy.  ``"pruned"`` is forward selection that cuts short
        candidates which can no longer win their round.
    normalize : bool, default=True
        Standardize features (zero mean, unit sample variance) before the
        search.  The input array is never modified.
    verbose : int, default=0
        Verbosity level (0 = silent, 1 = result, 2 = full search transcript).

    Attributes
    ----------
    selected_features_ : tuple of int
        0-based column indices of the best subset found.
    accuracy_ : float
        Leave-one-out 1-NN accuracy of the selected subset.
    report_ : SearchReport
        Full search trace (1-based feature numbering).
    classes_ : np.ndarray
        Distinct class labels seen during fit.
    n_features_in_ : int
        Total number of features seen during fit.

    Examples
    --------
    >>> from sklearn.datasets import load_iris
    >>> from nn_feature_select import NearestNeighborFeatureSelector
    >>> X, y = load_iris(return_X_y=True)
    >>> selector = NearestNeighborFeatureSelector(strategy="forward").fit(X, y)
    >>> selector.transform(X).shape[0]
    150
    """

    def __init__(
        self,
        strategy: str = "forward",
        normalize: bool = True,
        verbose: int = 0,
    ):
        self.strategy  = strategy
        self.normalize = normalize
        self.verbose   = verbose

    # ------------------------------------------------------------------
    # sklearn API
    # ------------------------------------------------------------------

    def fit(self, X: np.ndarray, y: np.ndarray) -> "NearestNeighborFeatureSelector":
        """Run the subset search on (X, y).

        Parameters
        ----------
        X : array-like, shape (n_samples, n_features)
            Training data.
        y : array-like, shape (n_samples,)
            Class labels.  Any hashable, sortable values (numbers, strings).

        Returns
        -------
        self
        """
        self._validate_params()

        dataset = Dataset.from_arrays(X, y)
        self.n_features_in_ = dataset.n_features
        self.classes_       = dataset.classes
        if self.normalize:
            normalize(dataset)

        if self.verbose >= 1:
            print(
                f"[NearestNeighborFeatureSelector] Running {self.strategy} search "
                f"over {dataset.n_features} features, "
                f"{dataset.n_instances} samples ..."
            )

        self.report_ = run_search(dataset, self.strategy)
        self.selected_features_ = tuple(f - 1 for f in self.report_.best_subset)
        self.accuracy_          = self.report_.best_accuracy

        if self.verbose >= 2:
            print(format_report(self.report_))
        if self.verbose >= 1:
            print(
                f"[NearestNeighborFeatureSelector] Done.  "
                f"Selected features: {self.selected_features_}  "
                f"LOO 1-NN accuracy = {self.accuracy_:.4f}"
            )

        return self

    def _get_support_mask(self) -> np.ndarray:
        check_is_fitted(self, "selected_features_")
        mask = np.zeros(self.n_features_in_, dtype=bool)
        mask[list(self.selected_features_)] = True
        return mask

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate_params(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy must be one of {sorted(STRATEGIES)}, "
                f"got {self.strategy!r}."
            )
        if self.verbose < 0:
            raise ValueError("verbose must be >= 0.")

    def summary(self) -> str:
        """Return a human-readable summary of the fitted selector."""
        check_is_fitted(self, "selected_features_")
        report = self.report_
        return "\n".join([
            "NearestNeighborFeatureSelector – fit summary",
            f"  strategy               : {self.strategy}",
            f"  n_features_in          : {self.n_features_in_}",
            f"  rounds                 : {len(report.rounds)}",
            f"  subsets evaluated      : {report.n_evaluations}",
            f"  subsets pruned         : {report.n_pruned}",
            f"  selected features      : {self.selected_features_}",
            f"  LOO 1-NN accuracy      : {self.accuracy_:.4f}",
        ])
