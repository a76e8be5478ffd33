"""
nn_feature_select
=================
Wrapper feature selection for a 1-nearest-neighbor classifier.

Given a labeled numeric dataset, the package searches the space of feature
subsets for the one that maximizes leave-one-out (LOO) accuracy of a
1-nearest-neighbor classifier with Euclidean distance.

Core idea
---------
**Evaluator (objective function)**
    For a feature subset S, every instance is held out once and classified
    with the label of its nearest other instance in the subspace S::

        acc(S) = (number of correctly classified held-out points) / n

**Greedy search (wrapper step)**
    The 2^F subsets are not enumerated.  Forward selection grows the subset
    one feature per round, backward elimination shrinks it one feature per
    round, and pruned forward selection stops scoring candidates as soon as
    they have more misses than the round's best.  Each returns the best
    subset seen in any round.

The search is a hill climber: it carries on past rounds where accuracy
drops, in case later rounds recover, but it never backtracks and gives no
guarantee of finding the global optimum.

Public API
----------
Dataset                         – labeled table with 1-based feature columns
load_dataset, normalize         – text loader and z-score normalization
evaluate, leave_one_out         – LOO 1-NN scoring of a subset
run_forward_selection           – greedy forward search
run_backward_elimination        – greedy backward search
run_pruned_forward_selection    – forward search with early cut-off
run_search                      – dispatch on strategy name
SearchReport, format_report     – structured search trace and its rendering
NearestNeighborFeatureSelector  – sklearn-compatible estimator
"""

from .dataset   import Dataset, load_dataset, normalize, standardize_columns
from .errors    import (
    DegenerateColumnError,
    EmptyFeatureSetError,
    FeatureSelectionError,
    InsufficientDataError,
    MalformedInputError,
)
from .evaluator import LeaveOneOutResult, distance, evaluate, leave_one_out
from .report    import CandidateEvaluation, SearchReport, SearchRound, format_report
from .search    import (
    STRATEGIES,
    run_backward_elimination,
    run_forward_selection,
    run_pruned_forward_selection,
    run_search,
)
from .selector  import NearestNeighborFeatureSelector

__all__ = [
    "CandidateEvaluation",
    "Dataset",
    "DegenerateColumnError",
    "EmptyFeatureSetError",
    "FeatureSelectionError",
    "InsufficientDataError",
    "LeaveOneOutResult",
    "MalformedInputError",
    "NearestNeighborFeatureSelector",
    "STRATEGIES",
    "SearchReport",
    "SearchRound",
    "distance",
    "evaluate",
    "format_report",
    "leave_one_out",
    "load_dataset",
    "normalize",
    "run_backward_elimination",
    "run_forward_selection",
    "run_pruned_forward_selection",
    "run_search",
    "standardize_columns",
]

__version__ = "0.1.0"
