"""
nn_feature_select.search
========================
Greedy wrapper search over feature subsets, scored by leave-one-out 1-NN
accuracy.

Strategies
----------
**Forward selection**
    Start from the empty subset.  Each of the ``F`` rounds scores every
    unused feature as an addition and keeps the best one, whether or not
    accuracy improved.
**Backward elimination**
    Start from the full subset (scored once as a baseline).  Each of the
    ``F - 1`` rounds scores the removal of every remaining feature and drops
    the one whose removal scores best.
**Pruned forward selection**
    Forward selection in which each candidate is evaluated with a miss
    budget equal to the fewest misses seen so far in the round.  A
    candidate that exceeds it cannot win the round, so its evaluation is cut
    short and it is recorded as pruned.  The selected subsets are identical
    to plain forward selection.

In every round, candidates are visited in increasing feature-index order
and only a strictly higher accuracy displaces the current choice, so ties go
to the lowest index.  The best subset across all rounds is reported, which
need not be the last one built.
"""

from __future__ import annotations

import logging
from typing import Callable

from .dataset import Dataset
from .errors import EmptyFeatureSetError, InsufficientDataError
from .evaluator import leave_one_out
from .report import CandidateEvaluation, SearchReport, SearchRound, format_subset


__all__ = [
    "STRATEGIES",
    "run_backward_elimination",
    "run_forward_selection",
    "run_pruned_forward_selection",
    "run_search",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def run_forward_selection(dataset: Dataset) -> SearchReport:
    """Greedy forward selection; see module docstring."""
    return _forward_search(dataset, prune=False)


def run_pruned_forward_selection(dataset: Dataset) -> SearchReport:
    """Forward selection with early termination of hopeless candidates."""
    return _forward_search(dataset, prune=True)


def run_backward_elimination(dataset: Dataset) -> SearchReport:
    """Greedy backward elimination; see module docstring."""
    _check_searchable(dataset)
    report = SearchReport(
        strategy="backward",
        n_instances=dataset.n_instances,
        n_features=dataset.n_features,
    )

    current = list(dataset.feature_indices)
    result = leave_one_out(dataset, current, mode="backward")
    report.baseline = CandidateEvaluation(tuple(current), result.accuracy)
    report.best_subset   = tuple(current)
    report.best_accuracy = result.accuracy
    logger.info(
        "Full feature set %s accuracy is %.4f",
        format_subset(current), result.accuracy,
    )

    for number in range(1, dataset.n_features):
        candidates = []
        chosen = None
        for feature in current:
            trial = tuple(f for f in current if f != feature)
            result = leave_one_out(dataset, trial, mode="backward")
            cand = CandidateEvaluation(trial, result.accuracy, feature)
            candidates.append(cand)
            logger.debug(
                "Round %d: without feature %d %s accuracy is %.4f",
                number, feature, format_subset(trial), result.accuracy,
            )
            if chosen is None or cand.accuracy > chosen.accuracy:
                chosen = cand

        current.remove(chosen.feature)
        _close_round(report, number, candidates, chosen)

    _log_result(report)
    return report


STRATEGIES: dict[str, Callable[[Dataset], SearchReport]] = {
    "forward":  run_forward_selection,
    "backward": run_backward_elimination,
    "pruned":   run_pruned_forward_selection,
}


def run_search(dataset: Dataset, strategy: str = "forward") -> SearchReport:
    """Run the strategy registered under ``strategy`` in :data:`STRATEGIES`."""
    try:
        runner = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"strategy must be one of {sorted(STRATEGIES)}, got {strategy!r}."
        ) from None
    return runner(dataset)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_searchable(dataset: Dataset):
    if dataset.n_features == 0:
        raise EmptyFeatureSetError("The dataset has no feature columns to search.")
    if dataset.n_instances < 2:
        raise InsufficientDataError(dataset.n_instances)
    if not dataset.normalized:
        logger.warning("Searching a dataset that has not been normalized.")


def _forward_search(dataset: Dataset, prune: bool) -> SearchReport:
    _check_searchable(dataset)
    report = SearchReport(
        strategy="pruned" if prune else "forward",
        n_instances=dataset.n_instances,
        n_features=dataset.n_features,
    )

    current: list[int] = []
    for number in range(1, dataset.n_features + 1):
        candidates  = []
        chosen      = None
        fewest_miss = None
        for feature in dataset.feature_indices:
            if feature in current:
                continue
            budget = fewest_miss if prune else None
            result = leave_one_out(
                dataset, current, feature, mode="forward", miss_budget=budget,
            )
            cand = CandidateEvaluation(
                tuple(current) + (feature,), result.accuracy, feature, result.pruned,
            )
            candidates.append(cand)

            if result.pruned:
                logger.debug(
                    "Round %d: feature %d exceeded %d misses; skipped",
                    number, feature, budget,
                )
                continue
            logger.debug(
                "Round %d: %s accuracy is %.4f",
                number, format_subset(cand.subset), cand.accuracy,
            )
            if chosen is None or cand.accuracy > chosen.accuracy:
                chosen = cand
            if fewest_miss is None or result.n_misses < fewest_miss:
                fewest_miss = result.n_misses

        current.append(chosen.feature)
        _close_round(report, number, candidates, chosen)

    _log_result(report)
    return report


def _close_round(
    report: SearchReport,
    number: int,
    candidates: list[CandidateEvaluation],
    chosen: CandidateEvaluation,
):
    """Record a finished round and update the best-so-far subset."""
    has_best  = bool(report.rounds) or report.baseline is not None
    decreased = has_best and chosen.accuracy < report.best_accuracy
    report.rounds.append(SearchRound(
        number=number,
        candidates=candidates,
        feature=chosen.feature,
        subset=chosen.subset,
        accuracy=chosen.accuracy,
        accuracy_decreased=decreased,
    ))

    if decreased:
        logger.warning(
            "Accuracy has decreased to %.4f (best %.4f); continuing search "
            "in case of local maxima.",
            chosen.accuracy, report.best_accuracy,
        )
    logger.info(
        "Round %d: feature set %s was best, accuracy is %.4f",
        number, format_subset(chosen.subset), chosen.accuracy,
    )

    if not has_best or chosen.accuracy > report.best_accuracy:
        report.best_subset   = chosen.subset
        report.best_accuracy = chosen.accuracy


def _log_result(report: SearchReport):
    logger.info(
        "Finished %s search: best feature subset is %s with accuracy %.4f "
        "(%d evaluations, %d pruned)",
        report.strategy, format_subset(report.best_subset),
        report.best_accuracy, report.n_evaluations, report.n_pruned,
    )
