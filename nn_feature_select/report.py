"""
nn_feature_select.report
========================
Structured output of a subset search and its plain-text rendering.

A :class:`SearchReport` is built incrementally by the search strategies and
is read-only afterwards.  :func:`format_report` turns it into the narrated
console transcript; the strategies themselves never print.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterable


__all__ = [
    "CandidateEvaluation",
    "SearchReport",
    "SearchRound",
    "format_report",
    "format_subset",
]


@dataclass(frozen=True)
class CandidateEvaluation:
    """One evaluator call made during a search.

    ``feature`` is the index being added (forward) or removed (backward);
    it is ``None`` for the baseline evaluation of backward elimination.
    """

    subset: tuple[int, ...]
    accuracy: float
    feature: int | None = None
    pruned: bool = False


@dataclass
class SearchRound:
    """Candidates tried in one round and the subset the round settled on."""

    number: int
    candidates: list[CandidateEvaluation]
    feature: int
    subset: tuple[int, ...]
    accuracy: float
    accuracy_decreased: bool = False


@dataclass
class SearchReport:
    """Full trace of a search plus the best subset found across all rounds."""

    strategy: str
    n_instances: int
    n_features: int
    rounds: list[SearchRound] = field(default_factory=list)
    best_subset: tuple[int, ...] = ()
    best_accuracy: float = 0.0
    baseline: CandidateEvaluation | None = None

    @property
    def trace(self) -> list[tuple[tuple[int, ...], float]]:
        """Every ``(subset, accuracy)`` pair in evaluation order."""
        pairs = []
        if self.baseline is not None:
            pairs.append((self.baseline.subset, self.baseline.accuracy))
        for rnd in self.rounds:
            pairs.extend((c.subset, c.accuracy) for c in rnd.candidates)
        return pairs

    @property
    def final_subset(self) -> tuple[int, ...]:
        """Subset held when the search stopped (not necessarily the best)."""
        if self.rounds:
            return self.rounds[-1].subset
        if self.baseline is not None:
            return self.baseline.subset
        return ()

    @property
    def n_evaluations(self) -> int:
        return len(self.trace)

    @property
    def n_pruned(self) -> int:
        return sum(c.pruned for rnd in self.rounds for c in rnd.candidates)

    def to_dict(self) -> dict:
        """Convert to plain Python containers (JSON-serializable)."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def format_subset(subset: Iterable[int]) -> str:
    """``(1, 4, 2)`` -> ``"{1, 4, 2}"``."""
    return "{" + ", ".join(str(f) for f in subset) + "}"


def _pct(accuracy: float) -> str:
    return f"{accuracy * 100:.1f}%"


def format_report(report: SearchReport) -> str:
    """Render a report as the step-by-step search transcript."""
    lines = ["Beginning search.", ""]

    if report.baseline is not None:
        lines.append(
            f"\tUsing all features {format_subset(report.baseline.subset)} "
            f"accuracy is {_pct(report.baseline.accuracy)}"
        )
        lines.append("")

    for rnd in report.rounds:
        for cand in rnd.candidates:
            if cand.pruned:
                lines.append(
                    f"\tAccuracy of adding feature {cand.feature} is determined "
                    f"to be lower than current best accuracy, so we skip "
                    f"calculating its accuracy."
                )
            else:
                lines.append(
                    f"\tUsing feature(s) {format_subset(cand.subset)} "
                    f"accuracy is {_pct(cand.accuracy)}"
                )
        lines.append("")
        if rnd.accuracy_decreased:
            lines.append(
                "(Warning, Accuracy has decreased! "
                "Continuing search in case of local maxima)"
            )
        lines.append(
            f"Feature set {format_subset(rnd.subset)} was best, "
            f"accuracy is {_pct(rnd.accuracy)}"
        )
        lines.append("")

    lines.append(
        f"Finished search!! The best feature subset is "
        f"{format_subset(report.best_subset)}, which has an accuracy of "
        f"{_pct(report.best_accuracy)}"
    )
    return "\n".join(lines)
