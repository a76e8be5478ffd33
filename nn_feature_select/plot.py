"""
nn_feature_select.plot
======================
Visualization helpers for search reports.
"""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from .report import SearchReport, format_subset


__all__ = ["plot_round_accuracy", "plot_search_trace"]


def plot_search_trace(
    report: SearchReport,
    *,
    title: str | None = None,
    ax: Optional[plt.Axes] = None,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Bar chart of the accuracy of every subset tried, in evaluation order.

    The best subset is highlighted in red and pruned candidates are drawn
    as hatched grey bars at zero height.

    Parameters
    ----------
    report : SearchReport
        Output of one of the ``run_*`` search functions.
    title : str, optional
        Plot title.  Defaults to the strategy name.
    ax : matplotlib Axes, optional
    save_path : str, optional

    Returns
    -------
    matplotlib.figure.Figure
    """
    entries = []
    if report.baseline is not None:
        entries.append(report.baseline)
    for rnd in report.rounds:
        entries.extend(rnd.candidates)

    labels = [format_subset(e.subset) for e in entries]
    scores = [e.accuracy for e in entries]
    colors = [
        "#C44E52" if e.subset == report.best_subset and not e.pruned
        else "#BBBBBB" if e.pruned
        else "#4C72B0"
        for e in entries
    ]

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(8, len(entries) * 0.45), 4))
    else:
        fig = ax.get_figure()

    bars = ax.bar(range(len(entries)), scores, color=colors,
                  edgecolor="white", linewidth=0.5)
    for bar, entry in zip(bars, entries):
        if entry.pruned:
            bar.set_hatch("//")
    ax.set_xticks(range(len(entries)))
    ax.set_xticklabels(labels, rotation=60, ha="right", fontsize=8)
    ax.set_ylabel("LOO 1-NN accuracy", fontsize=12)
    ax.set_title(title or f"{report.strategy} search – subsets tried", fontsize=13)
    ax.set_ylim(0, 1.05)

    handles = [mpatches.Patch(
        color="#C44E52", label=f"Best: {format_subset(report.best_subset)}",
    )]
    if report.n_pruned:
        handles.append(mpatches.Patch(color="#BBBBBB", label="Pruned"))
    ax.legend(handles=handles, fontsize=9)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def plot_round_accuracy(
    report: SearchReport,
    *,
    title: str | None = None,
    ax: Optional[plt.Axes] = None,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Line plot of each round's chosen accuracy against the best so far.

    Rounds flagged ``accuracy_decreased`` are marked with a cross, making
    local maxima of the greedy search visible.

    Returns
    -------
    matplotlib.figure.Figure
    """
    rounds      = [r.number for r in report.rounds]
    accuracy    = [r.accuracy for r in report.rounds]
    best_so_far = []
    best = report.baseline.accuracy if report.baseline is not None else None
    for acc in accuracy:
        best = acc if best is None else max(best, acc)
        best_so_far.append(best)

    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 4))
    else:
        fig = ax.get_figure()

    ax.plot(rounds, accuracy, marker="o", color="#4C72B0", label="Round best")
    ax.plot(rounds, best_so_far, linestyle="--", color="#55A868",
            label="Best so far")

    dropped = [r for r in report.rounds if r.accuracy_decreased]
    if dropped:
        ax.scatter(
            [r.number for r in dropped], [r.accuracy for r in dropped],
            c="black", marker="x", s=50, zorder=4, label="Accuracy decreased",
        )

    for r in report.rounds:
        ax.annotate(
            format_subset(r.subset), (r.number, r.accuracy),
            textcoords="offset points", xytext=(0, 6),
            ha="center", fontsize=7,
        )

    ax.set_xlabel("Round", fontsize=12)
    ax.set_ylabel("LOO 1-NN accuracy", fontsize=12)
    ax.set_title(title or f"{report.strategy} search – accuracy per round", fontsize=13)
    ax.set_ylim(0, 1.05)
    if rounds:
        ax.set_xticks(rounds)
    ax.legend(fontsize=9, loc="best")
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig
