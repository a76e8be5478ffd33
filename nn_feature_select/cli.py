"""
nn_feature_select.cli
=====================
Command-line front end.

    nn-feature-select data.txt --algorithm forward
    python -m nn_feature_select data.txt -a 3 --plot trace.png -v

When the data file or the algorithm is not given on the command line the
user is prompted for it, the algorithm through a numbered menu.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from . import __version__
from .dataset import load_dataset, normalize
from .errors import FeatureSelectionError
from .report import format_report
from .search import run_search


__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

MENU = {
    "1": ("forward",  "Forward Selection"),
    "2": ("backward", "Backward Elimination"),
    "3": ("pruned",   "Pruned Forward Selection"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nn-feature-select",
        description="Select the feature subset that maximizes leave-one-out "
                    "1-nearest-neighbor accuracy.",
    )
    parser.add_argument(
        "data", nargs="?",
        help="Whitespace-delimited data file: class label in the first "
             "column, features after it. Prompted for if omitted.",
    )
    parser.add_argument(
        "-a", "--algorithm",
        choices=[*MENU, *(name for name, _ in MENU.values())],
        help="Search algorithm by menu number or name. "
             "A menu is shown if omitted.",
    )
    parser.add_argument("--plot", metavar="PATH",
                        help="Save a bar chart of every subset tried.")
    parser.add_argument("--json", metavar="PATH",
                        help="Write the full search report as JSON.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug).")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def _resolve_algorithm(choice: str | None) -> str:
    if choice is None:
        print("Type the number of the algorithm you want to run.")
        for number, (_, label) in MENU.items():
            print(f"\t {number}) {label}")
        choice = input().strip()
    if choice in MENU:
        return MENU[choice][0]
    names = {name for name, _ in MENU.values()}
    if choice in names:
        return choice
    raise ValueError(f"Unknown algorithm {choice!r}; choose 1, 2 or 3.")


def _fail(message: str, status: int) -> int:
    print(message, file=sys.stderr)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    print("Welcome to the nearest-neighbor feature selection tool.")
    path = args.data
    if path is None:
        print("Type in the name of the file to test:")
        path = input().strip()

    try:
        dataset = load_dataset(path)
    except FileNotFoundError as exc:
        return _fail(f"Unable to open file: {exc.filename or path}", 1)
    except FeatureSelectionError as exc:
        return _fail(f"Error: {exc}", 1)

    try:
        strategy = _resolve_algorithm(args.algorithm)
    except ValueError as exc:
        return _fail(f"Invalid choice: {exc}", 2)

    print(
        f"This dataset has {dataset.n_features} features (not including "
        f"the class attribute), with {dataset.n_instances} instances."
    )
    print("\nPlease wait while I normalize the data...\n")
    try:
        normalize(dataset)
        report = run_search(dataset, strategy)
    except FeatureSelectionError as exc:
        return _fail(f"Error: {exc}", 1)

    print(format_report(report))

    if args.json:
        with open(args.json, "w", encoding="utf-8") as fh:
            json.dump(report.to_dict(), fh, indent=2)
        logger.info("Report written to %s", args.json)
    if args.plot:
        from .plot import plot_search_trace

        plot_search_trace(report, save_path=args.plot)
        logger.info("Plot saved to %s", args.plot)

    return 0
