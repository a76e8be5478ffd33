"""
Example 1 – Text Dataset, All Three Searches
=============================================
Writes a small synthetic dataset in the whitespace-delimited format (label
first, features after), loads it back and compares the three strategies.

Dataset : 120 instances, 8 features, 2 classes
          features 3 and 6 carry the signal, the rest is noise
"""

import numpy as np

from nn_feature_select import (
    format_report,
    load_dataset,
    normalize,
    run_backward_elimination,
    run_forward_selection,
    run_pruned_forward_selection,
)
from nn_feature_select.plot import plot_round_accuracy, plot_search_trace

# ---------------------------------------------------------------------------
# 1. Write a synthetic data file
# ---------------------------------------------------------------------------
rng = np.random.default_rng(0)
n   = 120
y   = np.repeat([1.0, 2.0], n // 2)

X = rng.normal(0, 1, (n, 8))
X[:, 2] += 2.0 * (y - 1.5)                  # feature 3
X[:, 5] -= 1.5 * (y - 1.5)                  # feature 6

np.savetxt("example1_data.txt", np.column_stack([y, X]), fmt="%.7e")

# ---------------------------------------------------------------------------
# 2. Load and normalize
# ---------------------------------------------------------------------------
dataset = normalize(load_dataset("example1_data.txt"))
print(f"Dataset: {dataset.n_instances} instances, {dataset.n_features} features\n")

# ---------------------------------------------------------------------------
# 3. Run each strategy
# ---------------------------------------------------------------------------
reports = {
    "forward":  run_forward_selection(dataset),
    "backward": run_backward_elimination(dataset),
    "pruned":   run_pruned_forward_selection(dataset),
}

print(format_report(reports["forward"]))
print()
for name, report in reports.items():
    print(
        f"  {name:<9} best={report.best_subset}  "
        f"accuracy={report.best_accuracy:.4f}  "
        f"evaluations={report.n_evaluations}  pruned={report.n_pruned}"
    )

# ---------------------------------------------------------------------------
# 4. Visualise
# ---------------------------------------------------------------------------
plot_search_trace(reports["pruned"], save_path="example1_trace.png")
plot_round_accuracy(reports["backward"], save_path="example1_rounds.png")
print("\nPlots saved: example1_trace.png, example1_rounds.png")
