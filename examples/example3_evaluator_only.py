"""
Example 3 – Using the Evaluator Directly
=========================================
Score hand-picked subsets with leave-one-out 1-NN accuracy, without
running a search, and see how the miss budget cuts evaluation short.
"""

import numpy as np

from nn_feature_select import Dataset, evaluate, leave_one_out, normalize

# ---------------------------------------------------------------------------
# Synthetic dataset: features 1,2 informative, 3,4 noise
# ---------------------------------------------------------------------------
rng = np.random.default_rng(0)
n   = 200
y   = np.repeat([1.0, 2.0], n // 2)

X = np.hstack([
    np.vstack([rng.normal([0, 0], 0.6, (n // 2, 2)),
               rng.normal([2, 2], 0.6, (n // 2, 2))]),   # informative
    rng.normal(0, 1, (n, 2)),                            # noise
])
dataset = normalize(Dataset.from_arrays(X, y))

print("Feature indices: 1,2 = informative | 3,4 = noise\n")

# ---------------------------------------------------------------------------
# Score specific subsets
# ---------------------------------------------------------------------------
for subset in [(1,), (1, 2), (3, 4), (1, 3), (1, 2, 3, 4)]:
    acc = evaluate(dataset, subset, mode="backward")
    print(f"  acc{subset} = {acc:.4f}")

# ---------------------------------------------------------------------------
# Early termination
# ---------------------------------------------------------------------------
best = leave_one_out(dataset, [1], candidate=2)
print(f"\n{{1, 2}}: {best.n_misses} misses")
for candidate in (3, 4):
    result = leave_one_out(dataset, [1], candidate=candidate,
                           miss_budget=best.n_misses)
    state = "pruned" if result.pruned else f"accuracy {result.accuracy:.4f}"
    print(f"{{1, {candidate}}} with budget {best.n_misses}: {state} "
          f"after {result.n_correct + result.n_misses} instances")
