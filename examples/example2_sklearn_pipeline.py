"""
Example 2 – Wine Dataset & sklearn Pipeline
============================================
Demonstrates:
  * The estimator wrapper on a 3-class dataset (Wine, 13 features)
  * Integration with a scikit-learn Pipeline
  * Held-out accuracy of 1-NN on the selected subset vs all features
"""

from sklearn.datasets import load_wine
from sklearn.model_selection import cross_val_score, train_test_split
from sklearn.neighbors import KNeighborsClassifier
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from nn_feature_select import NearestNeighborFeatureSelector

# ---------------------------------------------------------------------------
# 1. Load data
# ---------------------------------------------------------------------------
X, y = load_wine(return_X_y=True)
feature_names = load_wine().feature_names

X_train, X_test, y_train, y_test = train_test_split(
    X, y, test_size=0.3, random_state=0, stratify=y,
)
print(f"Dataset: {X.shape[0]} samples, {X.shape[1]} features, 3 classes\n")

# ---------------------------------------------------------------------------
# 2. Fit the selector inside a Pipeline
# ---------------------------------------------------------------------------
pipe = Pipeline([
    ("scaler",   StandardScaler()),
    ("selector", NearestNeighborFeatureSelector(strategy="pruned", verbose=1)),
    ("clf",      KNeighborsClassifier(n_neighbors=1)),
])
pipe.fit(X_train, y_train)

selector = pipe.named_steps["selector"]
print()
print(selector.summary())
print("Selected:", list(selector.get_feature_names_out(feature_names)))

# ---------------------------------------------------------------------------
# 3. Compare against 1-NN on all features
# ---------------------------------------------------------------------------
baseline = Pipeline([
    ("scaler", StandardScaler()),
    ("clf",    KNeighborsClassifier(n_neighbors=1)),
])
baseline.fit(X_train, y_train)

print(f"\nTest accuracy, selected features : {pipe.score(X_test, y_test):.4f}")
print(f"Test accuracy, all features      : {baseline.score(X_test, y_test):.4f}")

scores = cross_val_score(pipe, X, y, cv=5)
print(f"5-fold CV accuracy (full pipeline): {scores.mean():.4f} ± {scores.std():.4f}")
