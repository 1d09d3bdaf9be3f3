from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

import numpy as np
import pytest

from strata.components.splitters import stratified_split
from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import KNNConfig, LDAConfig, TreeConfig
from strata.contracts.split_configs import SplitCVModel
from strata.errors import InsufficientDataError
from strata.use_cases import compare_models, validate_on_holdout


@dataclass
class MajorityClass:
    """Always predicts the most frequent training label (first on ties)."""

    name: str = "majority"

    def fit(self, X_train: np.ndarray, y_train: np.ndarray) -> Any:
        labels, counts = np.unique(y_train, return_counts=True)
        return labels[int(np.argmax(counts))]

    def predict(self, model: Any, X: np.ndarray) -> np.ndarray:
        return np.full(X.shape[0], model)


@dataclass
class RecordingProgress:
    events: List[tuple]

    def init(self, *, total, label=None):
        self.events.append(("init", total))

    def update(self, *, current, label=None):
        self.events.append(("update", current))

    def finalize(self, *, label=None):
        self.events.append(("finalize", None))


def test_majority_baseline_on_iris(iris):
    res = compare_models(
        iris, np.arange(iris.n_rows), [MajorityClass()], cv=SplitCVModel(n_splits=10), seed=3,
    )
    scores = res.get("majority")
    assert res.n_splits == 10
    assert res.fold_sizes == [15] * 10
    assert scores.summary["accuracy"].mean == pytest.approx(1 / 3)
    assert scores.summary["kappa"].mean == pytest.approx(0.0)
    assert len(scores.fold_scores["accuracy"]) == 10
    assert scores.algo == "MajorityClass"


def test_models_share_folds_and_ranking(iris):
    split = stratified_split(iris.y, 0.2, seed=1)
    models = [KNNConfig(), LDAConfig(), MajorityClass()]
    res = compare_models(iris, split.train_idx, models, cv=SplitCVModel(n_splits=5), seed=7)

    assert res.n_train == 120
    assert sum(res.fold_sizes) == 120
    assert [m.name for m in res.models] == ["knn", "lda", "majority"]
    assert res.ranking()[-1] == "majority"
    assert res.best in ("knn", "lda")
    assert res.get("lda").summary["accuracy"].mean > 0.9


def test_comparison_is_deterministic(iris):
    models = [TreeConfig(name="cart")]
    a = compare_models(iris, np.arange(150), models, cv=SplitCVModel(n_splits=5), seed=11)
    b = compare_models(iris, np.arange(150), models, cv=SplitCVModel(n_splits=5), seed=11)
    assert a.get("cart").fold_scores == b.get("cart").fold_scores


def test_extra_metrics_and_primary_metric(iris):
    eval_cfg = EvalModel(metric="balanced_accuracy", extra_metrics=["f1_macro", "balanced_accuracy"])
    res = compare_models(
        iris, np.arange(150), [MajorityClass()], cv=SplitCVModel(n_splits=3), eval_cfg=eval_cfg,
    )
    assert res.metrics == ["balanced_accuracy", "f1_macro"]
    assert res.primary_metric == "balanced_accuracy"


def test_progress_reports_every_fold(iris):
    progress = RecordingProgress(events=[])
    compare_models(
        iris, np.arange(150), [MajorityClass(), MajorityClass(name="m2")],
        cv=SplitCVModel(n_splits=3), progress=progress,
    )
    assert progress.events[0] == ("init", 6)
    assert [e[1] for e in progress.events if e[0] == "update"] == [1, 2, 3, 4, 5, 6]
    assert progress.events[-1] == ("finalize", None)


def test_duplicate_candidate_names_are_rejected(iris):
    with pytest.raises(ValueError):
        compare_models(iris, np.arange(150), [MajorityClass(), MajorityClass()], cv=SplitCVModel(n_splits=3))


def test_too_few_training_rows_per_class(iris):
    idx = np.r_[0:4, 50:60, 100:110]
    with pytest.raises(InsufficientDataError):
        compare_models(iris, idx, [MajorityClass()], cv=SplitCVModel(n_splits=5))


def test_validate_on_holdout(iris):
    split = stratified_split(iris.y, 0.2, seed=5)
    res = validate_on_holdout(iris, split, LDAConfig(), seed=5)

    assert res.model_name == "lda"
    assert (res.n_train, res.n_holdout) == (120, 30)
    matrix = res.confusion["matrix"]
    assert len(matrix) == 3 and all(len(r) == 3 for r in matrix)
    assert sum(sum(r) for r in matrix) == 30
    assert res.confusion["labels"] == ["setosa", "versicolor", "virginica"]
    assert set(res.metrics) == {"accuracy", "kappa"}
    assert res.metrics["accuracy"] == pytest.approx(res.confusion["global"]["accuracy"])


def test_default_models_on_iris(iris):
    from strata.contracts.model_configs import ForestConfig, default_model_configs

    models = default_model_configs()[:-1] + [ForestConfig(name="rf", n_estimators=25)]
    split = stratified_split(iris.y, 0.2, seed=42)
    res = compare_models(iris, split.train_idx, models, cv=SplitCVModel(n_splits=10), seed=42)

    assert [m.name for m in res.models] == ["lda", "cart", "knn", "svm", "rf"]
    assert res.fold_sizes == [12] * 10
    for m in res.models:
        assert len(m.fold_scores["accuracy"]) == 10
        assert all(0.0 <= s <= 1.0 for s in m.fold_scores["accuracy"])
        s = m.summary["accuracy"]
        assert s.min <= s.q1 <= s.median <= s.q3 <= s.max
