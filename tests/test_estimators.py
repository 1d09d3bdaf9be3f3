from __future__ import annotations

import numpy as np
import pytest
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.ensemble import RandomForestClassifier
from sklearn.svm import SVC

from strata.components.estimators import SklearnEstimator
from strata.contracts.model_configs import (
    ForestConfig,
    KNNConfig,
    LDAConfig,
    SVMConfig,
    TreeConfig,
    default_model_configs,
)
from strata.contracts.scale_configs import ScaleModel
from strata.registries import list_model_algos, make_model_builder


def test_builtin_algos_are_registered():
    assert list_model_algos() == ["forest", "knn", "lda", "svm", "tree"]


def test_default_models_have_expected_names():
    assert [m.display_name for m in default_model_configs()] == ["lda", "cart", "knn", "svm", "rf"]


def test_builder_passes_config_and_seed():
    est = make_model_builder(ForestConfig(n_estimators=7), seed=123).make_estimator()
    assert isinstance(est, RandomForestClassifier)
    assert est.n_estimators == 7
    assert est.random_state == 123


def test_explicit_random_state_wins_over_seed():
    est = make_model_builder(TreeConfig(random_state=5), seed=99).make_estimator()
    assert est.random_state == 5


def test_name_is_not_forwarded_to_estimator():
    est = make_model_builder(SVMConfig(name="svm-rbf"), seed=0).make_estimator()
    assert isinstance(est, SVC)
    assert est.kernel == "rbf"


def test_lda_svd_drops_shrinkage():
    est = make_model_builder(LDAConfig(shrinkage=0.3)).make_estimator()
    assert isinstance(est, LinearDiscriminantAnalysis)
    assert est.shrinkage is None


@pytest.mark.parametrize(
    "cfg",
    [LDAConfig(), TreeConfig(), KNNConfig(), SVMConfig(), ForestConfig(n_estimators=10)],
)
def test_sklearn_estimator_fits_and_predicts(iris, cfg):
    est = SklearnEstimator(cfg=cfg, scale=ScaleModel(method="standard"), seed=0)
    model = est.fit(iris.X, iris.y)
    y_pred = est.predict(model, iris.X[:10])
    assert y_pred.shape == (10,)
    assert set(y_pred.tolist()) <= set(iris.classes)
    assert est.name == cfg.display_name


def test_each_fit_returns_a_fresh_pipeline(iris):
    est = SklearnEstimator(cfg=KNNConfig(), scale=ScaleModel(method="none"))
    m1 = est.fit(iris.X[:100], iris.y[:100])
    m2 = est.fit(iris.X, iris.y)
    assert m1 is not m2
    assert m1.named_steps["scale"] == "passthrough"
    assert np.asarray(m1.classes_).size == 2
    assert np.asarray(m2.classes_).size == 3


def test_fit_model_rejects_single_class_rows(iris):
    from strata.components.trainers.trainers import fit_model

    est = SklearnEstimator(cfg=LDAConfig())
    with pytest.raises(ValueError):
        fit_model(est.make_pipeline(), iris.X[:20], iris.y[:20])


def test_registry_refuses_silent_override():
    from strata.registries.base import Registry

    reg = Registry(_name="t")
    reg.register("a")(1)
    with pytest.raises(ValueError):
        reg.register("a")(2)
    reg.register("a", replace=True)(3)
    assert reg.get("a") == 3 and len(reg) == 1
    with pytest.raises(KeyError):
        reg.get("b")
