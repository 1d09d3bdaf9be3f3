from __future__ import annotations

import pytest
from pydantic import ValidationError

from strata.contracts.model_configs import KNNConfig, SVMConfig
from strata.contracts.run_config import RunConfig


def test_defaults():
    cfg = RunConfig()
    assert cfg.data.builtin == "iris"
    assert cfg.holdout.holdout_frac == 0.2
    assert cfg.cv.n_splits == 10
    assert [m.display_name for m in cfg.models] == ["lda", "cart", "knn", "svm", "rf"]
    assert cfg.eval.all_metrics() == ["accuracy", "kappa"]


def test_models_are_discriminated_on_algo():
    cfg = RunConfig.model_validate({"models": [{"algo": "knn", "n_neighbors": 7}, {"algo": "svm"}]})
    assert isinstance(cfg.models[0], KNNConfig)
    assert cfg.models[0].n_neighbors == 7
    assert isinstance(cfg.models[1], SVMConfig)


def test_unknown_algo_is_rejected():
    with pytest.raises(ValidationError):
        RunConfig.model_validate({"models": [{"algo": "xgboost"}]})


def test_duplicate_model_names_are_rejected():
    with pytest.raises(ValidationError):
        RunConfig(models=[KNNConfig(), KNNConfig()])
    RunConfig(models=[KNNConfig(), KNNConfig(name="knn3", n_neighbors=3)])


def test_empty_model_list_is_rejected():
    with pytest.raises(ValidationError):
        RunConfig(models=[])

