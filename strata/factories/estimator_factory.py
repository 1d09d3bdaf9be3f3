from __future__ import annotations

from strata.contracts.model_configs import ModelConfig
from strata.contracts.scale_configs import ScaleModel
from strata.components.estimators import SklearnEstimator
from strata.components.interfaces import TrainableEstimator
from strata.runtime.random.rng import RngManager


def make_estimator(
    cfg: ModelConfig,
    scale: ScaleModel,
    rngm: RngManager,
) -> TrainableEstimator:
    """Build a TrainableEstimator whose seed is derived from the model's name."""
    return SklearnEstimator(
        cfg=cfg,
        scale=scale,
        seed=rngm.child_seed(f"model/{cfg.display_name}"),
    )
