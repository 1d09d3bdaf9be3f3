from __future__ import annotations

import logging
from typing import Optional, Union

from strata.components.interfaces import TrainableEstimator
from strata.components.splitters.types import StratifiedSplit
from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import ModelConfig
from strata.contracts.results import ValidationResult
from strata.contracts.scale_configs import ScaleModel
from strata.core.json_safety import to_jsonable
from strata.factories.estimator_factory import make_estimator
from strata.factories.eval_factory import make_evaluator, make_metrics_computer
from strata.io.datasets import Dataset
from strata.runtime.random.rng import RngManager

logger = logging.getLogger(__name__)


def validate_on_holdout(
    dataset: Dataset,
    split: StratifiedSplit,
    model: Union[ModelConfig, TrainableEstimator],
    *,
    scale: Optional[ScaleModel] = None,
    eval_cfg: Optional[EvalModel] = None,
    seed: int = 0,
) -> ValidationResult:
    """Refit ``model`` on all training rows and score it once on the hold-out rows."""
    eval_cfg = eval_cfg or EvalModel()
    if hasattr(model, "fit") and hasattr(model, "predict"):
        estimator = model
    else:
        estimator = make_estimator(model, scale or ScaleModel(), RngManager(seed))

    if split.holdout_idx.size == 0:
        raise ValueError("Hold-out set is empty; nothing to validate on.")

    Xtr, ytr = dataset.take(split.train_idx)
    Xte, yte = dataset.take(split.holdout_idx)
    fitted = estimator.fit(Xtr, ytr)
    y_pred = estimator.predict(fitted, Xte)

    evaluator = make_evaluator(eval_cfg)
    metrics = {m: evaluator.score(yte, y_pred, metric=m) for m in eval_cfg.all_metrics()}
    confusion = make_metrics_computer().compute(yte, y_pred, labels=list(dataset.classes))

    logger.info(
        "Hold-out %s for %s: %.4f on %d rows",
        eval_cfg.metric, estimator.name, metrics[eval_cfg.metric], int(yte.shape[0]),
    )
    return ValidationResult(
        model_name=estimator.name,
        n_train=int(split.train_idx.size),
        n_holdout=int(split.holdout_idx.size),
        metrics=metrics,
        confusion=to_jsonable(confusion),
    )
