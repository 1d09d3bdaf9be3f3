from __future__ import annotations

"""Resampled comparison of several classifiers on shared folds.

All candidates are scored on the *same* stratified fold assignment, so the
per-fold scores are paired across models.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from strata.components.interfaces import Evaluator, TrainableEstimator
from strata.components.evaluation.metrics import summarize_scores
from strata.components.splitters.kfold import folds_to_pairs, stratified_kfold
from strata.components.splitters.types import FoldPairs
from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import ModelConfig
from strata.contracts.results import ComparisonResult, MetricSummary, ModelScores
from strata.contracts.scale_configs import ScaleModel
from strata.contracts.split_configs import SplitCVModel
from strata.core.progress import ProgressCallback
from strata.factories.estimator_factory import make_estimator
from strata.factories.eval_factory import make_evaluator
from strata.io.datasets import Dataset
from strata.runtime.random.rng import RngManager

logger = logging.getLogger(__name__)

Candidate = Union[ModelConfig, TrainableEstimator]


def _is_estimator(obj: Any) -> bool:
    return callable(getattr(obj, "fit", None)) and callable(getattr(obj, "predict", None))


def _algo_of(est: Any) -> str:
    cfg = getattr(est, "cfg", None)
    algo = getattr(cfg, "algo", None)
    return str(algo) if algo is not None else type(est).__name__


def cross_validate(
    estimator: TrainableEstimator,
    dataset: Dataset,
    pairs: FoldPairs,
    *,
    evaluator: Evaluator,
    metrics: Sequence[str],
    progress: Optional[ProgressCallback] = None,
    progress_offset: int = 0,
) -> Dict[str, List[float]]:
    """Fit/score ``estimator`` once per fold; returns metric -> per-fold scores."""
    scores: Dict[str, List[float]] = {m: [] for m in metrics}
    for fold_id, (idx_tr, idx_te) in enumerate(pairs):
        Xtr, ytr = dataset.take(idx_tr)
        Xte, yte = dataset.take(idx_te)
        model = estimator.fit(Xtr, ytr)
        y_pred = estimator.predict(model, Xte)
        for m in metrics:
            scores[m].append(evaluator.score(yte, y_pred, metric=m))
        logger.debug(
            "%s fold %d: %s", estimator.name, fold_id,
            ", ".join(f"{m}={scores[m][-1]:.4f}" for m in metrics),
        )
        if progress is not None:
            progress.update(current=progress_offset + fold_id + 1, label=estimator.name)
    return scores


def compare_models(
    dataset: Dataset,
    train_idx: Sequence[int],
    models: Sequence[Candidate],
    *,
    cv: Optional[SplitCVModel] = None,
    scale: Optional[ScaleModel] = None,
    eval_cfg: Optional[EvalModel] = None,
    seed: int = 0,
    progress: Optional[ProgressCallback] = None,
) -> ComparisonResult:
    """Cross-validate every candidate on one stratified fold assignment of ``train_idx``.

    Candidates are model configs (built into scikit-learn pipelines) or any
    object implementing ``TrainableEstimator``. The best model is the one with
    the highest mean primary metric; ties go to the earlier candidate.
    """
    cv = cv or SplitCVModel()
    scale = scale or ScaleModel()
    eval_cfg = eval_cfg or EvalModel()
    if not models:
        raise ValueError("compare_models needs at least one candidate model.")

    rngm = RngManager(seed)
    train_idx = np.asarray(train_idx, dtype=int)
    assignment = stratified_kfold(
        dataset.y[train_idx],
        cv.n_splits,
        rngm.child_seed("train/cv"),
        indices=train_idx,
    )
    pairs = folds_to_pairs(assignment)

    estimators = [m if _is_estimator(m) else make_estimator(m, scale, rngm) for m in models]
    names = [e.name for e in estimators]
    if len(set(names)) != len(names):
        raise ValueError(f"Candidate model names must be unique; got {names}")

    metrics = eval_cfg.all_metrics()
    evaluator = make_evaluator(eval_cfg)
    logger.info(
        "Comparing %d model(s) with %d-fold CV on %d training rows (metrics: %s)",
        len(estimators), assignment.k, len(assignment), ", ".join(metrics),
    )

    if progress is not None:
        progress.init(total=len(estimators) * assignment.k, label="compare")

    out: List[ModelScores] = []
    for i, est in enumerate(estimators):
        fold_scores = cross_validate(
            est,
            dataset,
            pairs,
            evaluator=evaluator,
            metrics=metrics,
            progress=progress,
            progress_offset=i * assignment.k,
        )
        summary = {m: MetricSummary(**summarize_scores(v)) for m, v in fold_scores.items()}
        logger.info(
            "%s: mean %s = %.4f (sd %.4f)",
            est.name, eval_cfg.metric,
            summary[eval_cfg.metric].mean, summary[eval_cfg.metric].std,
        )
        out.append(ModelScores(name=est.name, algo=_algo_of(est), fold_scores=fold_scores, summary=summary))

    if progress is not None:
        progress.finalize(label="compare")

    result = ComparisonResult(
        primary_metric=eval_cfg.metric,
        metrics=metrics,
        n_splits=assignment.k,
        seed=int(seed),
        n_train=len(assignment),
        fold_sizes=assignment.fold_sizes(),
        models=out,
        best=names[0],
    )
    best = result.ranking()[0]
    logger.info("Best model by mean %s: %s", eval_cfg.metric, best)
    return result.model_copy(update={"best": best})
