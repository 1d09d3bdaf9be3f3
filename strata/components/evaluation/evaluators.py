from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np

from strata.contracts.eval_configs import EvalModel
from strata.components.interfaces import Evaluator, MetricsComputer
from strata.components.evaluation.metrics import confusion_matrix_metrics, score as score_fn
from strata.components.evaluation.types import ConfusionPayload

@dataclass
class SklearnEvaluator(Evaluator):
    """
    Wraps the scoring functions.
    - Uses EvalModel.metric by default; pass `metric=` to score another one.
    """
    cfg: EvalModel

    def score(
        self,
        y_true: np.ndarray,
        y_pred: np.ndarray,
        *,
        metric: Optional[str] = None,
    ) -> float:
        return score_fn(y_true, y_pred, metric=metric or self.cfg.metric)


@dataclass
class SklearnMetrics(MetricsComputer):
    """Confusion-matrix payload for post-training evaluation.

    Does not fit or access models; it only consumes label arrays.
    """

    def compute(
        self,
        y_true: np.ndarray,
        y_pred: np.ndarray,
        *,
        labels: Optional[Sequence] = None,
    ) -> ConfusionPayload:
        return confusion_matrix_metrics(y_true, y_pred, labels=labels)
