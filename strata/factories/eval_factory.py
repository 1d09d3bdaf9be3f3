from __future__ import annotations

from strata.contracts.eval_configs import EvalModel
from strata.components.interfaces import Evaluator, MetricsComputer
from strata.components.evaluation.evaluators import SklearnEvaluator, SklearnMetrics


def make_evaluator(cfg: EvalModel) -> Evaluator:
    """Create an evaluator strategy from config."""
    return SklearnEvaluator(cfg=cfg)


def make_metrics_computer() -> MetricsComputer:
    return SklearnMetrics()
