"""Shared schema contracts.

Pydantic models and Literal-based choice types used to validate configuration
payloads and to shape use-case results.

Keep module imports explicit in most of the codebase:
    from strata.contracts.run_config import RunConfig
The names re-exported here are a small convenience namespace.
"""

from .choices import BuiltinDataset, MetricName, ScaleName
from .split_configs import SplitCVModel, SplitHoldoutModel
from .scale_configs import ScaleModel
from .model_configs import (
    ForestConfig,
    KNNConfig,
    LDAConfig,
    ModelConfig,
    SVMConfig,
    TreeConfig,
    default_model_configs,
)
from .eval_configs import EvalModel
from .run_config import DataModel, RunConfig

__all__ = [
    "BuiltinDataset",
    "MetricName",
    "ScaleName",
    "SplitHoldoutModel",
    "SplitCVModel",
    "ScaleModel",
    "LDAConfig",
    "TreeConfig",
    "KNNConfig",
    "SVMConfig",
    "ForestConfig",
    "ModelConfig",
    "default_model_configs",
    "EvalModel",
    "DataModel",
    "RunConfig",
]
