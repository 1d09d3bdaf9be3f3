from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from sklearn.preprocessing import MinMaxScaler, RobustScaler, StandardScaler

from strata.contracts.scale_configs import ScaleModel
from strata.components.interfaces import Scaler

@dataclass
class PipelineScaler(Scaler):
    """Exposes the configured sklearn transformer for the `scale` pipeline step.

    The transformer is fitted inside the pipeline, i.e. on the training rows
    of each fold only.
    """
    cfg: ScaleModel

    def make_transformer(self) -> Any:
        method = (self.cfg.method or "none").lower()

        if method == "standard":
            return StandardScaler(with_mean=True, with_std=True, copy=True)

        if method == "robust":
            # Tukey's IQR by default (25–75)
            return RobustScaler(with_centering=True, with_scaling=True,
                                quantile_range=(25.0, 75.0), copy=True)

        if method == "minmax":
            return MinMaxScaler(copy=True)

        if method == "none":
            # Pipelines accept the literal string 'passthrough'
            return "passthrough"

        raise ValueError(f"Unknown scaler method: {self.cfg.method!r}")
