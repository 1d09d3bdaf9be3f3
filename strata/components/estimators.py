from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np
from sklearn.pipeline import Pipeline

from strata.contracts.model_configs import ModelConfig
from strata.contracts.scale_configs import ScaleModel
from strata.components.interfaces import Predictor, Trainer, TrainableEstimator
from strata.components.scalers import PipelineScaler
from strata.components.trainers.trainers import SklearnPredictor, SklearnTrainer
from strata.registries.models import make_model_builder


@dataclass
class SklearnEstimator(TrainableEstimator):
    """``TrainableEstimator`` backed by a (scale -> clf) scikit-learn Pipeline.

    Every :meth:`fit` builds a fresh, unfitted pipeline, so one instance can be
    reused across folds without leaking state between them.
    """

    cfg: ModelConfig
    scale: ScaleModel = field(default_factory=ScaleModel)
    seed: Optional[int] = None
    trainer: Trainer = field(default_factory=SklearnTrainer)
    predictor: Predictor = field(default_factory=SklearnPredictor)

    @property
    def name(self) -> str:
        return self.cfg.display_name

    def make_pipeline(self) -> Pipeline:
        est = make_model_builder(self.cfg, seed=self.seed).make_estimator()
        return Pipeline(steps=[
            ("scale", PipelineScaler(self.scale).make_transformer()),
            ("clf", est),
        ])

    def fit(self, X_train: np.ndarray, y_train: np.ndarray) -> Any:
        return self.trainer.fit(self.make_pipeline(), X_train, y_train)

    def predict(self, model: Any, X: np.ndarray) -> np.ndarray:
        return self.predictor.predict(model, X)
