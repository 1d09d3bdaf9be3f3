from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import numpy as np

from strata.components.interfaces import Predictor, Trainer
from strata.core.shapes import coerce_X_y


def fit_model(model: Any, X_train: np.ndarray, y_train: np.ndarray) -> Any:
    """Fit an unfitted estimator/pipeline on one training subset and return it.

    The training rows must cover at least two classes; a stratified fold
    always does, so hitting this means the caller passed the wrong rows.
    """
    if not hasattr(model, "fit"):
        raise AttributeError("`model` has no `.fit(...)` method.")

    X_train, y_train = coerce_X_y(X_train, y_train)
    if np.unique(y_train).size < 2:
        raise ValueError("Training rows contain a single class; cannot fit a classifier.")
    return model.fit(X_train, y_train)


@dataclass
class SklearnTrainer(Trainer):
    """Thin adapter around fit_model; no RNG or state."""
    def fit(self, model: Any, X_train: np.ndarray, y_train: np.ndarray) -> Any:
        return fit_model(model, X_train, y_train)


@dataclass
class SklearnPredictor(Predictor):
    def predict(self, model: Any, X_test: np.ndarray) -> np.ndarray:
        if not hasattr(model, "predict"):
            raise AttributeError("`model` has no `.predict(...)` method.")
        return np.asarray(model.predict(np.asarray(X_test))).ravel()
