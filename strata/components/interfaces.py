from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, Any, Optional, Sequence, Iterator

import numpy as np

from strata.components.splitters.types import Split
from strata.components.evaluation.types import ConfusionPayload

if TYPE_CHECKING:  # pragma: no cover
    from strata.io.datasets import Dataset

class DataLoader(Protocol):
    def load(self) -> "Dataset":
        """Return an immutable Dataset (X, y, feature names, class domain)."""
        ...

class SanityChecker(Protocol):
    def check(self, X: np.ndarray, y: np.ndarray) -> None:
        """Raise/warn for basic dataset sanity (classes, sizes, etc.)."""
        ...

class Splitter(Protocol):
    def split(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> Iterator[Split]:
        """Yield a sequence of train/test splits.

        Implementations must yield :class:`strata.components.splitters.types.Split`.
        """
        ...

class Scaler(Protocol):
    # expose the configured sklearn transformer so a Pipeline can use it directly
    def make_transformer(self) -> Any:
        ...

class ModelBuilder(Protocol):
    def make_estimator(self) -> Any:
        """Return a configured, unfitted classifier."""
        ...

class Trainer(Protocol):
    def fit(
        self,
        model: Any,
        X_train: np.ndarray,
        y_train: np.ndarray,
    ) -> Any:
        """Fit the given model on (X_train, y_train); returns the fitted model."""
        ...

class Predictor(Protocol):
    def predict(self, model: Any, X_test: np.ndarray) -> np.ndarray:
        """Return hard labels via estimator.predict(X)."""
        ...

class TrainableEstimator(Protocol):
    """Pluggable classifier capability consumed by the comparison use-cases.

    The partition engine never looks inside an estimator; it only hands row
    subsets to ``fit`` and ``predict``.
    """

    name: str

    def fit(self, X_train: np.ndarray, y_train: np.ndarray) -> Any:
        """Fit a fresh model on the training rows and return it."""
        ...

    def predict(self, model: Any, X: np.ndarray) -> np.ndarray:
        """Predict labels for ``X`` with a model returned by :meth:`fit`."""
        ...

class Evaluator(Protocol):
    def score(
        self,
        y_true: np.ndarray,
        y_pred: np.ndarray,
        *,
        metric: Optional[str] = None,
    ) -> float:
        """Return a scalar metric computed from hard labels."""
        ...

class MetricsComputer(Protocol):
    """
    Compute structured evaluation metrics (confusion matrix and derived
    per-class statistics) from true labels and predictions.
    """
    def compute(
        self,
        y_true: np.ndarray,
        y_pred: np.ndarray,
        *,
        labels: Optional[Sequence] = None,
    ) -> ConfusionPayload:
        ...
