from __future__ import annotations
import warnings
from dataclasses import dataclass
import numpy as np

from strata.components.interfaces import SanityChecker
from strata.core.shapes import coerce_X_y

@dataclass
class BasicClassificationSanity(SanityChecker):
    warn_on_few_per_class: bool = True
    min_per_class: int = 2  # warn if any class has fewer rows than this

    def check(self, X: np.ndarray, y: np.ndarray) -> None:
        X, y = coerce_X_y(X, y)
        classes, counts = np.unique(y, return_counts=True)
        if classes.size < 2:
            raise ValueError("y must contain at least two classes.")
        if X.shape[1] < 1:
            raise ValueError("X must have at least one feature column.")
        if not np.all(np.isfinite(X)):
            raise ValueError("X contains NaN or infinite values.")
        if self.warn_on_few_per_class:
            small = [c for c, n in zip(classes.tolist(), counts.tolist()) if n < self.min_per_class]
            if small:
                warnings.warn(
                    f"Few rows per class for {small}; results may be unstable.",
                    UserWarning,
                    stacklevel=2,
                )
