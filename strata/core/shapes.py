from __future__ import annotations

"""Public shape/label utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- y is 1D: (n_samples,)
- row indices are 1D int arrays into the *original* dataset
"""

from typing import Any, Optional, Tuple

import numpy as np

from strata.errors import SchemaMismatchError


def coerce_1d(a: Any) -> np.ndarray:
    """Return ``a`` as a 1D array (column vectors are flattened)."""

    arr = np.asarray(a)
    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim == 2 and 1 in arr.shape:
        return arr.ravel()
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D array; got shape {arr.shape}")
    return arr


def _has_missing(y: np.ndarray) -> bool:
    if y.dtype.kind == "f":
        return not bool(np.all(np.isfinite(y)))
    if y.dtype.kind == "O":
        return any(isinstance(v, (float, np.floating)) and not np.isfinite(v) for v in y)
    return False


def coerce_labels(labels: Any, *, n_rows: Optional[int] = None) -> np.ndarray:
    """Coerce a label sequence to 1D and check it against the dataset row count."""

    y = coerce_1d(labels)
    if _has_missing(y):
        raise SchemaMismatchError("Label sequence contains NaN or infinite values.")
    if n_rows is not None and y.shape[0] != int(n_rows):
        raise SchemaMismatchError(
            f"Label sequence has {y.shape[0]} entries but the dataset has {int(n_rows)} rows."
        )
    return y


def coerce_X_y(X: Any, y: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Enforce X as (n_samples, n_features) and y as (n_samples,)."""

    X = np.asarray(X)
    if X.ndim == 1:
        X = X[:, None]
    if X.ndim != 2:
        raise ValueError(f"X must be 2D; got {X.shape}")
    y = coerce_labels(y, n_rows=X.shape[0])
    return X, y


def class_key(label: Any) -> str:
    """Stable text key for a class label.

    numpy scalars are unwrapped first so ``np.str_('a')`` and ``'a'`` (or
    ``np.int64(1)`` and ``1``) share a key.
    """

    if isinstance(label, np.generic):
        label = label.item()
    return f"{type(label).__name__}:{label}"


def read_only(a: np.ndarray) -> np.ndarray:
    """Return ``a`` with its writeable flag cleared."""

    a.setflags(write=False)
    return a
