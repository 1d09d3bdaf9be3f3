from __future__ import annotations

"""Dataset loading.

Two sources are supported:

- scikit-learn's bundled toy datasets (``iris``, ``wine``, ``breast_cancer``);
- a delimited text file read with pandas, where one column holds the label
  and every other column must be numeric.

Both produce an immutable :class:`Dataset`. The partition engine only ever
reads ``Dataset.y``.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd
from sklearn import datasets as sk_datasets

from strata.contracts.run_config import DataModel
from strata.core.shapes import coerce_X_y, read_only
from strata.errors import SchemaMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Dataset:
    name: str
    X: np.ndarray
    y: np.ndarray
    feature_names: Tuple[str, ...]
    classes: Tuple[Any, ...]

    def __post_init__(self):
        X, y = coerce_X_y(self.X, self.y)
        if X.shape[1] != len(self.feature_names):
            raise SchemaMismatchError(
                f"{len(self.feature_names)} feature names for {X.shape[1]} feature columns."
            )
        # Copies so callers cannot mutate the dataset through their own arrays.
        object.__setattr__(self, "X", read_only(np.array(X, dtype=float)))
        object.__setattr__(self, "y", read_only(np.array(y)))

    @property
    def n_rows(self) -> int:
        return int(self.X.shape[0])

    @property
    def n_features(self) -> int:
        return int(self.X.shape[1])

    def class_counts(self) -> Dict[Any, int]:
        labels, counts = np.unique(self.y, return_counts=True)
        return {lab: int(n) for lab, n in zip(labels.tolist(), counts.tolist())}

    def take(self, idx: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Rows ``idx`` as (X, y)."""
        idx = np.asarray(idx, dtype=int)
        return self.X[idx], self.y[idx]


_BUILTINS: Dict[str, Callable[..., Any]] = {
    "iris": sk_datasets.load_iris,
    "wine": sk_datasets.load_wine,
    "breast_cancer": sk_datasets.load_breast_cancer,
}


def load_builtin(name: str) -> Dataset:
    """Load a scikit-learn toy dataset with string class labels."""
    loader = _BUILTINS.get(name)
    if loader is None:
        raise ValueError(f"Unknown builtin dataset: {name!r}. Available: {sorted(_BUILTINS)}")
    bunch = loader()
    target_names = np.asarray(bunch.target_names)
    y = target_names[np.asarray(bunch.target, dtype=int)]
    ds = Dataset(
        name=name,
        X=np.asarray(bunch.data, dtype=float),
        y=y.astype(str),
        feature_names=tuple(str(f) for f in bunch.feature_names),
        classes=tuple(str(c) for c in target_names.tolist()),
    )
    logger.info("Loaded builtin dataset %r: %d rows, %d features", name, ds.n_rows, ds.n_features)
    return ds


def load_csv(
    path: Union[str, Path],
    *,
    label_column: Optional[str] = None,
    delimiter: Optional[str] = None,
    has_header: bool = True,
    encoding: Optional[str] = None,
) -> Dataset:
    """Load a labeled table; ``label_column`` defaults to the last column."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    sep = delimiter
    if sep == "\\t":
        sep = "\t"
    df = pd.read_csv(
        path,
        sep=sep if sep is not None else None,
        engine="python" if sep is None else "c",
        header=0 if has_header else None,
        encoding=encoding,
    )
    if df.shape[1] < 2:
        raise SchemaMismatchError(
            f"{path.name}: need at least one feature column and one label column; got {df.shape[1]} column(s)."
        )
    df.columns = [str(c) for c in df.columns]

    label_col = label_column if label_column is not None else df.columns[-1]
    if label_col not in df.columns:
        raise SchemaMismatchError(f"{path.name}: label column {label_col!r} not found in {list(df.columns)}")

    features = df.drop(columns=[label_col])
    non_numeric = [c for c in features.columns if not pd.api.types.is_numeric_dtype(features[c])]
    if non_numeric:
        raise SchemaMismatchError(f"{path.name}: non-numeric feature column(s) {non_numeric}")

    labels = df[label_col]
    if labels.isna().any():
        raise SchemaMismatchError(f"{path.name}: label column {label_col!r} has missing values")
    dropped = int(features.isna().any(axis=1).sum())
    if dropped:
        logger.warning("%s: dropping %d row(s) with missing feature values", path.name, dropped)
        keep = ~features.isna().any(axis=1)
        features, labels = features[keep], labels[keep]

    y = labels.to_numpy()
    ds = Dataset(
        name=path.stem,
        X=features.to_numpy(dtype=float),
        y=y,
        feature_names=tuple(features.columns),
        classes=tuple(np.unique(y).tolist()),
    )
    logger.info(
        "Loaded %s: %d rows, %d features, label column %r",
        path.name, ds.n_rows, ds.n_features, label_col,
    )
    return ds


def load_dataset(cfg: DataModel) -> Dataset:
    """Load the dataset described by ``cfg`` (``csv_path`` takes precedence)."""
    if cfg.csv_path:
        return load_csv(
            cfg.csv_path,
            label_column=cfg.label_column,
            delimiter=cfg.delimiter,
            has_header=cfg.has_header,
            encoding=cfg.encoding,
        )
    if cfg.builtin:
        return load_builtin(cfg.builtin)
    raise ValueError("DataModel needs either csv_path or builtin.")
