from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional
import numpy as np

from strata.contracts.split_configs import SplitHoldoutModel, SplitCVModel
from strata.core.shapes import coerce_X_y
from strata.components.splitters.holdout import stratified_split
from strata.components.splitters.kfold import folds_to_pairs, stratified_kfold
from strata.components.splitters.types import Split
from ..interfaces import Splitter


def _make_split(X: np.ndarray, y: np.ndarray, idx_tr: np.ndarray, idx_te: np.ndarray) -> Split:
    return Split(
        Xtr=X[idx_tr],
        Xte=X[idx_te],
        ytr=y[idx_tr],
        yte=y[idx_te],
        idx_tr=idx_tr,
        idx_te=idx_te,
    )


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitHoldoutModel
    seed: Optional[int] = None

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        X, y = coerce_X_y(X, y)
        train_idx, holdout_idx = stratified_split(
            y,
            self.cfg.holdout_frac,
            seed=0 if self.seed is None else int(self.seed),
            n_rows=X.shape[0],
        )
        yield _make_split(X, y, train_idx, holdout_idx)


@dataclass
class KFoldSplitter(Splitter):
    cfg: SplitCVModel
    seed: Optional[int] = None

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        X, y = coerce_X_y(X, y)
        assignment = stratified_kfold(
            y,
            self.cfg.n_splits,
            seed=0 if self.seed is None else int(self.seed),
        )
        for idx_tr, idx_te in folds_to_pairs(assignment):
            yield _make_split(X, y, idx_tr, idx_te)
