from __future__ import annotations

"""Partition / resampling contracts.

The engine produces exactly two kinds of objects, both immutable:

- :class:`StratifiedSplit` – a train / hold-out partition of dataset rows.
- :class:`FoldAssignment` – a fold id for every training row.

:class:`FoldPairs` is the derived, lazily evaluated (train, test) view over a
fold assignment, and :class:`Split` is the per-fold payload yielded by the
``Splitter`` adapters.

All index arrays are ascending ``int`` arrays into the *original* dataset and
are flagged read-only.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from strata.core.shapes import class_key, coerce_labels, read_only
from strata.errors import SchemaMismatchError


@dataclass(frozen=True)
class Split:
    """A single train/test split (fold).

    Notes
    -----
    - `idx_tr` / `idx_te` are row indices into the *original* X/y, helpful for
      re-ordering pooled outputs.
    """

    Xtr: np.ndarray
    Xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
    idx_tr: Optional[np.ndarray] = None
    idx_te: Optional[np.ndarray] = None


@dataclass(frozen=True, eq=False)
class StratifiedSplit:
    train_idx: np.ndarray
    holdout_idx: np.ndarray
    holdout_frac: float
    seed: int

    def __iter__(self) -> Iterator[np.ndarray]:
        # Allows ``train_idx, holdout_idx = stratified_split(...)``.
        yield self.train_idx
        yield self.holdout_idx

    @property
    def n_rows(self) -> int:
        return int(self.train_idx.size + self.holdout_idx.size)


@dataclass(frozen=True, eq=False)
class FoldAssignment:
    """Mapping training row index -> fold id in ``0..k-1``.

    ``indices`` is ascending; ``folds[j]`` is the fold of ``indices[j]``.
    """

    indices: np.ndarray
    folds: np.ndarray
    k: int
    seed: int

    def __len__(self) -> int:
        return int(self.indices.size)

    def fold_of(self, idx: int) -> int:
        pos = int(np.searchsorted(self.indices, idx))
        if pos >= self.indices.size or int(self.indices[pos]) != int(idx):
            raise KeyError(f"Row {idx} is not part of this fold assignment")
        return int(self.folds[pos])

    def test_indices(self, fold: int) -> np.ndarray:
        if not 0 <= int(fold) < self.k:
            raise IndexError(f"fold {fold} out of range for k={self.k}")
        return read_only(self.indices[self.folds == int(fold)])

    def train_indices(self, fold: int) -> np.ndarray:
        if not 0 <= int(fold) < self.k:
            raise IndexError(f"fold {fold} out of range for k={self.k}")
        return read_only(self.indices[self.folds != int(fold)])

    def fold_sizes(self) -> list[int]:
        return np.bincount(self.folds, minlength=self.k).astype(int).tolist()

    def as_dict(self) -> Dict[int, int]:
        return {int(i): int(f) for i, f in zip(self.indices, self.folds)}

    def counts_by_class(self, labels: Sequence[Any]) -> Dict[str, list[int]]:
        """Per-class row count in each fold.

        ``labels`` must align with ``indices`` (the same training labels that
        were passed to ``stratified_kfold``).
        """
        y = coerce_labels(labels)
        if y.shape[0] != self.indices.size:
            raise SchemaMismatchError(
                f"Expected {self.indices.size} labels, got {y.shape[0]}."
            )
        out: Dict[str, list[int]] = {}
        for label in np.unique(y):
            mask = y == label
            out[class_key(label)] = (
                np.bincount(self.folds[mask], minlength=self.k).astype(int).tolist()
            )
        return out


class FoldPairs(Sequence[Tuple[np.ndarray, np.ndarray]]):
    """Restartable sequence of ``k`` (train_subset, test_subset) pairs.

    Nothing is materialised up front: each access recomputes the pair for
    that fold from the underlying :class:`FoldAssignment`.
    """

    def __init__(self, assignment: FoldAssignment):
        self._assignment = assignment

    @property
    def assignment(self) -> FoldAssignment:
        return self._assignment

    def __len__(self) -> int:
        return self._assignment.k

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(len(self)))]
        k = self._assignment.k
        if i < 0:
            i += k
        if not 0 <= i < k:
            raise IndexError(f"fold {i} out of range for k={k}")
        return self._assignment.train_indices(i), self._assignment.test_indices(i)

    def __iter__(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        for i in range(len(self)):
            yield self[i]

    def __repr__(self) -> str:
        return f"FoldPairs(k={self._assignment.k}, n={len(self._assignment)})"
