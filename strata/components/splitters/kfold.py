from __future__ import annotations

"""Stratified k-fold assignment over the training rows."""

from numbers import Integral
from typing import Any, Optional, Sequence

import numpy as np

from strata.core.shapes import class_key, coerce_labels, read_only
from strata.errors import InsufficientDataError, InvalidParameterError, SchemaMismatchError
from strata.runtime.random.rng import RngManager
from strata.runtime.random.shuffle import permute_indices

from .holdout import group_by_class
from .types import FoldAssignment, FoldPairs


def check_n_splits(k: Any) -> int:
    if isinstance(k, bool) or not isinstance(k, Integral) or int(k) < 2:
        raise InvalidParameterError("k", k, "an integer >= 2")
    return int(k)


def stratified_kfold(
    labels: Sequence[Any],
    k: int,
    seed: int,
    *,
    indices: Optional[Sequence[int]] = None,
) -> FoldAssignment:
    """Assign every training row to one of ``k`` class-balanced folds.

    Each class is shuffled with a stream derived from ``seed`` and the class
    label, then dealt round-robin over folds ``0..k-1``. Within a class, fold
    counts therefore differ by at most one.

    ``labels`` are the labels of the training subset. ``indices`` are the
    matching original row ids (``train_idx`` of a hold-out split); they
    default to ``0..len(labels)-1``.

    Raises ``InvalidParameterError`` for ``k < 2`` and ``InsufficientDataError``
    when a class has fewer than ``k`` rows; NaN or mixed-type labels raise
    ``SchemaMismatchError``.
    """
    k = check_n_splits(k)
    y = coerce_labels(labels)

    if indices is None:
        idx = np.arange(y.shape[0], dtype=int)
    else:
        idx = np.asarray(indices, dtype=int).ravel()
        if idx.shape[0] != y.shape[0]:
            raise SchemaMismatchError(
                f"indices has {idx.shape[0]} entries but labels has {y.shape[0]}."
            )
        if np.unique(idx).size != idx.size:
            raise SchemaMismatchError("indices must not contain duplicates.")

    if y.shape[0] == 0:
        raise InsufficientDataError(None, 0, message="Cannot build folds from an empty label sequence.")

    groups = group_by_class(y)
    # Validate every class before assigning anything.
    for label, rows in groups.items():
        if rows.size < k:
            raise InsufficientDataError(label, rows.size, required=k)

    rngm = RngManager(seed)
    folds = np.empty(y.shape[0], dtype=int)
    for label, rows in groups.items():
        gen = rngm.child_generator(f"kfold/{class_key(label)}")
        shuffled = permute_indices(rows, gen)
        folds[shuffled] = np.arange(shuffled.size) % k

    order = np.argsort(idx, kind="stable")
    return FoldAssignment(
        indices=read_only(idx[order]),
        folds=read_only(folds[order]),
        k=k,
        seed=int(seed),
    )


def folds_to_pairs(assignment: FoldAssignment) -> FoldPairs:
    """(train_subset, test_subset) for every fold, recomputed on each access."""
    return FoldPairs(assignment)
