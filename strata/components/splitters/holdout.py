from __future__ import annotations

"""Stratified train / hold-out partitioning.

Rounding rule
-------------
For a class with ``size`` rows the hold-out share is rounded **half up**::

    count = floor(holdout_frac * size + 0.5)

A tolerance of 1e-9 is added before flooring so that products which are
meant to land exactly on a half (``0.3 * 5``) are not pulled down by binary
floating-point error. The count is then constrained per class:

- ``size == 1``: the single row always stays in train (count 0);
- ``size >= 2``: count is clamped to ``[1, size - 1]`` so the class is present
  on both sides.

The clamp moves the count by at most one row, so the per-class hold-out count
is always within 1 of ``round(holdout_frac * size)``.
"""

import math
from numbers import Real
from typing import Any, Dict, Optional, Sequence

import numpy as np

from strata.core.shapes import class_key, coerce_labels, read_only
from strata.errors import InsufficientDataError, InvalidParameterError, SchemaMismatchError
from strata.runtime.random.rng import RngManager
from strata.runtime.random.shuffle import permute_indices

from .types import StratifiedSplit

_HALF_UP_TOL = 1e-9


def check_holdout_frac(holdout_frac: Any) -> float:
    if isinstance(holdout_frac, bool) or not isinstance(holdout_frac, Real):
        raise InvalidParameterError("holdout_frac", holdout_frac, "a real number in (0, 1)")
    p = float(holdout_frac)
    if not math.isfinite(p) or not (0.0 < p < 1.0):
        raise InvalidParameterError("holdout_frac", holdout_frac, "a real number in (0, 1)")
    return p


def holdout_count(holdout_frac: float, size: int) -> int:
    """Number of rows of a ``size``-row class that go to the hold-out set."""
    if size <= 1:
        return 0
    count = int(math.floor(holdout_frac * size + 0.5 + _HALF_UP_TOL))
    return min(max(count, 1), size - 1)


def group_by_class(y: np.ndarray) -> Dict[Any, np.ndarray]:
    """Map each distinct label to its ascending row positions."""
    try:
        labels = np.unique(y)
    except TypeError as e:
        raise SchemaMismatchError(f"Labels must be mutually comparable; got mixed types ({e}).") from e
    groups: Dict[Any, np.ndarray] = {}
    for label in labels:
        groups[label] = np.flatnonzero(y == label)
    return groups


def stratified_split(
    labels: Sequence[Any],
    holdout_frac: float,
    seed: int,
    *,
    classes: Optional[Sequence[Any]] = None,
    n_rows: Optional[int] = None,
) -> StratifiedSplit:
    """Split row indices into train / hold-out sets, preserving class proportions.

    Parameters
    ----------
    labels : sequence of shape (n,)
        Class label of every dataset row.
    holdout_frac : float
        Fraction of each class reserved for the hold-out set, in (0, 1).
    seed : int
        Root seed. Each class draws from its own stream derived from ``seed``
        and the class label, so the result does not depend on class order.
    classes : sequence, optional
        Declared label domain. A declared class with no rows is an error.
    n_rows : int, optional
        Dataset row count; ``len(labels)`` must match it.

    Returns
    -------
    StratifiedSplit
        Ascending, disjoint ``train_idx`` / ``holdout_idx`` covering ``[0, n)``.
        Unpacks as ``train_idx, holdout_idx``.

    Raises
    ------
    InvalidParameterError
        If ``holdout_frac`` is not in (0, 1).
    InsufficientDataError
        If ``labels`` is empty or a declared class has no rows.
    SchemaMismatchError
        If ``len(labels) != n_rows``, a label is NaN, or labels of mixed,
        non-comparable types are given.
    """
    p = check_holdout_frac(holdout_frac)
    y = coerce_labels(labels, n_rows=n_rows)
    if y.shape[0] == 0:
        raise InsufficientDataError(None, 0, message="Cannot split an empty label sequence.")

    groups = group_by_class(y)
    if classes is not None:
        present = {class_key(c) for c in groups}
        for c in classes:
            if class_key(c) not in present:
                raise InsufficientDataError(c, 0, required=1)

    rngm = RngManager(seed)
    picked = []
    for label, rows in groups.items():
        count = holdout_count(p, rows.size)
        if count == 0:
            continue
        gen = rngm.child_generator(f"holdout/{class_key(label)}")
        picked.append(permute_indices(rows, gen)[:count])

    is_holdout = np.zeros(y.shape[0], dtype=bool)
    if picked:
        is_holdout[np.concatenate(picked)] = True

    return StratifiedSplit(
        train_idx=read_only(np.flatnonzero(~is_holdout)),
        holdout_idx=read_only(np.flatnonzero(is_holdout)),
        holdout_frac=p,
        seed=int(seed),
    )
