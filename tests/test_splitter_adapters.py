from __future__ import annotations

import numpy as np
import pytest

from strata.contracts.split_configs import SplitCVModel, SplitHoldoutModel
from strata.factories.split_factory import make_splitter
from strata.registries import list_split_modes


def test_split_modes():
    assert list_split_modes() == ["holdout", "kfold"]


def test_holdout_splitter_yields_single_split(iris):
    splits = list(make_splitter(SplitHoldoutModel(holdout_frac=0.2), seed=1).split(iris.X, iris.y))
    assert len(splits) == 1
    s = splits[0]
    assert s.Xtr.shape == (120, 4) and s.Xte.shape == (30, 4)
    assert np.array_equal(iris.y[s.idx_te], s.yte)


def test_kfold_splitter_yields_k_balanced_splits(iris):
    splits = list(make_splitter(SplitCVModel(n_splits=5), seed=1).split(iris.X, iris.y))
    assert len(splits) == 5
    for s in splits:
        assert s.Xte.shape[0] == 30
        _, counts = np.unique(s.yte, return_counts=True)
        assert counts.tolist() == [10, 10, 10]
    all_te = np.sort(np.concatenate([s.idx_te for s in splits]))
    assert np.array_equal(all_te, np.arange(150))


def test_splitter_checks_lengths(iris):
    with pytest.raises(ValueError):
        list(make_splitter(SplitCVModel(n_splits=5)).split(iris.X, iris.y[:-1]))
