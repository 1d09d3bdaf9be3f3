from __future__ import annotations

import numpy as np
import pytest

from strata.components.splitters import folds_to_pairs, stratified_kfold, stratified_split
from strata.errors import InsufficientDataError, InvalidParameterError, SchemaMismatchError


def test_every_row_in_exactly_one_fold(shuffled_labels):
    # the 2-member class would fail k=3, so drop it
    labels = shuffled_labels[shuffled_labels != 3]
    fa = stratified_kfold(labels, 3, seed=4)
    assert len(fa) == labels.size
    assert np.array_equal(fa.indices, np.arange(labels.size))
    assert fa.folds.min() >= 0 and fa.folds.max() < 3


@pytest.mark.parametrize("k", [2, 3, 5, 9])
def test_per_class_fold_counts_differ_by_at_most_one(k):
    labels = np.repeat(np.array(["a", "b", "c"]), [31, 18, 9])
    fa = stratified_kfold(labels, k, seed=8)
    for counts in fa.counts_by_class(labels).values():
        assert max(counts) - min(counts) <= 1
        assert min(counts) >= 1


def test_cross_validation_example(labels_150):
    split = stratified_split(labels_150, 0.2, seed=2)
    train_labels = labels_150[split.train_idx]
    fa = stratified_kfold(train_labels, 10, seed=42, indices=split.train_idx)

    assert fa.k == 10
    assert fa.fold_sizes() == [12] * 10
    for counts in fa.counts_by_class(train_labels).values():
        assert counts == [4] * 10

    pairs = folds_to_pairs(fa)
    tests = np.concatenate([te for _, te in pairs])
    assert np.array_equal(np.sort(tests), split.train_idx)


def test_indices_map_back_to_original_rows(labels_150):
    split = stratified_split(labels_150, 0.2, seed=2)
    fa = stratified_kfold(labels_150[split.train_idx], 10, seed=42, indices=split.train_idx)
    assert np.array_equal(fa.indices, split.train_idx)
    row = int(split.train_idx[5])
    assert 0 <= fa.fold_of(row) < 10
    with pytest.raises(KeyError):
        fa.fold_of(int(split.holdout_idx[0]))


def test_deterministic_for_same_seed(labels_150):
    a = stratified_kfold(labels_150, 5, seed=9)
    b = stratified_kfold(labels_150, 5, seed=9)
    assert a.folds.tobytes() == b.folds.tobytes()


def test_class_with_fewer_than_k_members_is_rejected():
    labels = np.array(["a"] * 20 + ["b"] * 20 + ["c"] * 4)
    with pytest.raises(InsufficientDataError) as exc:
        stratified_kfold(labels, 5, seed=0)
    assert exc.value.label == "c"
    assert exc.value.count == 4
    assert exc.value.required == 5


@pytest.mark.parametrize("k", [1, 0, -3, True, 2.5, "10", None])
def test_rejects_bad_k(k):
    with pytest.raises(InvalidParameterError):
        stratified_kfold(["a", "b"] * 10, k, seed=0)


def test_indices_length_mismatch():
    with pytest.raises(SchemaMismatchError):
        stratified_kfold(["a", "b"] * 5, 2, seed=0, indices=[0, 1, 2])


def test_pairs_are_restartable_and_disjoint(labels_150):
    fa = stratified_kfold(labels_150, 5, seed=1)
    pairs = folds_to_pairs(fa)
    assert len(pairs) == 5

    first = [(tr.tobytes(), te.tobytes()) for tr, te in pairs]
    second = [(tr.tobytes(), te.tobytes()) for tr, te in pairs]
    assert first == second

    for tr, te in pairs:
        assert np.intersect1d(tr, te).size == 0
        assert tr.size + te.size == labels_150.size

    tr_last, te_last = pairs[-1]
    assert np.array_equal(te_last, fa.test_indices(4))
    with pytest.raises(IndexError):
        pairs[5]


def test_adding_a_class_keeps_other_classes_folds():
    base = np.repeat(np.array(["a", "b"]), [12, 9])
    extended = np.concatenate([base, np.repeat(np.array(["c"]), 7)])

    fa_base = stratified_kfold(base, 3, seed=21)
    fa_ext = stratified_kfold(extended, 3, seed=21)

    assert np.array_equal(fa_ext.folds[: base.size], fa_base.folds)


def test_class_order_in_rows_does_not_change_assignment():
    labels = np.repeat(np.array(["a", "b"]), [10, 10])
    flipped = np.concatenate([labels[10:], labels[:10]])

    fa = stratified_kfold(labels, 5, seed=9)
    fa_flipped = stratified_kfold(flipped, 5, seed=9)

    assert np.array_equal(fa.folds[:10], fa_flipped.folds[10:])
    assert np.array_equal(fa.folds[10:], fa_flipped.folds[:10])


def test_as_dict_maps_row_index_to_fold(labels_150):
    split = stratified_split(labels_150, 0.2, seed=2)
    fa = stratified_kfold(labels_150[split.train_idx], 10, seed=42, indices=split.train_idx)
    mapping = fa.as_dict()

    assert sorted(mapping) == split.train_idx.tolist()
    assert all(mapping[i] == fa.fold_of(i) for i in split.train_idx[:20])
    for fold in range(10):
        assert sorted(i for i, f in mapping.items() if f == fold) == fa.test_indices(fold).tolist()


def test_nan_labels_are_rejected():
    with pytest.raises(SchemaMismatchError):
        stratified_kfold(np.array([0.0] * 6 + [np.nan] * 6), 3, seed=0)
