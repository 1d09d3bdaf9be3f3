"""Partition & resample engine.

    from strata.components.splitters import stratified_split, stratified_kfold, folds_to_pairs
"""

from .types import FoldAssignment, FoldPairs, Split, StratifiedSplit
from .holdout import holdout_count, stratified_split
from .kfold import folds_to_pairs, stratified_kfold

__all__ = [
    "Split",
    "StratifiedSplit",
    "FoldAssignment",
    "FoldPairs",
    "holdout_count",
    "stratified_split",
    "stratified_kfold",
    "folds_to_pairs",
]
