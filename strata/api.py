"""Public API.

This module is the **stable public surface**:

    from strata.api import stratified_split, stratified_kfold, run_comparison

The underlying implementations live under :mod:`strata.components` and
:mod:`strata.use_cases`.
"""

from __future__ import annotations

from strata.components.splitters import (
    FoldAssignment,
    FoldPairs,
    StratifiedSplit,
    folds_to_pairs,
    stratified_kfold,
    stratified_split,
)
from strata.components.estimators import SklearnEstimator
from strata.components.interfaces import TrainableEstimator
from strata.core.progress import ProgressCallback
from strata.errors import (
    InsufficientDataError,
    InvalidParameterError,
    SchemaMismatchError,
    StrataError,
)
from strata.io.datasets import Dataset, load_builtin, load_csv, load_dataset
from strata.reporting.summary import format_comparison, format_run, format_validation
from strata.runtime.random.rng import RngManager
from strata.use_cases import compare_models, run_comparison, validate_on_holdout

__all__ = [
    # partition & resample engine
    "stratified_split",
    "stratified_kfold",
    "folds_to_pairs",
    "StratifiedSplit",
    "FoldAssignment",
    "FoldPairs",
    "RngManager",
    # errors
    "StrataError",
    "InvalidParameterError",
    "InsufficientDataError",
    "SchemaMismatchError",
    # data
    "Dataset",
    "load_builtin",
    "load_csv",
    "load_dataset",
    # estimators / use-cases
    "TrainableEstimator",
    "SklearnEstimator",
    "compare_models",
    "validate_on_holdout",
    "run_comparison",
    "ProgressCallback",
    # reporting
    "format_comparison",
    "format_validation",
    "format_run",
]
