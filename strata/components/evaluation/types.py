from __future__ import annotations

"""Internal evaluation payload contracts.

Typed payload shapes used between evaluation helpers and the use-cases. They
are converted to JSON-friendly dicts before entering result contracts.
"""

from typing import Any, List, Tuple, TypedDict

import numpy as np


class ConfusionPerClass(TypedDict):
    label: Any
    tp: int
    fp: int
    tn: int
    fn: int
    support: int
    prevalence: float
    sensitivity: float
    specificity: float
    precision: float
    npv: float
    f1: float
    balanced_accuracy: float


class ConfusionGlobal(TypedDict):
    n: int
    accuracy: float
    accuracy_ci: Tuple[float, float]
    no_information_rate: float
    p_value_acc_gt_nir: float
    kappa: float
    balanced_accuracy: float


class ConfusionAverages(TypedDict):
    precision: float
    recall: float
    f1: float


ConfusionPayload = TypedDict(
    "ConfusionPayload",
    {
        "labels": np.ndarray,
        "matrix": np.ndarray,
        "per_class": List[ConfusionPerClass],
        "global": ConfusionGlobal,
        "macro_avg": ConfusionAverages,
    },
)
