from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from scipy import stats
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    cohen_kappa_score,
    confusion_matrix,
    f1_score,
    precision_score,
    recall_score,
)

from strata.core.shapes import coerce_1d
from strata.components.evaluation.types import ConfusionPayload


def _check_len(y_true: np.ndarray, y_pred_like: np.ndarray, name: str):
    if y_true.shape[0] != y_pred_like.shape[0]:
        raise ValueError(
            f"Length mismatch: y_true({y_true.shape[0]}) vs {name}({y_pred_like.shape[0]})."
        )


def _kappa(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    # Undefined (0/0) when both sides are a single constant class.
    with np.errstate(divide="ignore", invalid="ignore"):
        val = cohen_kappa_score(y_true, y_pred)
    return float(val) if np.isfinite(val) else 0.0


CLASS_METRICS = {
    "accuracy": lambda y, yhat: accuracy_score(y, yhat),
    "balanced_accuracy": lambda y, yhat: balanced_accuracy_score(y, yhat),
    "kappa": _kappa,
    "f1_macro": lambda y, yhat: f1_score(y, yhat, average="macro", zero_division=0),
}


def score(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    *,
    metric: str = "accuracy",
) -> float:
    """Score hard-label predictions with one of :data:`CLASS_METRICS`."""
    y_true = coerce_1d(y_true)
    y_pred = coerce_1d(y_pred)
    _check_len(y_true, y_pred, "y_pred")

    if metric not in CLASS_METRICS:
        raise ValueError(
            f"Unknown classification metric '{metric}'. Supported: {list(CLASS_METRICS)}"
        )
    return float(CLASS_METRICS[metric](y_true, y_pred))


def accuracy_interval(n_correct: int, n: int, *, level: float = 0.95) -> Tuple[float, float]:
    """Exact (Clopper-Pearson) confidence interval for an accuracy estimate."""
    if n <= 0:
        return (float("nan"), float("nan"))
    alpha = 1.0 - level
    lower = 0.0 if n_correct == 0 else stats.beta.ppf(alpha / 2, n_correct, n - n_correct + 1)
    upper = 1.0 if n_correct == n else stats.beta.ppf(1 - alpha / 2, n_correct + 1, n - n_correct)
    return (float(lower), float(upper))


def summarize_scores(values: Sequence[float]) -> Dict[str, float]:
    """Five-number summary plus mean/std of per-fold scores."""
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        nan = float("nan")
        return {"min": nan, "q1": nan, "median": nan, "mean": nan, "q3": nan, "max": nan, "std": nan, "n": 0}
    q1, median, q3 = np.quantile(arr, [0.25, 0.5, 0.75])
    return {
        "min": float(arr.min()),
        "q1": float(q1),
        "median": float(median),
        "mean": float(arr.mean()),
        "q3": float(q3),
        "max": float(arr.max()),
        "std": float(arr.std(ddof=1)) if arr.size > 1 else 0.0,
        "n": int(arr.size),
    }


def confusion_matrix_metrics(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    labels: Optional[Sequence] = None,
) -> ConfusionPayload:
    """Compute a structured set of confusion-matrix-based metrics.

    Returns a dict with:
    - labels: np.ndarray of class labels (in the order used for the matrix)
    - matrix: np.ndarray of shape (n_classes, n_classes); rows are true
      labels, columns are predictions
    - per_class: one-vs-rest TP/FP/TN/FN, sensitivity, specificity,
      precision, NPV, F1, prevalence and balanced accuracy per class
    - global: accuracy with its exact 95% interval, no-information rate,
      one-sided binomial p-value for accuracy > NIR, Cohen's kappa and
      balanced accuracy
    - macro_avg: macro-averaged precision/recall/f1
    """
    y_true = coerce_1d(y_true)
    y_pred = coerce_1d(y_pred)
    _check_len(y_true, y_pred, "y_pred")
    if y_true.shape[0] == 0:
        raise ValueError("confusion_matrix_metrics needs at least one sample.")

    if labels is None:
        labels_arr = np.unique(np.concatenate([y_true, y_pred]))
    else:
        labels_arr = np.asarray(labels)

    cm = confusion_matrix(y_true, y_pred, labels=labels_arr)
    total = int(cm.sum())

    per_class = []
    for idx, label in enumerate(labels_arr):
        tp = int(cm[idx, idx])
        fn = int(cm[idx, :].sum() - tp)
        fp = int(cm[:, idx].sum() - tp)
        tn = int(total - (tp + fp + fn))
        support = int(cm[idx, :].sum())

        sensitivity = tp / (tp + fn) if (tp + fn) > 0 else 0.0
        specificity = tn / (tn + fp) if (tn + fp) > 0 else 0.0
        precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
        npv = tn / (tn + fn) if (tn + fn) > 0 else 0.0
        f1 = (
            2 * precision * sensitivity / (precision + sensitivity)
            if (precision + sensitivity) > 0
            else 0.0
        )

        per_class.append(
            {
                "label": label,
                "tp": tp,
                "fp": fp,
                "tn": tn,
                "fn": fn,
                "support": support,
                "prevalence": support / total if total else 0.0,
                "sensitivity": sensitivity,
                "specificity": specificity,
                "precision": precision,
                "npv": npv,
                "f1": f1,
                "balanced_accuracy": (sensitivity + specificity) / 2.0,
            }
        )

    n_correct = int(np.trace(cm))
    acc = n_correct / total if total else 0.0
    nir = float(cm.sum(axis=1).max() / total) if total else 0.0
    p_nir = float(stats.binomtest(n_correct, total, nir, alternative="greater").pvalue) if total else float("nan")

    return {
        "labels": labels_arr,
        "matrix": cm,
        "per_class": per_class,
        "global": {
            "n": total,
            "accuracy": float(acc),
            "accuracy_ci": accuracy_interval(n_correct, total),
            "no_information_rate": nir,
            "p_value_acc_gt_nir": p_nir,
            "kappa": _kappa(y_true, y_pred),
            "balanced_accuracy": float(balanced_accuracy_score(y_true, y_pred)),
        },
        "macro_avg": {
            "precision": float(precision_score(y_true, y_pred, labels=labels_arr, average="macro", zero_division=0)),
            "recall": float(recall_score(y_true, y_pred, labels=labels_arr, average="macro", zero_division=0)),
            "f1": float(f1_score(y_true, y_pred, labels=labels_arr, average="macro", zero_division=0)),
        },
    }
