from .metrics import (
    CLASS_METRICS,
    accuracy_interval,
    confusion_matrix_metrics,
    score,
    summarize_scores,
)

__all__ = [
    "CLASS_METRICS",
    "score",
    "accuracy_interval",
    "confusion_matrix_metrics",
    "summarize_scores",
]
