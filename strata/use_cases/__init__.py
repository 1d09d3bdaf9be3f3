from .comparison import compare_models, cross_validate
from .validation import validate_on_holdout
from .run import run_comparison

__all__ = [
    "compare_models",
    "cross_validate",
    "validate_on_holdout",
    "run_comparison",
]
