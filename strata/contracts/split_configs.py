from __future__ import annotations

from typing import Literal
from pydantic import BaseModel

# Ranges are enforced by the partition engine itself (InvalidParameterError),
# so configs carry plain numbers.

class SplitHoldoutModel(BaseModel):
    mode: Literal["holdout"] = "holdout"
    holdout_frac: float = 0.2

class SplitCVModel(BaseModel):
    mode: Literal["kfold"] = "kfold"
    n_splits: int = 10
