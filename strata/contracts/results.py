from __future__ import annotations

"""Result contracts.

These models represent *outputs* produced by the use-cases. They use
JSON-friendly field types and forbid extra fields to prevent silent drift.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

# Labels are allowed to be numbers or strings.
Label = Union[int, float, str]

JSONDict = Dict[str, Any]


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


class MetricSummary(ResultModel):
    """Distribution of one metric over the resampling folds."""

    min: float
    q1: float
    median: float
    mean: float
    q3: float
    max: float
    std: float
    n: int


class ModelScores(ResultModel):
    name: str
    algo: str
    fold_scores: Dict[str, List[float]]
    summary: Dict[str, MetricSummary]


class ComparisonResult(ResultModel):
    primary_metric: str
    metrics: List[str]
    n_splits: int
    seed: int
    n_train: int
    fold_sizes: List[int]
    models: List[ModelScores]
    best: str

    def get(self, name: str) -> ModelScores:
        for m in self.models:
            if m.name == name:
                return m
        raise KeyError(f"No model named {name!r} in comparison result")

    def ranking(self) -> List[str]:
        """Model names ordered by mean primary metric (best first, stable on ties)."""
        order = sorted(
            range(len(self.models)),
            key=lambda i: (-self.models[i].summary[self.primary_metric].mean, i),
        )
        return [self.models[i].name for i in order]


class ValidationResult(ResultModel):
    model_name: str
    n_train: int
    n_holdout: int
    metrics: Dict[str, float]
    confusion: JSONDict = Field(default_factory=dict)


class RunResult(ResultModel):
    dataset: str
    n_rows: int
    classes: List[Label]
    holdout_frac: float
    seed: int
    n_train: int
    n_holdout: int
    comparison: ComparisonResult
    validation: ValidationResult
    notes: List[str] = Field(default_factory=list)
