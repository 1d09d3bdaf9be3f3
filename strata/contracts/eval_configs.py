from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from .choices import MetricName

class EvalModel(BaseModel):
    # Primary metric: used to rank models in a comparison.
    metric: MetricName = "accuracy"
    # Additional per-fold metrics reported alongside the primary one.
    extra_metrics: List[MetricName] = Field(default_factory=lambda: ["kappa"])
    seed: Optional[int] = None

    def all_metrics(self) -> List[str]:
        out = [self.metric]
        for m in self.extra_metrics:
            if m not in out:
                out.append(m)
        return out
