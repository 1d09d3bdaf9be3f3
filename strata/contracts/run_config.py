from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .choices import BuiltinDataset
from .split_configs import SplitHoldoutModel, SplitCVModel
from .scale_configs import ScaleModel
from .model_configs import ModelConfig, default_model_configs
from .eval_configs import EvalModel


class DataModel(BaseModel):
    # Either a scikit-learn toy dataset or a delimited file; csv_path wins.
    builtin: Optional[BuiltinDataset] = "iris"
    csv_path: Optional[str] = None

    # Parsing hints for csv_path.
    label_column: Optional[str] = None
    delimiter: Optional[str] = None
    has_header: bool = True
    encoding: Optional[str] = None


class RunConfig(BaseModel):
    data: DataModel = Field(default_factory=DataModel)
    holdout: SplitHoldoutModel = Field(default_factory=SplitHoldoutModel)
    cv: SplitCVModel = Field(default_factory=SplitCVModel)
    scale: ScaleModel = Field(default_factory=ScaleModel)
    models: List[ModelConfig] = Field(default_factory=default_model_configs)
    eval: EvalModel = Field(default_factory=EvalModel)

    @model_validator(mode="after")
    def _unique_model_names(self) -> "RunConfig":
        if not self.models:
            raise ValueError("At least one model config is required.")
        names = [m.display_name for m in self.models]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Model names must be unique; duplicated: {dupes}")
        return self
