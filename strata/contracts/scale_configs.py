from __future__ import annotations

from pydantic import BaseModel

from .choices import ScaleName


class ScaleModel(BaseModel):
    method: ScaleName = "standard"
