from __future__ import annotations

"""Conversion of numpy-bearing payloads to JSON-friendly Python values."""

from typing import Any

import numpy as np


def to_jsonable(v: Any) -> Any:
    """Recursively convert numpy arrays/scalars (and tuples) to lists/floats/ints/strs."""
    if isinstance(v, dict):
        return {str(k): to_jsonable(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [to_jsonable(x) for x in v]
    if isinstance(v, np.ndarray):
        return [to_jsonable(x) for x in v.tolist()]
    if isinstance(v, np.generic):
        return v.item()
    return v
