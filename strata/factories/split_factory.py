from __future__ import annotations

from typing import Optional, Union

from strata.contracts.split_configs import SplitHoldoutModel, SplitCVModel
from strata.registries.splitters import make_splitter as _make_splitter
from strata.components.interfaces import Splitter

SplitConfig = Union[SplitHoldoutModel, SplitCVModel]


def make_splitter(cfg: SplitConfig, seed: Optional[int] = None) -> Splitter:
    """Thin wrapper around the splitter registry."""
    return _make_splitter(cfg, seed=seed)
