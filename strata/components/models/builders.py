from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.ensemble import RandomForestClassifier
from sklearn.neighbors import KNeighborsClassifier
from sklearn.svm import SVC
from sklearn.tree import DecisionTreeClassifier

from strata.contracts.model_configs import (
    ForestConfig,
    KNNConfig,
    LDAConfig,
    SVMConfig,
    TreeConfig,
)
from strata.components.interfaces import ModelBuilder


def _filtered_kwargs(estimator_cls: type, cfg_obj: Any, *, exclude: set[str] = {"algo", "name"}) -> Dict[str, Any]:
    """Dump cfg to dict, drop None, remove 'algo'/'name', and keep only kwargs accepted by estimator."""
    raw = cfg_obj.model_dump(exclude=exclude, exclude_none=True, by_alias=True)
    sig = inspect.signature(estimator_cls)
    allowed = set(sig.parameters.keys())
    return {k: v for k, v in raw.items() if k in allowed}


def _maybe_set_random_state(estimator_cls: type, kw: Dict[str, Any], seed: Optional[int]) -> None:
    if seed is None:
        return
    sig = inspect.signature(estimator_cls)
    if "random_state" in sig.parameters and "random_state" not in kw:
        kw["random_state"] = int(seed)


@dataclass
class LDABuilder(ModelBuilder):
    cfg: LDAConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(LinearDiscriminantAnalysis, self.cfg)
        # shrinkage is only valid with the lsqr/eigen solvers
        if self.cfg.solver == "svd":
            kw.pop("shrinkage", None)
        return LinearDiscriminantAnalysis(**kw)


@dataclass
class DecisionTreeBuilder(ModelBuilder):
    cfg: TreeConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(DecisionTreeClassifier, self.cfg)
        _maybe_set_random_state(DecisionTreeClassifier, kw, self.seed)
        return DecisionTreeClassifier(**kw)


@dataclass
class KNNBuilder(ModelBuilder):
    cfg: KNNConfig

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(KNeighborsClassifier, self.cfg)
        return KNeighborsClassifier(**kw)


@dataclass
class SVMBuilder(ModelBuilder):
    cfg: SVMConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(SVC, self.cfg)
        _maybe_set_random_state(SVC, kw, self.seed)
        return SVC(**kw)


@dataclass
class RandomForestBuilder(ModelBuilder):
    cfg: ForestConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = _filtered_kwargs(RandomForestClassifier, self.cfg)
        _maybe_set_random_state(RandomForestClassifier, kw, self.seed)
        return RandomForestClassifier(**kw)
