"""Built-in model builder registrations.

This module is imported for side-effects by :mod:`strata.registries.models`.
"""

from __future__ import annotations

from typing import Optional

from strata.registries.models import register_model_builder
from strata.components.models.builders import (
    DecisionTreeBuilder,
    KNNBuilder,
    LDABuilder,
    RandomForestBuilder,
    SVMBuilder,
)


@register_model_builder("lda")
def _lda(cfg, seed: Optional[int]):
    return LDABuilder(cfg=cfg)


@register_model_builder("tree")
def _tree(cfg, seed: Optional[int]):
    return DecisionTreeBuilder(cfg=cfg, seed=seed)


@register_model_builder("knn")
def _knn(cfg, seed: Optional[int]):
    return KNNBuilder(cfg=cfg)


@register_model_builder("svm")
def _svm(cfg, seed: Optional[int]):
    return SVMBuilder(cfg=cfg, seed=seed)


@register_model_builder("forest")
def _forest(cfg, seed: Optional[int]):
    return RandomForestBuilder(cfg=cfg, seed=seed)
