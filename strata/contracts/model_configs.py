from __future__ import annotations

"""Model configuration contracts.

One pydantic model per classifier family, discriminated on ``algo``. Field
names follow the scikit-learn constructor arguments so builders can pass them
through after filtering (see ``strata.components.models.builders``).

``name`` is a display label used to key comparison results; it defaults to
``algo`` and is never forwarded to the estimator.
"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .choices import (
    ClassWeight,
    KNNAlgorithm,
    KNNWeights,
    LDASolver,
    MaxFeaturesName,
    SVMKernel,
    TreeCriterion,
)


class _NamedModel(BaseModel):
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or getattr(self, "algo")


class LDAConfig(_NamedModel):
    algo: Literal["lda"] = "lda"

    solver: LDASolver = "svd"
    shrinkage: Optional[Union[Literal["auto"], float]] = None
    tol: float = 1e-4


class TreeConfig(_NamedModel):
    algo: Literal["tree"] = "tree"

    criterion: TreeCriterion = "gini"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_features: Optional[Union[int, float, MaxFeaturesName]] = None
    ccp_alpha: float = 0.0
    class_weight: Optional[Union[ClassWeight, Dict[str, float]]] = None
    random_state: Optional[int] = None


class KNNConfig(_NamedModel):
    algo: Literal["knn"] = "knn"

    n_neighbors: int = 5
    weights: KNNWeights = "uniform"
    algorithm: KNNAlgorithm = "auto"
    leaf_size: int = 30
    p: int = 2
    n_jobs: Optional[int] = None


class SVMConfig(_NamedModel):
    algo: Literal["svm"] = "svm"

    C: float = 1.0
    kernel: SVMKernel = "rbf"
    degree: int = 3
    gamma: Union[Literal["scale", "auto"], float] = "scale"
    coef0: float = 0.0
    tol: float = 1e-3
    class_weight: Optional[Union[ClassWeight, Dict[str, float]]] = None
    max_iter: int = -1
    random_state: Optional[int] = None


class ForestConfig(_NamedModel):
    algo: Literal["forest"] = "forest"

    n_estimators: int = 500
    criterion: TreeCriterion = "gini"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_features: Union[int, float, MaxFeaturesName] = "sqrt"
    bootstrap: bool = True
    n_jobs: Optional[int] = None
    class_weight: Optional[Union[ClassWeight, Dict[str, float]]] = None
    random_state: Optional[int] = None


ModelConfig = Annotated[
    Union[
        LDAConfig,
        TreeConfig,
        KNNConfig,
        SVMConfig,
        ForestConfig,
    ],
    Field(discriminator="algo"),
]


def default_model_configs() -> List[ModelConfig]:
    """The five classifiers compared by default (in reporting order)."""
    return [
        LDAConfig(),
        TreeConfig(name="cart"),
        KNNConfig(),
        SVMConfig(),
        ForestConfig(name="rf"),
    ]
