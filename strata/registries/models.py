from __future__ import annotations

from typing import Callable, Optional

from strata.contracts.model_configs import ModelConfig
from strata.components.interfaces import ModelBuilder
from strata.registries.base import Registry


# Factory takes (cfg, seed) and returns a ModelBuilder.
ModelBuilderFactory = Callable[[ModelConfig, Optional[int]], ModelBuilder]

_BUILDERS: Registry[str, ModelBuilderFactory] = Registry(_name="model_builders")

_BUILTINS_LOADED = False


def register_model_builder(algo: str) -> Callable[[ModelBuilderFactory], ModelBuilderFactory]:
    """Decorator to register a ModelBuilder factory under an ``algo`` key."""
    return _BUILDERS.register(str(algo))


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from strata.registries.builtins import models as _  # noqa: F401

    _BUILTINS_LOADED = True


def make_model_builder(cfg: ModelConfig, *, seed: Optional[int] = None) -> ModelBuilder:
    """Return a ModelBuilder for the provided config."""

    _ensure_builtins()
    algo = getattr(cfg, "algo", None)
    factory = _BUILDERS.try_get(str(algo))
    if factory is None:
        raise ValueError(f"Unsupported algo: {algo!r} ({type(cfg).__name__})")
    return factory(cfg, seed)


def list_model_algos() -> list[str]:
    _ensure_builtins()
    return sorted(list(_BUILDERS.keys()))
