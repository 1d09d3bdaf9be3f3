from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Key -> factory mapping behind the ``make_*`` lookups.

        MODELS = Registry[str, ModelBuilderFactory](_name="model_builders")

        @MODELS.register("lda")
        def _lda(cfg, seed):
            return LDABuilder(cfg=cfg)

    Registering the same key twice is an error unless ``replace=True``.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K, *, replace: bool = False) -> Callable[[V], V]:
        def deco(value: V) -> V:
            if key in self._items and not replace:
                raise ValueError(f"{self._name}: key {key!r} is already registered")
            self._items[key] = value
            return value

        return deco

    def get(self, key: K) -> V:
        if key not in self._items:
            raise KeyError(f"{self._name}: unknown key {key!r}; known: {sorted(map(str, self._items))}")
        return self._items[key]

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
