from __future__ import annotations
import hashlib
import numpy as np
from numpy.random import Generator

class RngManager:
    """
    Single source of truth for randomness.
    Creates named, order-independent child seeds/streams by hashing:
      child_seed(name)       -> stable int seed
      child_generator(name)  -> np.random.Generator seeded from that int
      child_manager(name)    -> RngManager rooted at child_seed(name)

    Nothing here touches numpy's global random state, so two managers built
    from the same seed always hand out the same streams, whatever else the
    process has consumed in between.
    """
    def __init__(self, seed: int | None):
        # Keep a small, well-defined representation
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    @property
    def root(self) -> int:
        return self._root

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # Use 32 bits for compatibility with libraries expecting uint32 seeds
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int:
        return self._mix(name)

    def child_generator(self, name: str) -> Generator:
        return np.random.default_rng(self._mix(name))

    def child_manager(self, name: str) -> "RngManager":
        return RngManager(self._mix(name))

    def __repr__(self) -> str:
        return f"RngManager(root={self._root})"
