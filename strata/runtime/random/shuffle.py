from __future__ import annotations

from typing import Union, Any
import numpy as np


__all__ = ["permute_indices"]


def permute_indices(
    idx: Any,
    rng: Union[None, int, np.random.Generator] = None,
) -> np.ndarray:
    """
    Return a shuffled copy of a 1D index vector.

    Parameters
    ----------
    idx : array-like of shape (n,)
        Row indices to shuffle (NumPy array, list or tuple).
    rng : None | int | numpy.random.Generator, optional
        Random generator or seed.
        - If int: a new Generator is created with that seed (reproducible).
        - If Generator: it will be used directly.
        - If None: uses np.random.default_rng() (not reproducible).

    Returns
    -------
    np.ndarray of shape (n,), dtype int
        Shuffled copy of `idx`. The input is not modified.

    Raises
    ------
    ValueError
        If `idx` is not 1D.
    """
    arr = np.asarray(idx, dtype=int)
    if arr.ndim != 1:
        raise ValueError(
            f"permute_indices expects a 1D vector, got shape {arr.shape}."
        )

    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    # permutation returns a shuffled copy (not in-place)
    return np.ascontiguousarray(gen.permutation(arr))
