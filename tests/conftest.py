from __future__ import annotations

import numpy as np
import pytest

from strata.io.datasets import Dataset, load_builtin


@pytest.fixture(scope="session")
def iris() -> Dataset:
    return load_builtin("iris")


@pytest.fixture
def labels_150() -> np.ndarray:
    """150 rows, three classes of 50, in blocks (iris layout)."""
    return np.repeat(np.array(["setosa", "versicolor", "virginica"]), 50)


@pytest.fixture
def shuffled_labels() -> np.ndarray:
    rng = np.random.default_rng(123)
    return rng.permutation(np.repeat(np.array([0, 1, 2, 3]), [30, 17, 9, 2]))
