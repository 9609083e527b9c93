import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from data_prepared import make_gaussian_blobs


@pytest.fixture
def blobs() -> tuple[np.ndarray, np.ndarray]:
	return make_gaussian_blobs(50, seed=7)
