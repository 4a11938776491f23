import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def four_points():
    X = np.array([[10, 10], [20, 20], [400, 400], [410, 410]])
    y = np.array([1, 1, -1, -1])
    return X, y
