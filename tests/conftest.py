import matplotlib

matplotlib.use("Agg")

import pytest

from accorientation.config import SAMPLE_ACCELERATION, SAMPLE_UP, SAMPLE_UP_FRONT
from accorientation.model.orientation import build_frame


@pytest.fixture
def sample_frame():
    return build_frame(SAMPLE_UP, SAMPLE_UP_FRONT)


@pytest.fixture
def sample_acceleration():
    return SAMPLE_ACCELERATION
