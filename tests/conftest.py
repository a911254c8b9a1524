import logging

import matplotlib

matplotlib.use("Agg")

import pytest

from speechrhythm.model.parameters import ModelParameters, ResettingMethod
from speechrhythm.model.parser import parse_stress_groups


@pytest.fixture
def reference_params():
    return ModelParameters(
        alpha=0.4, beta=1.1, t0=0.165, w0=0.78,
        resetting_method=ResettingMethod.FIXED_LENGTH,
    )


@pytest.fixture
def reference_utterance():
    return parse_stress_groups(2, 1, "4 4", "1 0.5")


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("speechrhythm")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
