import math

import pytest

from speechrhythm import config
from speechrhythm.errors import InvalidParameterError
from speechrhythm.model.parameters import ModelParameters, ResettingMethod


def test_defaults_are_valid():
    params = ModelParameters()
    params.validate()
    assert params.alpha == config.DEFAULT_ALPHA
    assert params.resetting_method == ResettingMethod.FIXED_LENGTH


@pytest.mark.parametrize(
    "changes",
    [
        {"w0": 1.5},
        {"w0": -0.1},
        {"t0": 0.0},
        {"alpha": -0.4},
        {"beta": 0.0},
        {"alpha": math.nan},
        {"beta": math.inf},
        {"t0": "0.165"},
        {"resetting_method": "sometimes"},
    ],
)
def test_out_of_domain_parameters_rejected(changes):
    params = ModelParameters(**changes)
    with pytest.raises(InvalidParameterError):
        params.validate()


def test_boundary_coupling_values_accepted():
    ModelParameters(w0=0.0).validate()
    ModelParameters(w0=1.0).validate()


def test_parameters_are_immutable():
    params = ModelParameters()
    with pytest.raises(AttributeError):
        params.alpha = 1.0


@pytest.mark.parametrize("text", ["variable", "VARIABLE_LENGTH", " Variable "])
def test_resetting_method_parse(text):
    assert ResettingMethod.parse(text) is ResettingMethod.VARIABLE_LENGTH


def test_resetting_method_parse_unknown():
    with pytest.raises(InvalidParameterError):
        ResettingMethod.parse("sometimes")


def test_from_dict_fills_defaults_and_ignores_extra_keys():
    params = ModelParameters.from_dict({"w0": "0.5", "units": "4 4", "resetting_method": "variable"})
    assert params.w0 == 0.5
    assert params.t0 == config.DEFAULT_T0
    assert params.resetting_method is ResettingMethod.VARIABLE_LENGTH


def test_from_dict_rejects_non_numeric():
    with pytest.raises(InvalidParameterError) as excinfo:
        ModelParameters.from_dict({"alpha": "fast"})
    assert excinfo.value.name == "alpha"


def test_to_dict_round_trip():
    params = ModelParameters(alpha=0.3, w0=0.6, resetting_method=ResettingMethod.VARIABLE_LENGTH)
    data = params.to_dict()
    assert data["resetting_method"] == "variable"
    assert ModelParameters.from_dict(data) == params
