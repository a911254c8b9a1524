import pytest

from speechrhythm.errors import InvalidParameterError, MalformedInputError
from speechrhythm.model.parser import parse_numeric_string, parse_stress_groups


def test_parse_preserves_group_order():
    utt = parse_stress_groups(3, 0, "2 5 3", "1 0.8 0.6")
    assert [g.unit_count for g in utt] == [2, 5, 3]
    assert [g.amplitude for g in utt] == [1.0, 0.8, 0.6]
    assert utt.catalexis is None
    assert utt.unit_count == 10


def test_catalexis_copies_last_amplitude():
    utt = parse_stress_groups(2, 3, "4 4", "1 0.5")
    assert len(utt) == 3
    assert len(utt.groups) == 2
    cat = utt.catalexis
    assert cat is not None
    assert cat.is_catalexis
    assert cat.unit_count == 3
    assert cat.amplitude == 0.5
    assert list(utt.units) == [4.0, 4.0, 3.0]
    assert list(utt.amplitudes) == [1.0, 0.5, 0.5]
    assert utt.unit_count == 11


def test_whole_number_floats_accepted_as_units():
    utt = parse_stress_groups(2, 0, "4.0 3", "1 1")
    assert [g.unit_count for g in utt] == [4, 3]


@pytest.mark.parametrize("units", ["4  4", " 4 4", "4 4 ", "4\t4", "", "4"])
def test_malformed_units_rejected(units):
    with pytest.raises(MalformedInputError) as excinfo:
        parse_stress_groups(2, 0, units, "1 0.5")
    assert excinfo.value.label == "units"
    assert excinfo.value.expected_count == 2


def test_too_many_amplitudes_rejected():
    with pytest.raises(MalformedInputError) as excinfo:
        parse_stress_groups(2, 0, "4 4", "1 0.5 0.2")
    assert excinfo.value.label == "amplitudes"
    assert "1 0.5 0.2" in str(excinfo.value)


@pytest.mark.parametrize("units", ["4 x", "4 2.5", "0 4", "-1 4", "4 nan", "4_0 4", "4 inf", "4 1e999", "4 0x4", "4 ٤"])
def test_invalid_unit_values_rejected(units):
    with pytest.raises(MalformedInputError):
        parse_stress_groups(2, 0, units, "1 1")


def test_non_positive_amplitude_rejected():
    with pytest.raises(MalformedInputError):
        parse_stress_groups(2, 0, "4 4", "1 0")


@pytest.mark.parametrize("groups, catalexis", [(0, 0), (-2, 0), (2, -1), (2.0, 0)])
def test_invalid_counts_rejected(groups, catalexis):
    with pytest.raises(InvalidParameterError):
        parse_stress_groups(groups, catalexis, "4 4", "1 1")


def test_parse_numeric_string():
    assert parse_numeric_string("1 0.5 2e-1", 3, "amplitudes") == [1.0, 0.5, 0.2]


def test_underscore_grouped_token_is_not_a_number():
    with pytest.raises(MalformedInputError) as excinfo:
        parse_stress_groups(1, 0, "4_0", "1")
    assert "'4_0' is not a number" in str(excinfo.value)


@pytest.mark.parametrize("text, expected", [("+2 .5", [2.0, 0.5]), ("3. 1E2", [3.0, 100.0])])
def test_plain_decimal_forms_accepted(text, expected):
    assert parse_numeric_string(text, 2, "amplitudes") == expected
