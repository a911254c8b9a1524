import math

import pytest

from speechrhythm.analysis.sync import compute_sync, first_unit_sync, last_unit_sync
from speechrhythm.model.parser import parse_stress_groups


def test_reference_sync_sequence(reference_utterance):
    sync = compute_sync(reference_utterance, w0=0.78, t0=0.165)
    expected = [0.1056, 0.3102, 0.8482, 0.0328, 0.1056, 0.3102, 0.8482, 0.0328, 0.0328]
    assert len(sync) == 9
    assert list(sync) == pytest.approx(expected, abs=1e-12)


def test_catalexis_repeats_last_real_value():
    utt = parse_stress_groups(2, 4, "3 2", "1 1")
    sync = compute_sync(utt, w0=0.6, t0=0.2)
    last_real = sync[4]
    assert all(value == last_real for value in sync[5:])


def test_single_unit_group_uses_first_unit_rule():
    utt = parse_stress_groups(1, 0, "1", "1")
    sync = compute_sync(utt, w0=0.78, t0=0.165)
    assert sync[0] == pytest.approx(2.1203, abs=1e-12)


def test_two_unit_group_has_no_interior():
    utt = parse_stress_groups(1, 0, "2", "1")
    sync = compute_sync(utt, w0=0.78, t0=0.165)
    assert list(sync) == pytest.approx([0.78, 0.0328], abs=1e-12)


def test_values_are_rounded_to_four_decimals(reference_utterance):
    sync = compute_sync(reference_utterance, w0=0.78, t0=0.165)
    for value in sync:
        assert round(value, 4) == value


def test_zero_coupling_gives_zero_sync(reference_utterance):
    sync = compute_sync(reference_utterance, w0=0.0, t0=0.165)
    assert not sync.any()


def test_rule_helpers():
    assert first_unit_sync(4, 0.78) == pytest.approx(0.78 * math.exp(-2))
    assert last_unit_sync(0.78, 0.165) == pytest.approx(0.78 * math.exp(-3.17))
