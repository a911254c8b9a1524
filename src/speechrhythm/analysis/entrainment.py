from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from speechrhythm.model.parameters import ResettingMethod
from speechrhythm.utils import round_half_up, round_to

if TYPE_CHECKING:
    import numpy.typing as npt

    from speechrhythm.model.utterance import Utterance

logger = logging.getLogger(__name__)

FIXED_RESETTING_LENGTH = 2
VARIABLE_RESETTING_RATIO = 0.7


def resetting_length(unit_count: int, method: ResettingMethod) -> int:
    """
    Number of leading units of a stress group that receive the reset term.

    Args:
        unit_count: Units in the group.
        method: Fixed (always 2) or variable (70 % of the group, rounded).
    """
    if method == ResettingMethod.FIXED_LENGTH:
        return FIXED_RESETTING_LENGTH
    if method == ResettingMethod.VARIABLE_LENGTH:
        return round_half_up(VARIABLE_RESETTING_RATIO * unit_count)
    raise ValueError(f"Unknown resetting method: {method!r}")


def initial_duration(t0: float, w0: float) -> float:
    """Duration of the virtual unit preceding the first one."""
    if w0 == 0:
        return t0
    return 7 * t0 ** 2


def compute_durations(
    utterance: Utterance,
    sync: npt.NDArray[np.float64],
    alpha: float,
    beta: float,
    t0: float,
    w0: float,
    resetting_method: ResettingMethod,
) -> npt.NDArray[np.float64]:
    """
    Run the entrainment recurrence over the whole utterance.

    Each duration is the previous one plus an entrainment step driven by the
    unit's sync value and its group's amplitude. The first units of every real
    group (up to the resetting length) are also pulled back towards the
    resting period, weighted by the amplitude of the preceding group. Values
    are rounded to 4 decimals before they are stored and reused.

    Args:
        utterance: Stress groups and optional catalexis.
        sync: Sync sequence, one value per unit.
        alpha: Entrainment rate.
        beta: Decay rate.
        t0: Resting period in seconds.
        w0: Coupling strength.
        resetting_method: Resetting-length policy for real groups.

    Returns:
        Array of durations in seconds, one per unit.
    """
    n_units = utterance.unit_count
    if len(sync) != n_units:
        raise ValueError(f"Sync sequence has {len(sync)} values, the utterance has {n_units} units.")

    durations = np.empty(n_units, dtype=np.float64)
    d_prev = initial_duration(t0, w0)
    previous_amplitude = 1.0
    i = 0

    for group in utterance:
        if group.is_catalexis:
            length = 0
        else:
            length = resetting_length(group.unit_count, resetting_method)

        for u in range(1, group.unit_count + 1):
            reset = -beta * (d_prev - t0) * previous_amplitude
            delta = alpha * d_prev * sync[i] * group.amplitude
            if u <= length:
                delta += reset

            d_prev = round_to(d_prev + delta)
            durations[i] = d_prev
            i += 1

        previous_amplitude = group.amplitude

    logger.debug(f"Computed {n_units} durations, total {durations.sum():.4f} s.")
    return durations
