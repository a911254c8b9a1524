from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from speechrhythm.utils import round_to

if TYPE_CHECKING:
    import numpy.typing as npt

    from speechrhythm.model.utterance import Utterance

logger = logging.getLogger(__name__)

# Offset and slope (per ms of resting period) of the phrase-final sync term
FINAL_SYNC_OFFSET = -5.81
FINAL_SYNC_SLOPE = 0.016


def first_unit_sync(unit_count: int, w0: float) -> float:
    """Sync value of the first unit of a stress group."""
    return w0 * math.exp(-unit_count + 2)


def last_unit_sync(w0: float, t0: float) -> float:
    """Sync value of the last unit of a stress group with more than one unit."""
    return w0 * math.exp(FINAL_SYNC_OFFSET + FINAL_SYNC_SLOPE * t0 * 1000)


def interior_unit_sync(previous: float, unit_count: int, position: int, w0: float) -> float:
    """
    Sync value of a unit between the first and the last unit of a group.

    Args:
        previous: Stored (rounded) sync value of the preceding unit.
        unit_count: Units in the group.
        position: One-based position of the unit within the group.
        w0: Coupling strength.
    """
    return (1 - w0) * previous + w0 * math.exp(-unit_count + (position - 1) + 2)


def compute_sync(utterance: Utterance, w0: float, t0: float) -> npt.NDArray[np.float64]:
    """
    Compute one sync value per unit of the utterance in a single pass.

    Catalexis units repeat the preceding sync value. Every value is rounded to
    4 decimals before it is stored and before the next unit reads it.

    Args:
        utterance: Stress groups and optional catalexis.
        w0: Coupling strength.
        t0: Resting period in seconds.

    Returns:
        Array of length ``utterance.unit_count``.
    """
    sync = np.empty(utterance.unit_count, dtype=np.float64)
    i = 0
    for group in utterance:
        for u in range(1, group.unit_count + 1):
            if group.is_catalexis:
                value = sync[i - 1]
            elif u == 1:
                value = first_unit_sync(group.unit_count, w0)
            elif u == group.unit_count:
                value = last_unit_sync(w0, t0)
            else:
                value = interior_unit_sync(sync[i - 1], group.unit_count, u, w0)
            sync[i] = round_to(value)
            i += 1

    logger.debug(f"Computed {len(sync)} sync values.")
    return sync
