from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np

from speechrhythm.analysis.entrainment import compute_durations
from speechrhythm.analysis.sync import compute_sync
from speechrhythm.model.parser import parse_stress_groups

if TYPE_CHECKING:
    import numpy.typing as npt

    from speechrhythm.model.parameters import ModelParameters
    from speechrhythm.model.utterance import Utterance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Output of one run: the intermediate sync values and the predicted durations."""
    utterance: Utterance
    params: ModelParameters
    sync: npt.NDArray[np.float64]
    durations: npt.NDArray[np.float64]

    @property
    def unit_count(self) -> int:
        return len(self.durations)

    @property
    def elapsed(self) -> npt.NDArray[np.float64]:
        """Cumulative time in seconds at the end of each unit."""
        return np.cumsum(self.durations)


def run_model(utterance: Utterance, params: ModelParameters) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Sync pass followed by the entrainment pass on an already parsed utterance."""
    sync = compute_sync(utterance, w0=params.w0, t0=params.t0)
    durations = compute_durations(
        utterance,
        sync,
        alpha=params.alpha,
        beta=params.beta,
        t0=params.t0,
        w0=params.w0,
        resetting_method=params.resetting_method,
    )
    return sync, durations


def simulate(
    group_count: int,
    catalexis: int,
    units_string: str,
    amplitudes_string: str,
    params: ModelParameters,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Parse the utterance description and compute its sync and duration sequences.

    Returns:
        (sync, durations), both of length equal to the number of units.
    """
    utterance = parse_stress_groups(group_count, catalexis, units_string, amplitudes_string)
    return run_model(utterance, params)


class Simulator:
    """
    Runs the coupled-oscillator model for one set of constants.
    """

    def __init__(self, params: ModelParameters) -> None:
        """
        Initialize the simulator.

        Args:
            params: Model constants, validated on every run.
        """
        self.params = params

    def run(
        self,
        group_count: int,
        catalexis: int,
        units_string: str,
        amplitudes_string: str,
    ) -> SimulationResult:
        self.params.validate()
        utterance = parse_stress_groups(group_count, catalexis, units_string, amplitudes_string)
        return self._solve(utterance)

    def run_utterance(self, utterance: Utterance) -> SimulationResult:
        self.params.validate()
        return self._solve(utterance)

    def _solve(self, utterance: Utterance) -> SimulationResult:
        logger.info(
            f"Simulating {len(utterance.groups)} stress groups, {utterance.unit_count} units "
            f"(alpha={self.params.alpha}, beta={self.params.beta}, t0={self.params.t0}, "
            f"w0={self.params.w0}, resetting={self.params.resetting_method})."
        )
        sync, durations = run_model(utterance, self.params)
        result = SimulationResult(utterance=utterance, params=self.params, sync=sync, durations=durations)
        logger.info(f"Simulation finished: total duration {result.elapsed[-1]:.4f} s.")
        return result
