"""
Utterance Structure
===================
Stress groups of one utterance, followed by an optional catalexis entry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class StressGroup:
    """One entry of the utterance: a stress group or the trailing catalexis."""
    unit_count: int
    amplitude: float
    is_catalexis: bool = False


@dataclass(frozen=True)
class Utterance:
    """
    Ordered stress groups (real groups first, then at most one catalexis entry).
    Group boundaries are implied by the unit counts; units are numbered
    continuously across the whole utterance.
    """
    entries: tuple[StressGroup, ...]

    def __post_init__(self) -> None:
        catalexis_positions = [k for k, entry in enumerate(self.entries) if entry.is_catalexis]
        if catalexis_positions and catalexis_positions != [len(self.entries) - 1]:
            raise ValueError("Catalexis may only appear once, as the last entry.")
        if not self.groups:
            raise ValueError("An utterance needs at least one stress group.")

    def __iter__(self) -> Iterator[StressGroup]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def groups(self) -> tuple[StressGroup, ...]:
        """The real stress groups, without catalexis."""
        return tuple(entry for entry in self.entries if not entry.is_catalexis)

    @property
    def catalexis(self) -> Optional[StressGroup]:
        if self.entries and self.entries[-1].is_catalexis:
            return self.entries[-1]
        return None

    @property
    def unit_count(self) -> int:
        """Total number of V-to-V units, catalexis included."""
        return sum(entry.unit_count for entry in self.entries)

    @property
    def units(self) -> npt.NDArray[np.float64]:
        return np.array([entry.unit_count for entry in self.entries], dtype=np.float64)

    @property
    def amplitudes(self) -> npt.NDArray[np.float64]:
        return np.array([entry.amplitude for entry in self.entries], dtype=np.float64)

    def group_starts(self) -> list[int]:
        """Zero-based unit index at which each entry begins."""
        starts = []
        position = 0
        for entry in self.entries:
            starts.append(position)
            position += entry.unit_count
        return starts
