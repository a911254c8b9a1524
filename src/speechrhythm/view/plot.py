"""Duration plot of a finished simulation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np
import matplotlib.pyplot as plt

from speechrhythm.utils import seconds_to_ms

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from speechrhythm.solvers.solver import SimulationResult

logger = logging.getLogger(__name__)


def plot_durations(
    result: SimulationResult,
    ax: Optional[Axes] = None,
    show: bool = False,
) -> Figure:
    """
    Plot every V-to-V duration against the time at which the unit ends.

    Args:
        result: Finished simulation.
        ax: Axes to draw into; a new figure is created when omitted.
        show: Call plt.show() after drawing.

    Returns:
        The figure holding the plot.
    """
    elapsed = result.elapsed
    durations_ms = seconds_to_ms(result.durations)

    if ax is None:
        plt.rcParams["figure.constrained_layout.use"] = True
        fig, ax = plt.subplots(figsize=(7, 5))
    else:
        fig = ax.figure

    ax.plot(elapsed, durations_ms, 'k-', lw=1)
    ax.plot(elapsed, durations_ms, 'ro', ms=5)

    # Dashed line at the end of each stress group
    for start in result.utterance.group_starts()[1:]:
        ax.axvline(elapsed[start - 1], color='gray', linestyle='--', lw=0.8)

    ax.set_xticks(elapsed)
    ax.set_xticklabels([f"{t:.2f}" for t in elapsed], rotation=45, fontsize=8)

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='y', linestyle=':', color='gray', lw=0.5)

    ax.set_title("Coupled-oscillator V-to-V durations")
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("V-to-V duration (ms)")

    ax.set_xlim(0, float(elapsed[-1]) * 1.05)
    margin = max(float(np.ptp(durations_ms)) * 0.1, 5.0)
    ax.set_ylim(float(durations_ms.min()) - margin, float(durations_ms.max()) + margin)

    if show:
        plt.show()
    return fig


def save_plot(result: SimulationResult, filepath: str) -> None:
    """Render the duration plot to an image file."""
    fig = plot_durations(result)
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    logger.info(f"Plot saved to: {filepath}")
