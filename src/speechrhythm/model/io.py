"""
Input/Output Manager
Writes duration sequences to plain text and archives whole runs in HDF5 files.
"""
from __future__ import annotations

import logging
import os
from importlib.metadata import version, PackageNotFoundError
from typing import TYPE_CHECKING

import h5py
import numpy as np

from speechrhythm.model.parameters import ModelParameters
from speechrhythm.model.utterance import StressGroup, Utterance
from speechrhythm.solvers.solver import SimulationResult

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("speechrhythm")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class IOManager:

    @staticmethod
    def write_durations(durations: npt.ArrayLike, filepath: str) -> None:
        """Write one duration per line, in seconds with 4 decimals."""
        logger.info(f"Writing durations to: {filepath}")
        values = np.asarray(durations, dtype=np.float64)
        with open(filepath, "w", encoding="utf-8") as f:
            for value in values:
                f.write(f"{value:.4f}\n")
        logger.debug(f"Wrote {len(values)} values.")

    @staticmethod
    def read_durations(filepath: str) -> npt.NDArray[np.float64]:
        """Read a file written by write_durations back into an array."""
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            values = [float(line) for line in f if line.strip()]
        return np.array(values, dtype=np.float64)

    @staticmethod
    def save_run(result: SimulationResult, filepath: str) -> None:
        logger.info(f"Saving run to: {filepath}")
        utterance = result.utterance
        with h5py.File(filepath, "w") as f:
            f.attrs["version"] = APP_VERSION

            # --- 1. PARAMETERS ---
            grp_params = f.create_group("parameters")
            for key, val in result.params.to_dict().items():
                grp_params.attrs[key] = val

            # --- 2. UTTERANCE STRUCTURE ---
            grp_utt = f.create_group("utterance")
            grp_utt.create_dataset("units", data=np.array([g.unit_count for g in utterance], dtype=np.int64))
            grp_utt.create_dataset("amplitudes", data=utterance.amplitudes)
            grp_utt.attrs["catalexis"] = utterance.catalexis.unit_count if utterance.catalexis else 0

            # --- 3. RESULTS ---
            grp_res = f.create_group("results")
            grp_res.create_dataset("sync", data=result.sync)
            grp_res.create_dataset("durations", data=result.durations)

        logger.debug(f"Saved {result.unit_count} units.")

    @staticmethod
    def load_run(filepath: str) -> SimulationResult:
        logger.info(f"Loading run from: {filepath}")
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")

        with h5py.File(filepath, "r") as f:
            try:
                file_version = f.attrs.get("version", "unknown")
                if file_version != APP_VERSION:
                    logger.warning(f"Run was saved with version {file_version}, current is {APP_VERSION}.")

                params = ModelParameters.from_dict(dict(f["parameters"].attrs))

                grp_utt = f["utterance"]
                units = grp_utt["units"][()]
                amplitudes = grp_utt["amplitudes"][()]
                catalexis = int(grp_utt.attrs["catalexis"])

                sync = np.array(f["results/sync"][()], dtype=np.float64)
                durations = np.array(f["results/durations"][()], dtype=np.float64)
            except KeyError as e:
                raise ValueError(f"'{filepath}' is not a valid run archive: missing {e}") from e

        entries = [
            StressGroup(unit_count=int(n), amplitude=float(a))
            for n, a in zip(units, amplitudes)
        ]
        # Catalexis is stored as the last row, flagged by the attribute
        if catalexis > 0:
            last = entries.pop()
            entries.append(StressGroup(unit_count=last.unit_count, amplitude=last.amplitude, is_catalexis=True))

        return SimulationResult(
            utterance=Utterance(entries=tuple(entries)),
            params=params,
            sync=sync,
            durations=durations,
        )
