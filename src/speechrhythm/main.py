"""
Command-Line Runner
===================
Collects the utterance description and model constants (from a preset and/or
command-line options), runs the simulation and hands the durations to the
printing, persistence and plotting collaborators.

Usage:
    $ python -m speechrhythm --preset reference --plot
    $ speechrhythm --groups 2 --units "4 4" --amplitudes "1 0.5" --catalexis 1 -o durations.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from speechrhythm import config
from speechrhythm.errors import InvalidParameterError, SpeechRhythmError
from speechrhythm.logging_config import setup_logging
from speechrhythm.model.io import IOManager
from speechrhythm.model.parameters import ModelParameters, ResettingMethod
from speechrhythm.solvers.solver import SimulationResult, Simulator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speechrhythm",
        description="Simulate V-to-V durations with Barbosa's coupled-oscillator model.",
    )
    source = parser.add_argument_group("utterance")
    source.add_argument("--preset", help="named scenario from the presets file")
    source.add_argument("--presets-file", help="alternative presets JSON file")
    source.add_argument("--groups", type=int, help="number of stress groups")
    source.add_argument("--units", help='V-to-V units per group, e.g. "4 4"')
    source.add_argument("--amplitudes", help='phrase-stress amplitude per group, e.g. "1 0.5"')
    source.add_argument("--catalexis", type=int, help="trailing unstressed units")

    model = parser.add_argument_group("model constants")
    model.add_argument("--alpha", type=float, help=f"entrainment rate (default {config.DEFAULT_ALPHA})")
    model.add_argument("--beta", type=float, help=f"decay rate (default {config.DEFAULT_BETA})")
    model.add_argument("--t0", type=float, help=f"resting period in seconds (default {config.DEFAULT_T0})")
    model.add_argument("--w0", type=float, help=f"coupling strength (default {config.DEFAULT_W0})")
    model.add_argument(
        "--resetting",
        choices=[m.value for m in ResettingMethod],
        help=f"resetting-length policy (default {config.DEFAULT_RESETTING_METHOD})",
    )

    out = parser.add_argument_group("output")
    out.add_argument("-o", "--output", help="write durations, one per line, to this file")
    out.add_argument("--archive", help="save the whole run to an HDF5 file")
    out.add_argument("--plot", action="store_true", help="show the duration plot")
    out.add_argument("--plot-file", help="save the duration plot to an image file")
    out.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    out.add_argument("--log-file", help="also write the log to this file")
    return parser


def resolve_settings(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the chosen preset with the explicit command-line options."""
    settings: dict[str, Any] = {"catalexis": 0}
    if args.preset:
        presets = config.load_presets(args.presets_file)
        if args.preset not in presets:
            raise InvalidParameterError("preset", args.preset, f"available presets: {sorted(presets)}")
        settings.update(presets[args.preset])

    overrides = {
        "groups": args.groups,
        "units": args.units,
        "amplitudes": args.amplitudes,
        "catalexis": args.catalexis,
        "alpha": args.alpha,
        "beta": args.beta,
        "t0": args.t0,
        "w0": args.w0,
        "resetting_method": args.resetting,
    }
    settings.update({key: val for key, val in overrides.items() if val is not None})

    for key in config.PRESET_KEYS:
        if settings.get(key) is None:
            raise InvalidParameterError(key, None, "required (give it explicitly or choose a preset)")
    return settings


def print_result(result: SimulationResult) -> None:
    print(f"{'unit':>4}  {'sync':>8}  {'duration':>8}")
    for i, (s, d) in enumerate(zip(result.sync, result.durations), start=1):
        print(f"{i:>4}  {s:>8.4f}  {d:>8.4f}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        settings = resolve_settings(args)
        params = ModelParameters.from_dict(settings)
        result = Simulator(params).run(
            group_count=settings["groups"],
            catalexis=settings["catalexis"],
            units_string=settings["units"],
            amplitudes_string=settings["amplitudes"],
        )
    except (SpeechRhythmError, OSError) as e:
        logger.error(f"Simulation aborted: {e}")
        return 1

    print_result(result)

    try:
        if args.output:
            IOManager.write_durations(result.durations, args.output)
        if args.archive:
            IOManager.save_run(result, args.archive)
        if args.plot or args.plot_file:
            # Imported here so text-only runs do not load matplotlib
            from speechrhythm.view.plot import plot_durations, save_plot
            if args.plot_file:
                save_plot(result, args.plot_file)
            if args.plot:
                plot_durations(result, show=True)
    except OSError as e:
        logger.error(f"Could not write results: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
