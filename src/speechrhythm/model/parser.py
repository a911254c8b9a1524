"""
Input Parser
============
Turns the per-group units and amplitudes strings into an Utterance.

Both strings hold exactly one number per stress group, separated by single
spaces, e.g. ``"4 4"`` and ``"1 0.5"``.
"""
from __future__ import annotations

import logging
import math
import re

from speechrhythm.errors import InvalidParameterError, MalformedInputError
from speechrhythm.model.utterance import StressGroup, Utterance

logger = logging.getLogger(__name__)

# Tokens separated by exactly one space, nothing before or after
_WELL_FORMED = re.compile(r"\S+(?: \S+)*")
# Plain decimal number with optional sign and exponent
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_numeric_string(text: str, expected_count: int, label: str) -> list[float]:
    """
    Split a space-separated string into exactly ``expected_count`` finite numbers.

    Args:
        text: The raw input string.
        expected_count: Number of tokens required.
        label: Name of the string, used in error messages.

    Returns:
        The numbers in input order.
    """
    if not isinstance(text, str) or not _WELL_FORMED.fullmatch(text):
        raise MalformedInputError(label, text, expected_count, "stray or repeated whitespace")

    tokens = text.split(" ")
    if len(tokens) != expected_count:
        raise MalformedInputError(label, text, expected_count, f"found {len(tokens)}")

    values = []
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            raise MalformedInputError(label, text, expected_count, f"{token!r} is not a number")
        value = float(token)
        if not math.isfinite(value):
            raise MalformedInputError(label, text, expected_count, f"{token!r} is not finite")
        values.append(value)
    return values


def _check_count(name: str, value: object, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, value, "must be an integer")
    if value < minimum:
        raise InvalidParameterError(name, value, f"must be at least {minimum}")
    return value


def parse_stress_groups(
    group_count: int,
    catalexis: int,
    units_string: str,
    amplitudes_string: str,
) -> Utterance:
    """
    Build the utterance structure from the two per-group strings.

    Args:
        group_count: Number of real stress groups.
        catalexis: Number of trailing unstressed units (0 for none).
        units_string: V-to-V units per group, e.g. "4 4".
        amplitudes_string: Phrase-stress amplitude per group, e.g. "1 0.5".

    Returns:
        The utterance; when catalexis > 0 it ends with a catalexis entry that
        carries the last real group's amplitude.
    """
    _check_count("groups", group_count, 1)
    _check_count("catalexis", catalexis, 0)

    units = parse_numeric_string(units_string, group_count, "units")
    amplitudes = parse_numeric_string(amplitudes_string, group_count, "amplitudes")

    for value in units:
        if value < 1 or not value.is_integer():
            raise MalformedInputError(
                "units", units_string, group_count, f"{value:g} is not a positive whole number"
            )
    for value in amplitudes:
        if value <= 0:
            raise MalformedInputError(
                "amplitudes", amplitudes_string, group_count, f"{value:g} is not positive"
            )

    entries = [StressGroup(unit_count=int(n), amplitude=a) for n, a in zip(units, amplitudes)]
    if catalexis > 0:
        entries.append(StressGroup(unit_count=catalexis, amplitude=amplitudes[-1], is_catalexis=True))

    utterance = Utterance(entries=tuple(entries))
    logger.debug(
        f"Parsed {group_count} stress groups (catalexis={catalexis}), {utterance.unit_count} units in total."
    )
    return utterance
