"""
Error Types
===========
Exceptions raised by the simulation core.

Every error aborts the current run. Nothing is retried and no partial
sequences are returned.
"""
from __future__ import annotations


class SpeechRhythmError(Exception):
    """Base class for all errors raised by speechrhythm."""


class MalformedInputError(SpeechRhythmError, ValueError):
    """
    A units/amplitudes string does not hold exactly the expected number of
    well-formed numeric tokens.
    """

    def __init__(self, label: str, text: str, expected_count: int, reason: str = "") -> None:
        self.label = label
        self.text = text
        self.expected_count = expected_count
        message = f"Malformed {label} string {text!r}: expected {expected_count} space-separated numbers"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidParameterError(SpeechRhythmError, ValueError):
    """A model constant or a structural count is non-numeric or out of its domain."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid parameter '{name}' = {value!r}: {reason}")
