"""
Barbosa's coupled-oscillator model of speech rhythm.

Predicts vowel-to-vowel (V-to-V) durations for one utterance from its
stress-group structure and four model constants.
"""
from speechrhythm.errors import InvalidParameterError, MalformedInputError, SpeechRhythmError
from speechrhythm.model.parameters import ModelParameters, ResettingMethod
from speechrhythm.model.parser import parse_stress_groups
from speechrhythm.model.utterance import StressGroup, Utterance
from speechrhythm.solvers.solver import SimulationResult, Simulator, simulate

__all__ = [
    "InvalidParameterError",
    "MalformedInputError",
    "SpeechRhythmError",
    "ModelParameters",
    "ResettingMethod",
    "parse_stress_groups",
    "StressGroup",
    "Utterance",
    "SimulationResult",
    "Simulator",
    "simulate",
]
