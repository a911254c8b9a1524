"""
Model Parameters
================
The physical constants of the coupled-oscillator model and the
resetting-length policy. One instance is fixed for the duration of a run.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
import logging
import math
from typing import Any, Mapping

from speechrhythm import config
from speechrhythm.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class ResettingMethod(StrEnum):
    FIXED_LENGTH = "fixed"
    VARIABLE_LENGTH = "variable"

    @classmethod
    def parse(cls, value: str | ResettingMethod) -> ResettingMethod:
        """Accept either the enum value ("fixed") or the member name ("FIXED_LENGTH")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.lower() == member.value or text.upper() == member.name:
                return member
        raise InvalidParameterError("resetting_method", value, f"expected one of {[m.value for m in cls]}")


@dataclass(frozen=True)
class ModelParameters:
    """
    Constants of one simulation run.

    Attributes:
        alpha: Entrainment rate.
        beta: Decay rate.
        t0: Resting period of the syllable oscillator in seconds.
        w0: Coupling strength, between 0 and 1.
        resetting_method: Policy for the number of reset-eligible units per group.
    """
    alpha: float = config.DEFAULT_ALPHA
    beta: float = config.DEFAULT_BETA
    t0: float = config.DEFAULT_T0
    w0: float = config.DEFAULT_W0
    resetting_method: ResettingMethod = ResettingMethod.FIXED_LENGTH

    def validate(self) -> None:
        """
        Raise InvalidParameterError for non-numeric or out-of-domain constants.
        """
        for name in ("alpha", "beta", "t0", "w0"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameterError(name, value, "must be a real number")
            if not math.isfinite(value):
                raise InvalidParameterError(name, value, "must be finite")

        if self.alpha <= 0:
            raise InvalidParameterError("alpha", self.alpha, "must be greater than 0")
        if self.beta <= 0:
            raise InvalidParameterError("beta", self.beta, "must be greater than 0")
        if self.t0 <= 0:
            raise InvalidParameterError("t0", self.t0, "must be greater than 0")
        if not 0 <= self.w0 <= 1:
            raise InvalidParameterError("w0", self.w0, "must lie between 0 and 1")
        if not isinstance(self.resetting_method, ResettingMethod):
            raise InvalidParameterError("resetting_method", self.resetting_method, "unknown resetting method")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModelParameters:
        """
        Build parameters from a preset or CLI mapping. Missing keys fall back
        to the configured defaults; unrelated keys are ignored.
        """
        values: dict[str, Any] = {}
        for name in ("alpha", "beta", "t0", "w0"):
            if data.get(name) is None:
                continue
            try:
                values[name] = float(data[name])
            except (TypeError, ValueError) as e:
                raise InvalidParameterError(name, data[name], "must be a real number") from e

        method = data.get("resetting_method")
        if method is not None:
            values["resetting_method"] = ResettingMethod.parse(method)
        else:
            values["resetting_method"] = ResettingMethod.parse(config.DEFAULT_RESETTING_METHOD)

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["resetting_method"] = str(self.resetting_method)
        return data
