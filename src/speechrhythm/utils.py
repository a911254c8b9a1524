import math

ROUNDING_DIGITS = 4

def round_to(value: float, digits: int = ROUNDING_DIGITS) -> float:
    """Round to a fixed number of decimals, as the value would be displayed."""
    return round(float(value), digits)

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)

def seconds_to_ms(seconds: float) -> float:
    """Convert seconds to milliseconds."""
    return seconds * 1000.0
