# Severity classification for postural measurements
from posture_engine.config import MEASUREMENT_THRESHOLDS, DEFAULT_THRESHOLD


def get_thresholds(measurement_type: str):
    """(moderate, severe) thresholds in degrees, default for unknown types"""
    return MEASUREMENT_THRESHOLDS.get(measurement_type, DEFAULT_THRESHOLD)


def classify_measurement(value: float, measurement_type: str) -> str:
    """
    Map an angle to acceptable / moderate / severe

    Only the magnitude matters. A value equal to a threshold falls in the
    stricter band. NaN compares false everywhere and ends up acceptable.
    """
    abs_value = abs(value)
    moderate, severe = get_thresholds(measurement_type)

    if abs_value >= severe:
        return "severe"
    elif abs_value >= moderate:
        return "moderate"
    return "acceptable"
