"""
Tests for measurement labels and formatting
"""
import math

from posture_engine.display import (
    MEASUREMENT_TYPE_LABELS,
    describe_measurement,
    format_degrees,
    measurement_title,
)
from posture_engine.measurement_engine import MEASUREMENT_TYPES
from posture_engine.models import MeasurementResult


class TestFormatDegrees:

    def test_one_decimal(self):
        assert format_degrees(14.036243) == "14.0°"
        assert format_degrees(-2.26) == "-2.3°"
        assert format_degrees(0) == "0.0°"

    def test_nan(self):
        assert format_degrees(math.nan) == "NaN°"


class TestDescribeMeasurement:

    def test_every_type_has_a_title(self):
        assert set(MEASUREMENT_TYPES) == set(MEASUREMENT_TYPE_LABELS)

    def test_unknown_type_shows_identifier(self):
        assert measurement_title("ankle_rotation") == "ankle_rotation"

    def test_single_value_card(self):
        result = MeasurementResult(
            measurement_type="shoulders_horizontal_level",
            value=14.036,
            status="severe",
            photo_type="back",
        )

        card = describe_measurement(result)

        assert card["title"] == "Nivelamento horizontal dos ombros"
        assert card["status_label"] == "Elevado"
        assert card["status_color"] == "red"
        assert card["value_text"] == "14.0°"
        assert card["asymmetry_text"] is None
        assert card["photo_type_label"] == "Posterior"

    def test_bilateral_card(self):
        result = MeasurementResult(
            measurement_type="knees_valgus_varus_symmetry",
            value=-4.25,
            status="moderate",
            photo_type="front",
            left_value=10.5,
            right_value=14.75,
        )

        card = describe_measurement(result)

        assert card["status_label"] == "Moderado"
        assert card["status_color"] == "yellow"
        assert card["asymmetry_text"] == "(E: 10.5° / D: 14.8°)"
        assert card["photo_type_label"] == "Frontal"
