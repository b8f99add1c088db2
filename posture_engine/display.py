# Labels and formatting for presenting measurements to trainers
import math
from typing import Optional

MEASUREMENT_TYPE_LABELS = {
    "head_vertical_alignment": "Alinhamento vertical da cabeça",
    "head_horizontal_level": "Nivelamento horizontal da cabeça",
    "shoulders_horizontal_level": "Nivelamento horizontal dos ombros",
    "trunk_vertical_alignment": "Alinhamento vertical do tronco",
    "pelvis_horizontal_level": "Nivelamento horizontal da pelve",
    "femur_horizontal_level": "Nivelamento horizontal do fêmur",
    "tibia_horizontal_level": "Nivelamento horizontal da tíbia",
    "knees_valgus_varus_symmetry": "Simetria do alinhamento valgo/varo dos joelhos",
}

STATUS_LABELS = {
    "acceptable": "Aceitável",
    "moderate": "Moderado",
    "severe": "Elevado",
}

STATUS_COLORS = {
    "acceptable": "green",
    "moderate": "yellow",
    "severe": "red",
}

PHOTO_TYPE_LABELS = {
    "front": "Frontal",
    "back": "Posterior",
    "side_left": "Lateral Esquerda",
    "side_right": "Lateral Direita",
}

EMPTY_MESSAGE = "Nenhuma medição registrada ainda"


def format_degrees(value: Optional[float]) -> str:
    """One decimal place plus the degree sign, e.g. 14.0°"""
    if value is None or math.isnan(value):
        return "NaN°"
    return f"{value:.1f}°"


def measurement_title(measurement_type: str) -> str:
    return MEASUREMENT_TYPE_LABELS.get(measurement_type, measurement_type)


def describe_measurement(measurement) -> dict:
    """
    Fields of a measurement card

    `measurement` is any object with the MeasurementResult attributes.
    """
    card = {
        "measurement_type": measurement.measurement_type,
        "title": measurement_title(measurement.measurement_type),
        "status": measurement.status,
        "status_label": STATUS_LABELS.get(measurement.status, measurement.status),
        "status_color": STATUS_COLORS.get(measurement.status, "gray"),
        "value_text": format_degrees(measurement.value),
        "asymmetry_text": None,
        "photo_type_label": None,
        "notes": measurement.notes,
    }

    if measurement.left_value is not None and measurement.right_value is not None:
        card["asymmetry_text"] = (
            f"(E: {format_degrees(measurement.left_value)} / D: {format_degrees(measurement.right_value)})"
        )

    if measurement.photo_type:
        card["photo_type_label"] = PHOTO_TYPE_LABELS.get(measurement.photo_type, measurement.photo_type)

    return card
