# Measurement Engine - postural angles from marked landmarks (Procedural)
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from posture_engine import logger
from posture_engine.geometry import vertical_alignment, horizontal_level, knee_deviation_angle
from posture_engine.landmarks import find_point
from posture_engine.models import MeasurementResult, Point
from posture_engine.scoring import classify_measurement


def _build_result(measurement_type: str, value: float, photo_type: str, **extra) -> MeasurementResult:
    return MeasurementResult(
        measurement_type=measurement_type,
        value=value,
        status=classify_measurement(value, measurement_type),
        photo_type=photo_type,
        **extra
    )


def _two_point_measurement(points: Sequence[Point], photo_type: str, measurement_type: str,
                           first_label: str, second_label: str,
                           primitive: Callable) -> Optional[MeasurementResult]:
    """
    Shared shape of the single-pair measurements

    Returns None when either landmark is missing; that is expected for views
    that do not carry every landmark.
    """
    first = find_point(points, first_label)
    second = find_point(points, second_label)

    if first is None or second is None:
        logger.log_debug("Measurement Skipped", {
            "measurement_type": measurement_type,
            "photo_type": photo_type,
            "missing": [label for label, p in ((first_label, first), (second_label, second)) if p is None]
        })
        return None

    return _build_result(measurement_type, primitive(first, second), photo_type)


def calculate_head_vertical_alignment(points, photo_type):
    return _two_point_measurement(points, photo_type, "head_vertical_alignment",
                                  "Topo da cabeça", "Queixo", vertical_alignment)


def calculate_head_horizontal_level(points, photo_type):
    return _two_point_measurement(points, photo_type, "head_horizontal_level",
                                  "Orelha esquerda", "Orelha direita", horizontal_level)


def calculate_shoulders_horizontal_level(points, photo_type):
    return _two_point_measurement(points, photo_type, "shoulders_horizontal_level",
                                  "Ombro esquerdo", "Ombro direito", horizontal_level)


def calculate_trunk_vertical_alignment(points, photo_type):
    return _two_point_measurement(points, photo_type, "trunk_vertical_alignment",
                                  "C7 (base do pescoço)", "Centro da pelve", vertical_alignment)


def calculate_pelvis_horizontal_level(points, photo_type):
    return _two_point_measurement(points, photo_type, "pelvis_horizontal_level",
                                  "Crista ilíaca esquerda", "Crista ilíaca direita", horizontal_level)


def calculate_femur_horizontal_level(points, photo_type):
    return _two_point_measurement(points, photo_type, "femur_horizontal_level",
                                  "Joelho esquerdo", "Joelho direito", horizontal_level)


def calculate_tibia_horizontal_level(points, photo_type):
    return _two_point_measurement(points, photo_type, "tibia_horizontal_level",
                                  "Tornozelo esquerdo", "Tornozelo direito", horizontal_level)


def calculate_knees_valgus_varus_symmetry(points, photo_type):
    """
    Left-minus-right difference of the knee deviation angles

    Needs hip, knee and ankle on both sides. The per-side angles are returned
    as left_value / right_value.
    """
    labels = {
        "left_hip": "Quadril esquerdo",
        "left_knee": "Joelho esquerdo",
        "left_ankle": "Tornozelo esquerdo",
        "right_hip": "Quadril direito",
        "right_knee": "Joelho direito",
        "right_ankle": "Tornozelo direito",
    }
    found = {key: find_point(points, label) for key, label in labels.items()}

    missing = [labels[key] for key, point in found.items() if point is None]
    if missing:
        logger.log_debug("Measurement Skipped", {
            "measurement_type": "knees_valgus_varus_symmetry",
            "photo_type": photo_type,
            "missing": missing
        })
        return None

    left_angle = knee_deviation_angle(found["left_hip"], found["left_knee"], found["left_ankle"])
    right_angle = knee_deviation_angle(found["right_hip"], found["right_knee"], found["right_ankle"])

    return _build_result(
        "knees_valgus_varus_symmetry",
        left_angle - right_angle,
        photo_type,
        left_value=left_angle,
        right_value=right_angle
    )


# Battery order is also the output order of calculate_all_measurements
CALCULATORS: List[Tuple[str, Callable]] = [
    ("head_vertical_alignment", calculate_head_vertical_alignment),
    ("head_horizontal_level", calculate_head_horizontal_level),
    ("shoulders_horizontal_level", calculate_shoulders_horizontal_level),
    ("trunk_vertical_alignment", calculate_trunk_vertical_alignment),
    ("pelvis_horizontal_level", calculate_pelvis_horizontal_level),
    ("femur_horizontal_level", calculate_femur_horizontal_level),
    ("tibia_horizontal_level", calculate_tibia_horizontal_level),
    ("knees_valgus_varus_symmetry", calculate_knees_valgus_varus_symmetry),
]

MEASUREMENT_TYPES = [measurement_type for measurement_type, _ in CALCULATORS]


def calculate_all_measurements(points: Sequence[Point], photo_type: str) -> List[MeasurementResult]:
    """
    Run every calculator over one photo's points

    Results come back in battery order; measurements whose landmarks are not
    all marked are left out. Never returns None.
    """
    measurements = []

    for _, calculator in CALCULATORS:
        result = calculator(points, photo_type)
        if result is not None:
            measurements.append(result)

    logger.log_debug("Measurements Calculated", {
        "photo_type": photo_type,
        "points": len(points),
        "measurements": len(measurements)
    })

    return measurements


def calculate_photo_measurements(photos: Iterable[Tuple[str, Sequence[Point]]]) -> List[MeasurementResult]:
    """
    Measurements for several photos of one assessment, in photo order

    Photos without any marked point are skipped.
    """
    measurements = []

    for photo_type, points in photos:
        if not points:
            continue
        measurements.extend(calculate_all_measurements(points, photo_type))

    return measurements
