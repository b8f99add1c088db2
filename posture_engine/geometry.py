# Angle helpers shared by every measurement
#
# Points use image coordinates (origin top-left, y grows downward). The sign
# of the angles below follows screen coordinates and is never flipped, so
# left/right comparisons stay consistent across all measurements.
import math


def angle_between(point1, point2) -> float:
    """
    Signed angle of the vector point1 -> point2, in degrees

    Range is (-180, 180]. Identical points give 0.
    """
    delta_x = point2.x - point1.x
    delta_y = point2.y - point1.y
    return math.degrees(math.atan2(delta_y, delta_x))


def vertical_alignment(top_point, bottom_point) -> float:
    """
    Deviation from a perfectly vertical line (90° = vertical)

    0 means vertical. Goes negative when the line points more than 90° away
    from the x axis; that value is kept as-is since it feeds classification.
    """
    angle = angle_between(top_point, bottom_point)
    return 90 - abs(angle)


def horizontal_level(left_point, right_point) -> float:
    """Signed angle from horizontal; 0 means level"""
    return angle_between(left_point, right_point)


def knee_deviation_angle(hip, knee, ankle) -> float:
    """
    Deviation of the hip-knee-ankle line from straight, in degrees

    Returns 180 minus the interior angle at the knee. When a segment has zero
    length, or rounding pushes the cosine outside [-1, 1], the angle is
    undefined and NaN is returned.
    """
    v1x = hip.x - knee.x
    v1y = hip.y - knee.y
    v2x = ankle.x - knee.x
    v2y = ankle.y - knee.y

    dot = v1x * v2x + v1y * v2y
    mag1 = math.sqrt(v1x * v1x + v1y * v1y)
    mag2 = math.sqrt(v2x * v2x + v2y * v2y)

    if mag1 * mag2 == 0:
        return math.nan

    cosine = dot / (mag1 * mag2)
    if not -1 <= cosine <= 1:
        return math.nan

    return 180 - math.degrees(math.acos(cosine))
