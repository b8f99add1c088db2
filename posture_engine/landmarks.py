"""
Landmark store for a single photo

Keeps at most one point per label. Marking a label again moves the existing
point instead of adding a second one, keeping its original position in the
list.
"""

from typing import Iterable, List, Optional

from posture_engine.config import LANDMARKS_BY_PHOTO_TYPE
from posture_engine.models import Point


def available_labels(photo_type: str) -> List[str]:
    """Landmarks that can be marked on a view, in marking order"""
    return list(LANDMARKS_BY_PHOTO_TYPE.get(photo_type, []))


def find_point(points: Iterable[Point], label: str) -> Optional[Point]:
    """First point with exactly this label, or None"""
    for point in points:
        if point.label == label:
            return point
    return None


class LandmarkSet:
    """Points marked on one photo of one view"""

    def __init__(self, photo_type: str, points: Optional[Iterable[Point]] = None):
        self.photo_type = photo_type
        self._points: List[Point] = []
        for point in points or []:
            self.upsert(point)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __contains__(self, label: str) -> bool:
        return self.get(label) is not None

    @property
    def points(self) -> List[Point]:
        """Copy of the marked points"""
        return list(self._points)

    @property
    def labels(self) -> List[str]:
        return [p.label for p in self._points]

    def get(self, label: str) -> Optional[Point]:
        return find_point(self._points, label)

    def upsert(self, point: Point) -> None:
        """Add a point, or replace the one already carrying its label"""
        for index, existing in enumerate(self._points):
            if existing.label == point.label:
                self._points[index] = point
                return
        self._points.append(point)

    def mark(self, label: str, x: float, y: float) -> Point:
        point = Point(x=x, y=y, label=label)
        self.upsert(point)
        return point

    def remove(self, label: str) -> bool:
        """Remove the point with this label; False if it was not marked"""
        remaining = [p for p in self._points if p.label != label]
        removed = len(remaining) != len(self._points)
        self._points = remaining
        return removed

    def clear(self) -> None:
        self._points = []

    def missing_labels(self) -> List[str]:
        """View landmarks that have not been marked yet"""
        return [label for label in available_labels(self.photo_type) if label not in self]

    def next_label(self, current: str) -> Optional[str]:
        """
        Label that follows `current` in the view's marking order

        Returns None once the last label of the view is reached.
        """
        labels = available_labels(self.photo_type)
        if current not in labels:
            return labels[0] if labels else None
        index = labels.index(current)
        if index < len(labels) - 1:
            return labels[index + 1]
        return None
