"""
Pytest configuration for the postural measurement tests
"""
import os
import tempfile

import pytest

# Point the database at a throwaway SQLite file before posture_engine.config loads
_db_dir = tempfile.mkdtemp(prefix="posture_engine_tests_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_db_dir, "test.db")

from posture_engine.models import Point  # noqa: E402


def make_points(coords):
    """Build Points from {label: (x, y)}"""
    return [Point(x=x, y=y, label=label) for label, (x, y) in coords.items()]


@pytest.fixture
def full_front_points():
    """Every front-view landmark, marked on a slightly asymmetric body"""
    return make_points({
        "Topo da cabeça": (0.5, 0.05),
        "Queixo": (0.5, 0.15),
        "Orelha esquerda": (0.45, 0.1),
        "Orelha direita": (0.55, 0.1),
        "Ombro esquerdo": (0.4, 0.3),
        "Ombro direito": (0.6, 0.35),
        "C7 (base do pescoço)": (0.5, 0.2),
        "Centro da pelve": (0.5, 0.5),
        "Crista ilíaca esquerda": (0.42, 0.48),
        "Crista ilíaca direita": (0.58, 0.48),
        "Joelho esquerdo": (0.375, 0.75),
        "Joelho direito": (0.625, 0.75),
        "Tornozelo esquerdo": (0.25, 1.0),
        "Tornozelo direito": (0.75, 1.0),
        "Quadril esquerdo": (0.25, 0.5),
        "Quadril direito": (0.75, 0.5),
    })
