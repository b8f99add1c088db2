# Database Module - SQLAlchemy Core (Procedural, No ORM Classes)
import math
from typing import Dict, List, Optional, Tuple

from sqlalchemy import create_engine, MetaData, Table, Column, Integer, String, Float, DateTime, Text, select, insert, delete, text
from sqlalchemy.sql import func

from posture_engine import config
from posture_engine import logger
from posture_engine.scoring import classify_measurement

# Create engine - Convert postgresql:// to postgresql+psycopg:// for psycopg3
database_url = config.DATABASE_URL
if database_url.startswith("postgresql://"):
    database_url = database_url.replace("postgresql://", "postgresql+psycopg://", 1)

connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
engine = create_engine(database_url, echo=False, pool_pre_ping=True, connect_args=connect_args)
metadata = MetaData()

# Table Definitions

# Posture Measurements Table (one row per measurement of an assessment)
posture_measurements_table = Table(
    'posture_measurements',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('assessment_id', Integer, nullable=False, index=True),
    Column('measurement_type', String(50), nullable=False),  # e.g., shoulders_horizontal_level
    Column('value', Float, nullable=True),  # NULL when the angle was undefined (NaN)
    Column('status', String(20), nullable=False),  # acceptable, moderate, severe
    Column('photo_type', String(20), nullable=False),  # front, back, side_left, side_right
    Column('left_value', Float, nullable=True),
    Column('right_value', Float, nullable=True),
    Column('notes', Text, nullable=True),
    Column('created_at', DateTime, server_default=func.now()),
)


# Database Initialization Functions

def init_database():
    """Create all tables if they don't exist"""
    try:
        metadata.create_all(engine)
        logger.log_db("Tables Ready", {"tables": list(metadata.tables.keys())})
        return True
    except Exception as e:
        logger.log_error("Database Initialization Failed", e)
        return False


def test_connection():
    """Test database connectivity"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.log_error("Database Connection Failed", e)
        return False


def drop_all_tables():
    """Drop all tables managed by this metadata (use with caution!)"""
    try:
        metadata.drop_all(engine, checkfirst=True)
        logger.log_warning("All Managed Tables Dropped", {})
        return True
    except Exception as e:
        logger.log_error("Drop Tables Failed", e)
        return False


def get_connection():
    """Get a database connection"""
    return engine.connect()


# Measurement Storage

def _nan_to_none(value: Optional[float]) -> Optional[float]:
    if value is not None and math.isnan(value):
        return None
    return value


def _row_to_dict(row) -> Dict:
    data = dict(row._mapping)
    if data["created_at"] is not None:
        data["created_at"] = data["created_at"].isoformat()
    return data


def save_measurements_batch(assessment_id: int, measurements: List) -> Tuple[bool, str, List[Dict]]:
    """
    Replace the stored measurements of an assessment

    Status is recomputed from value and type, never taken from the caller.

    Args:
        assessment_id: Posture assessment the measurements belong to
        measurements: Objects with the MeasurementInput attributes

    Returns:
        Tuple of (success: bool, message: str, rows: List[Dict])
    """
    rows = [
        {
            "assessment_id": assessment_id,
            "measurement_type": m.measurement_type,
            "value": _nan_to_none(m.value),
            "status": classify_measurement(m.value, m.measurement_type),
            "photo_type": m.photo_type,
            "left_value": _nan_to_none(m.left_value),
            "right_value": _nan_to_none(m.right_value),
            "notes": m.notes,
        }
        for m in measurements
    ]

    try:
        with get_connection() as conn:
            conn.execute(
                delete(posture_measurements_table).where(
                    posture_measurements_table.c.assessment_id == assessment_id
                )
            )
            if rows:
                conn.execute(insert(posture_measurements_table), rows)
            conn.commit()

            saved = conn.execute(
                select(posture_measurements_table)
                .where(posture_measurements_table.c.assessment_id == assessment_id)
                .order_by(posture_measurements_table.c.id)
            ).fetchall()

        logger.log_db("Measurements Saved", {
            "assessment_id": assessment_id,
            "count": len(saved)
        })

        return True, f"{len(saved)} measurements saved", [_row_to_dict(row) for row in saved]

    except Exception as e:
        logger.log_error("Measurement Save Failed", e, {"assessment_id": assessment_id})
        return False, f"Save error: {str(e)}", []


def get_measurements(assessment_id: int) -> Tuple[bool, str, List[Dict]]:
    """
    Stored measurements of an assessment, in insertion order

    Returns:
        Tuple of (success: bool, message: str, rows: List[Dict])
    """
    query = select(posture_measurements_table).where(
        posture_measurements_table.c.assessment_id == assessment_id
    ).order_by(posture_measurements_table.c.id)

    try:
        with get_connection() as conn:
            rows = conn.execute(query).fetchall()

        return True, "OK", [_row_to_dict(row) for row in rows]

    except Exception as e:
        logger.log_error("Measurement Fetch Failed", e, {"assessment_id": assessment_id})
        return False, f"Fetch error: {str(e)}", []


def delete_measurements(assessment_id: int) -> Tuple[bool, str, int]:
    """
    Delete every stored measurement of an assessment

    Returns:
        Tuple of (success: bool, message: str, deleted: int)
    """
    try:
        with get_connection() as conn:
            result = conn.execute(
                delete(posture_measurements_table).where(
                    posture_measurements_table.c.assessment_id == assessment_id
                )
            )
            conn.commit()

        logger.log_db("Measurements Deleted", {
            "assessment_id": assessment_id,
            "count": result.rowcount
        })

        return True, f"{result.rowcount} measurements deleted", result.rowcount

    except Exception as e:
        logger.log_error("Measurement Delete Failed", e, {"assessment_id": assessment_id})
        return False, f"Delete error: {str(e)}", 0
