# Main FastAPI Application - Postural Measurement Server
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, HTTPException

from posture_engine import config
from posture_engine import database
from posture_engine import logger
from posture_engine.display import describe_measurement, EMPTY_MESSAGE
from posture_engine.landmarks import LandmarkSet, available_labels
from posture_engine.measurement_engine import calculate_all_measurements, calculate_photo_measurements
from posture_engine.models import (
    PhotoPoints,
    CalculateAllRequest,
    CalculationResponse,
    CalculateAllResponse,
    MeasurementBatchRequest,
    StoredMeasurement,
    AssessmentReport,
    BatchSaveResponse,
    DeleteResponse,
)

# Initialize FastAPI
app = FastAPI(
    title=config.API_TITLE,
    description="Postural angle measurements from anatomical landmarks marked on photos",
    version=config.API_VERSION
)


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================

@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    logger.log_lifecycle("STARTUP", "Initializing Postural Measurement Server")

    db_ok = database.test_connection()
    init_ok = database.init_database()

    if db_ok and init_ok:
        logger.log_success("Server Ready", {
            "database": "Connected",
            "photo_types": ", ".join(config.PHOTO_TYPES)
        })
    else:
        logger.log_error("Startup Failed", Exception("Database initialization issue"))


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.log_lifecycle("SHUTDOWN", "Stopping Postural Measurement Server")
    database.engine.dispose()


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/health")
def health_check():
    """
    Health check endpoint

    Tests database connectivity
    """
    db_ok = database.test_connection()

    return {
        "status": "healthy" if db_ok else "degraded",
        "database": "connected" if db_ok else "disconnected",
        "version": config.API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# ============================================================================
# LANDMARK VOCABULARY
# ============================================================================

@app.get("/landmarks")
def list_landmarks():
    """Landmark labels for every photo view"""
    return {photo_type: available_labels(photo_type) for photo_type in config.PHOTO_TYPES}


@app.get("/landmarks/{photo_type}")
def get_landmarks(photo_type: str):
    """Landmark labels for one view, in marking order"""
    if photo_type not in config.LANDMARKS_BY_PHOTO_TYPE:
        raise HTTPException(status_code=404, detail=f"Unknown photo type: {photo_type}")

    return {"photo_type": photo_type, "labels": available_labels(photo_type)}


# ============================================================================
# MEASUREMENT CALCULATION
# ============================================================================

@app.post("/measurements/calculate", response_model=CalculationResponse)
def calculate_measurements(request: PhotoPoints):
    """
    Calculate every measurement available from one photo's landmarks

    Repeated labels keep only the last point sent.
    """
    logger.log_api("POST /measurements/calculate", {
        "photo_type": request.photo_type,
        "points": len(request.points)
    })

    landmark_set = LandmarkSet(request.photo_type, request.points)
    measurements = calculate_all_measurements(landmark_set.points, request.photo_type)

    logger.log_engine("Measurements Calculated", {
        "photo_type": request.photo_type,
        "count": len(measurements),
        "types": [m.measurement_type for m in measurements]
    })

    return CalculationResponse(
        photo_type=request.photo_type,
        measurements=measurements,
        total=len(measurements),
        missing_landmarks=landmark_set.missing_labels()
    )


@app.post("/measurements/calculate-all", response_model=CalculateAllResponse)
def calculate_assessment_measurements(request: CalculateAllRequest):
    """
    Calculate measurements for every photo of an assessment

    Photos without marked points are skipped.
    """
    logger.log_api("POST /measurements/calculate-all", {"photos": len(request.photos)})

    photos = [
        (photo.photo_type, LandmarkSet(photo.photo_type, photo.points).points)
        for photo in request.photos
    ]
    measurements = calculate_photo_measurements(photos)

    if not measurements:
        logger.log_warning("No Measurements Calculated", {
            "hint": "Mark anatomical landmarks on the photos to calculate measurements"
        })
    else:
        logger.log_engine("Measurements Calculated", {"count": len(measurements)})

    return CalculateAllResponse(measurements=measurements, total=len(measurements))


# ============================================================================
# MEASUREMENT STORAGE
# ============================================================================

@app.post("/posture-assessments/{assessment_id}/measurements/batch", response_model=BatchSaveResponse)
def save_measurements(assessment_id: int, request: MeasurementBatchRequest):
    """
    Store the measurements of a posture assessment

    Replaces whatever was stored for the assessment before.
    """
    logger.log_api(f"POST /posture-assessments/{assessment_id}/measurements/batch", {
        "count": len(request.measurements)
    })

    success, message, rows = database.save_measurements_batch(assessment_id, request.measurements)

    if not success:
        raise HTTPException(status_code=500, detail=message)

    return {
        "success": True,
        "message": message,
        "measurements": [StoredMeasurement(**row) for row in rows]
    }


@app.get("/posture-assessments/{assessment_id}/measurements", response_model=List[StoredMeasurement])
def get_measurements(assessment_id: int):
    """Stored measurements of a posture assessment"""
    logger.log_api(f"GET /posture-assessments/{assessment_id}/measurements", {})

    success, message, rows = database.get_measurements(assessment_id)

    if not success:
        raise HTTPException(status_code=500, detail=message)

    return [StoredMeasurement(**row) for row in rows]


@app.get("/posture-assessments/{assessment_id}/report", response_model=AssessmentReport)
def get_report(assessment_id: int):
    """Stored measurements rendered with display labels"""
    logger.log_api(f"GET /posture-assessments/{assessment_id}/report", {})

    success, message, rows = database.get_measurements(assessment_id)

    if not success:
        raise HTTPException(status_code=500, detail=message)

    cards = [describe_measurement(StoredMeasurement(**row)) for row in rows]

    return AssessmentReport(
        assessment_id=assessment_id,
        cards=cards,
        total=len(cards),
        empty_message=None if cards else EMPTY_MESSAGE
    )


@app.delete("/posture-assessments/{assessment_id}/measurements", response_model=DeleteResponse)
def delete_measurements(assessment_id: int):
    """Remove all stored measurements of a posture assessment"""
    logger.log_api(f"DELETE /posture-assessments/{assessment_id}/measurements", {})

    success, message, deleted = database.delete_measurements(assessment_id)

    if not success:
        raise HTTPException(status_code=500, detail=message)

    return {"success": True, "message": message, "deleted": deleted}
