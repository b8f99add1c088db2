import math
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from posture_engine import config

MeasurementStatus = Literal["acceptable", "moderate", "severe"]
PhotoType = Literal["front", "back", "side_left", "side_right"]


class Point(BaseModel):
    """A landmark marked on a photo, relative to image width/height"""
    x: float = Field(ge=0, le=1)
    y: float = Field(ge=0, le=1)
    label: str


class MeasurementResult(BaseModel):
    measurement_type: str
    value: float
    status: MeasurementStatus
    photo_type: str
    left_value: Optional[float] = None  # Bilateral measurements only
    right_value: Optional[float] = None
    notes: Optional[str] = None

    @field_serializer("value", "left_value", "right_value")
    def serialize_nan(self, value: Optional[float], info):
        # Degenerate knee geometry yields NaN, which JSON cannot carry
        if value is not None and math.isnan(value) and info.mode_is_json():
            return None
        return value

    @field_validator("value", mode="before")
    @classmethod
    def null_value_is_nan(cls, value):
        # JSON carries an undefined angle as null
        return math.nan if value is None else value


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class PhotoPoints(BaseModel):
    photo_type: PhotoType
    points: List[Point] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_labels(self):
        allowed = config.LANDMARKS_BY_PHOTO_TYPE[self.photo_type]
        unknown = [p.label for p in self.points if p.label not in allowed]
        if unknown:
            raise ValueError(
                f"Landmarks not available for {self.photo_type} view: {', '.join(unknown)}"
            )
        return self


class CalculateAllRequest(BaseModel):
    photos: List[PhotoPoints]


class CalculationResponse(BaseModel):
    photo_type: str
    measurements: List[MeasurementResult]
    total: int
    missing_landmarks: List[str]


class CalculateAllResponse(BaseModel):
    measurements: List[MeasurementResult]
    total: int


class MeasurementInput(BaseModel):
    """Measurement sent for storage; status is recomputed on save"""
    measurement_type: str
    value: float
    photo_type: PhotoType
    left_value: Optional[float] = None
    right_value: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def null_value_is_nan(cls, value):
        return math.nan if value is None else value


class MeasurementBatchRequest(BaseModel):
    measurements: List[MeasurementInput]


class StoredMeasurement(MeasurementResult):
    id: int
    assessment_id: int
    created_at: Optional[str] = None


class MeasurementCard(BaseModel):
    measurement_type: str
    title: str
    status: str
    status_label: str
    status_color: str
    value_text: str
    asymmetry_text: Optional[str] = None
    photo_type_label: Optional[str] = None
    notes: Optional[str] = None


class AssessmentReport(BaseModel):
    assessment_id: int
    cards: List[MeasurementCard]
    total: int
    empty_message: Optional[str] = None


class BatchSaveResponse(BaseModel):
    success: bool
    message: str
    measurements: List[StoredMeasurement]


class DeleteResponse(BaseModel):
    success: bool
    message: str
    deleted: int
