from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from api.detections.schemas import Detection, DetectionBase

class InspectionBase(BaseModel):
    camera_id: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    status: str = "completed"

class InspectionCreate(InspectionBase):
    timestamp: Optional[datetime] = None  # defaults to the time of the request

    # stored as naive UTC, like the server-side defaults
    @field_validator("timestamp")
    @classmethod
    def to_naive_utc(cls, value):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

class InspectionIntake(InspectionCreate):
    """An inspection together with every detection found in its image."""
    detections: List[DetectionBase] = []

class Inspection(InspectionBase):
    id: int
    timestamp: datetime
    created_at: datetime

    class Config:
        from_attributes = True

class InspectionDetail(Inspection):
    detections: List[Detection] = []
