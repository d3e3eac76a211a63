from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from core.verdicts import Verdict

class DetectionBase(BaseModel):
    """One located marking as reported by the matching engine."""
    bbox_x1: float
    bbox_y1: float
    bbox_x2: float
    bbox_y2: float
    crop_url: str = ""
    ocr_text: str = ""
    ocr_confidence: float = Field(..., ge=0, le=1)
    match_score: float = Field(..., ge=0, le=1)
    datasheet_id: Optional[int] = None
    datasheet_excerpt: Optional[str] = None

class DetectionCreate(DetectionBase):
    inspection_id: int

class OverrideRequest(BaseModel):
    reviewer_name: str
    verdict: Verdict
    notes: str = ""

    @field_validator("reviewer_name")
    @classmethod
    def reviewer_name_not_blank(cls, value):
        value = value.strip()
        if not value:
            raise ValueError("reviewer name is required")
        return value

class Detection(DetectionBase):
    id: int
    inspection_id: int
    verdict: Verdict
    override_by: Optional[str] = None
    override_verdict: Optional[Verdict] = None
    override_notes: Optional[str] = None
    effective_verdict: Verdict
    is_overridden: bool
    created_at: datetime

    class Config:
        from_attributes = True
