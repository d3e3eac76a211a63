from datetime import datetime
from sqlalchemy import Column, Integer, Float, String, Text, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from core.verdicts import Verdict, effective_verdict
from models.base import Base

class Detection(Base):
    __tablename__ = 'detections'

    id = Column(Integer, primary_key=True, index=True)
    inspection_id = Column(Integer, ForeignKey("inspections.id"), nullable=False, index=True)

    bbox_x1 = Column(Float, nullable=False)
    bbox_y1 = Column(Float, nullable=False)
    bbox_x2 = Column(Float, nullable=False)
    bbox_y2 = Column(Float, nullable=False)
    crop_url = Column(String, nullable=False, default="")

    # produced by the external OCR / matching engine
    ocr_text = Column(String, nullable=False, default="")
    ocr_confidence = Column(Float, nullable=False)
    match_score = Column(Float, nullable=False)

    verdict = Column(Enum(Verdict), nullable=False, index=True)

    # advisory link, never checked against the datasheets table
    datasheet_id = Column(Integer, nullable=True)
    datasheet_excerpt = Column(Text, nullable=True)

    override_by = Column(String, nullable=True)
    override_verdict = Column(Enum(Verdict), nullable=True)
    override_notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    inspection = relationship("Inspection", back_populates="detections")

    @property
    def effective_verdict(self):
        return effective_verdict(self.verdict, self.override_verdict)

    @property
    def is_overridden(self):
        return self.override_verdict is not None
