from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from models.base import Base

class Inspection(Base):
    __tablename__ = 'inspections'

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    camera_id = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=False)
    status = Column(String, nullable=False, default="completed")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    detections = relationship("Detection", back_populates="inspection", cascade="all, delete-orphan", order_by="Detection.id")
