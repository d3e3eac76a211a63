from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from models.base import Base

class Datasheet(Base):
    __tablename__ = 'datasheets'

    id = Column(Integer, primary_key=True, index=True)
    vendor = Column(String, nullable=False, index=True)
    part_number = Column(String, nullable=False, index=True)
    datasheet_url = Column(String, nullable=False)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
