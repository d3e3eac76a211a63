from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON
from models.base import Base

class SystemSetting(Base):
    __tablename__ = 'system_settings'

    id = Column(Integer, primary_key=True, index=True)
    setting_key = Column(String, unique=True, index=True, nullable=False)
    setting_value = Column(JSON, nullable=False)  # shape depends on setting_key, see api.settings.schemas
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
