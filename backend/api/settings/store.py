"""
Reads and writes the two singleton rows of ``system_settings``.

Stored payloads are validated against the schema of their key on the way in
and on the way out; a missing row falls back to the configured defaults.
"""
import logging
from datetime import datetime
from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from config import settings
from models.system_settings import SystemSetting
from api.settings.schemas import (
    CAMERA_CONFIG_KEY,
    THRESHOLDS_KEY,
    CameraConfig,
    Thresholds,
    system_setting_adapter,
)

logger = logging.getLogger(__name__)

DEFAULTS = {
    THRESHOLDS_KEY: lambda: {
        "genuine": settings.DEFAULT_GENUINE_THRESHOLD,
        "suspicious": settings.DEFAULT_SUSPICIOUS_THRESHOLD,
    },
    CAMERA_CONFIG_KEY: lambda: {"cameras": list(settings.DEFAULT_CAMERAS)},
}


def _read(db: Session, key: str):
    row = db.query(SystemSetting).filter(SystemSetting.setting_key == key).first()
    value = row.setting_value if row is not None else DEFAULTS[key]()
    try:
        return system_setting_adapter.validate_python({"setting_key": key, "setting_value": value}).setting_value
    except ValidationError as e:
        logger.error(f"Stored setting {key} is invalid: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="The operation failed")


def _write(db: Session, key: str, value):
    payload = value.model_dump()
    # round-trip through the tagged schema so only valid shapes reach the table
    system_setting_adapter.validate_python({"setting_key": key, "setting_value": payload})

    row = db.query(SystemSetting).filter(SystemSetting.setting_key == key).first()
    if row is None:
        row = SystemSetting(setting_key=key, setting_value=payload)
        db.add(row)
    else:
        row.setting_value = payload
        row.updated_at = datetime.utcnow()
    db.commit()
    logger.info(f"Setting {key} updated: {payload}")
    return value


def get_thresholds(db: Session) -> Thresholds:
    return _read(db, THRESHOLDS_KEY)


def save_thresholds(db: Session, thresholds: Thresholds) -> Thresholds:
    return _write(db, THRESHOLDS_KEY, thresholds)


def get_camera_config(db: Session) -> CameraConfig:
    return _read(db, CAMERA_CONFIG_KEY)


def save_camera_config(db: Session, camera_config: CameraConfig) -> CameraConfig:
    return _write(db, CAMERA_CONFIG_KEY, camera_config)


def seed_defaults(db: Session):
    """Stores the default value of every setting that has no row yet."""
    for key, default in DEFAULTS.items():
        exists = db.query(SystemSetting).filter(SystemSetting.setting_key == key).first()
        if exists is None:
            db.add(SystemSetting(setting_key=key, setting_value=default()))
            logger.info(f"Seeded default setting {key}")
    db.commit()
