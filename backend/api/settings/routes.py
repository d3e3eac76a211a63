import logging
from core.database import get_db
from sqlalchemy.orm import Session
from api.auth.schemas import UserResponseSchema
from api.auth.security import is_admin, get_current_user
from fastapi import APIRouter, Depends, HTTPException, status
from core.roster import DuplicateCameraError, add_camera, remove_camera
from api.settings.schemas import CameraAdd, CameraConfig, SettingsResponse, Thresholds
from api.settings import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/", response_model=SettingsResponse)
def get_settings(db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    return SettingsResponse(thresholds=store.get_thresholds(db), camera_config=store.get_camera_config(db))


@router.get("/thresholds", response_model=Thresholds)
def get_thresholds(db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    return store.get_thresholds(db)


@router.put("/thresholds", response_model=Thresholds)
def update_thresholds(thresholds: Thresholds, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    """Stores new thresholds. Detections already classified keep their verdict."""
    return store.save_thresholds(db, thresholds)


@router.get("/camera_config", response_model=CameraConfig)
def get_camera_config(db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    return store.get_camera_config(db)


@router.put("/camera_config", response_model=CameraConfig)
def update_camera_config(camera_config: CameraConfig, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    return store.save_camera_config(db, camera_config)


@router.post("/camera_config/cameras", response_model=CameraConfig)
def add_camera_to_roster(data: CameraAdd, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    current = store.get_camera_config(db)
    try:
        cameras = add_camera(current.cameras, data.camera)
    except DuplicateCameraError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return store.save_camera_config(db, CameraConfig(cameras=cameras))


@router.delete("/camera_config/cameras/{camera}", response_model=CameraConfig)
def remove_camera_from_roster(camera: str, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    camera = camera.strip()
    current = store.get_camera_config(db)
    cameras = remove_camera(current.cameras, camera)
    if cameras == current.cameras:
        logger.info(f"Camera {camera} is not on the roster, nothing to remove")
        return current

    return store.save_camera_config(db, CameraConfig(cameras=cameras))
