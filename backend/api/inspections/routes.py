import logging
from typing import List, Optional
from core.database import get_db
from sqlalchemy.orm import Session
from models.detections import Detection as DetectionModel
from models.inspections import Inspection as InspectionModel
from api.auth.schemas import UserResponseSchema
from api.auth.security import get_current_user
from api.settings.store import get_thresholds
from api.detections.routes import new_detection
from api.detections.schemas import Detection
from fastapi import APIRouter, Depends, HTTPException, Query, status
from api.inspections.schemas import InspectionCreate, InspectionIntake, Inspection, InspectionDetail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inspections", tags=["Inspections"])


def _new_inspection(data: InspectionCreate) -> InspectionModel:
    fields = data.model_dump(exclude={"detections"}, exclude_none=True)
    return InspectionModel(**fields)


@router.post("/", response_model=Inspection, status_code=status.HTTP_201_CREATED)
def create_inspection(data: InspectionCreate, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    inspection = _new_inspection(data)
    db.add(inspection)
    db.commit()
    db.refresh(inspection)
    logger.info(f"Inspection {inspection.id} recorded from camera {inspection.camera_id}")
    return inspection


@router.post("/intake", response_model=InspectionDetail, status_code=status.HTTP_201_CREATED)
def intake_inspection(data: InspectionIntake, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    """
    Stores an inspection and its detections in one transaction.

    Every detection is classified with the thresholds in force right now. If
    anything fails nothing is stored, so no inspection is left without its
    detections.
    """
    thresholds = get_thresholds(db)

    inspection = _new_inspection(data)
    db.add(inspection)
    db.flush()

    for item in data.detections:
        db.add(new_detection(item, inspection.id, thresholds))

    db.commit()
    db.refresh(inspection)
    logger.info(
        f"Inspection {inspection.id} from camera {inspection.camera_id} stored with "
        f"{len(inspection.detections)} detection(s)"
    )
    return inspection


@router.get("/", response_model=List[Inspection])
def get_inspections(
    camera_id: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: UserResponseSchema = Depends(get_current_user),
):
    query = db.query(InspectionModel)
    if camera_id is not None:
        query = query.filter(InspectionModel.camera_id == camera_id)
    if status_filter is not None:
        query = query.filter(InspectionModel.status == status_filter)
    return query.order_by(InspectionModel.timestamp.desc(), InspectionModel.id.desc()).all()


@router.get("/{inspection_id}", response_model=InspectionDetail)
def get_inspection(inspection_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    inspection = db.query(InspectionModel).filter(InspectionModel.id == inspection_id).first()
    if not inspection:
        raise HTTPException(status_code=404, detail="Inspection not found")
    return inspection


@router.get("/{inspection_id}/detections", response_model=List[Detection])
def get_inspection_detections(inspection_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    inspection = db.query(InspectionModel).filter(InspectionModel.id == inspection_id).first()
    if not inspection:
        raise HTTPException(status_code=404, detail="Inspection not found")

    return (
        db.query(DetectionModel)
        .filter(DetectionModel.inspection_id == inspection_id)
        .order_by(DetectionModel.id)
        .all()
    )
