import logging
from typing import List, Optional
from core.database import get_db
from sqlalchemy.orm import Session
from models.detections import Detection as DetectionModel
from models.inspections import Inspection
from api.auth.schemas import UserResponseSchema
from api.auth.security import is_reviewer, get_current_user
from api.settings.store import get_thresholds
from core.verdicts import Verdict, apply_override, classify
from fastapi import APIRouter, Depends, HTTPException, status
from api.detections.schemas import DetectionBase, DetectionCreate, Detection, OverrideRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/detections", tags=["Detections"])


def new_detection(data: DetectionBase, inspection_id: int, thresholds) -> DetectionModel:
    """Builds an unsaved detection whose verdict is classified from the given thresholds."""
    verdict = classify(data.match_score, thresholds.genuine, thresholds.suspicious)
    fields = data.model_dump(exclude={"inspection_id"})
    return DetectionModel(inspection_id=inspection_id, verdict=verdict, **fields)


@router.post("/", response_model=Detection, status_code=status.HTTP_201_CREATED)
def create_detection(data: DetectionCreate, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    # Check if inspection exists
    inspection = db.query(Inspection).filter(Inspection.id == data.inspection_id).first()
    if not inspection:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inspection not found")

    detection = new_detection(data, inspection.id, get_thresholds(db))
    db.add(detection)
    db.commit()
    db.refresh(detection)
    logger.info(f"Detection {detection.id} on inspection {inspection.id}: score {detection.match_score:.3f} -> {detection.verdict.value}")
    return detection


@router.get("/", response_model=List[Detection])
def get_detections(
    inspection_id: Optional[int] = None,
    verdict: Optional[Verdict] = None,
    overridden: Optional[bool] = None,
    db: Session = Depends(get_db),
    current_user: UserResponseSchema = Depends(get_current_user),
):
    query = db.query(DetectionModel)
    if inspection_id is not None:
        query = query.filter(DetectionModel.inspection_id == inspection_id)
    if verdict is not None:
        query = query.filter(DetectionModel.verdict == verdict)
    if overridden is True:
        query = query.filter(DetectionModel.override_verdict.isnot(None))
    elif overridden is False:
        query = query.filter(DetectionModel.override_verdict.is_(None))
    return query.order_by(DetectionModel.created_at.desc(), DetectionModel.id.desc()).all()


# Suspicious detections waiting on a reviewer, newest first
@router.get("/review-queue", response_model=List[Detection])
def get_review_queue(db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    return (
        db.query(DetectionModel)
        .filter(DetectionModel.verdict == Verdict.Suspicious)
        .order_by(DetectionModel.created_at.desc(), DetectionModel.id.desc())
        .all()
    )


@router.get("/{detection_id}", response_model=Detection)
def get_detection(detection_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    detection = db.query(DetectionModel).filter(DetectionModel.id == detection_id).first()
    if not detection:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Detection not found")
    return detection


@router.put("/{detection_id}/override", response_model=Detection)
def override_detection(
    detection_id: int,
    data: OverrideRequest,
    db: Session = Depends(get_db),
    current_user: UserResponseSchema = Depends(is_reviewer),
):
    """
    Records a reviewer's verdict next to the computed one.

    A second override replaces the first entirely; earlier overrides are not kept.
    """
    detection = db.query(DetectionModel).filter(DetectionModel.id == detection_id).first()
    if not detection:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Detection not found")

    if detection.override_verdict is not None:
        logger.info(
            f"Detection {detection_id}: replacing override {detection.override_verdict.value} "
            f"by {detection.override_by} with {data.verdict.value} by {data.reviewer_name}"
        )

    apply_override(detection, data.reviewer_name, data.verdict, data.notes)
    db.commit()
    db.refresh(detection)
    logger.info(f"Detection {detection_id} overridden to {data.verdict.value} (computed {detection.verdict.value}) by {data.reviewer_name}")
    return detection
