import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import or_
from core.database import get_db
from sqlalchemy.orm import Session
from api.auth.schemas import UserResponseSchema
from models.datasheets import Datasheet as DatasheetModel
from api.auth.security import is_admin, get_current_user
from fastapi import APIRouter, Depends, HTTPException, Query, status
from api.datasheets.schemas import DatasheetCreate, DatasheetUpdate, Datasheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/datasheets", tags=["Datasheets"])


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@router.post("/", response_model=Datasheet, status_code=status.HTTP_201_CREATED)
def create_datasheet(datasheet: DatasheetCreate, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    db_datasheet = DatasheetModel(**datasheet.model_dump())
    db.add(db_datasheet)
    db.commit()
    db.refresh(db_datasheet)
    logger.info(f"Datasheet {db_datasheet.id} ({db_datasheet.vendor} {db_datasheet.part_number}) created by {current_user.username}")
    return db_datasheet


# List datasheets, optionally matching vendor or part number
@router.get("/", response_model=List[Datasheet])
def get_datasheets(
    q: Optional[str] = Query(None, description="Case-insensitive substring of the vendor or part number"),
    db: Session = Depends(get_db),
    current_user: UserResponseSchema = Depends(get_current_user),
):
    query = db.query(DatasheetModel)
    if q is not None and q.strip():
        pattern = f"%{_escape_like(q.strip())}%"
        query = query.filter(or_(
            DatasheetModel.vendor.ilike(pattern, escape="\\"),
            DatasheetModel.part_number.ilike(pattern, escape="\\"),
        ))
    return query.order_by(DatasheetModel.created_at.desc(), DatasheetModel.id.desc()).all()


@router.get("/{datasheet_id}", response_model=Datasheet)
def get_datasheet(datasheet_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    datasheet = db.query(DatasheetModel).filter(DatasheetModel.id == datasheet_id).first()
    if not datasheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Datasheet not found")
    return datasheet


@router.put("/{datasheet_id}", response_model=Datasheet)
def update_datasheet(datasheet_id: int, datasheet: DatasheetUpdate, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    db_datasheet = db.query(DatasheetModel).filter(DatasheetModel.id == datasheet_id).first()
    if not db_datasheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Datasheet not found")

    for key, value in datasheet.model_dump(exclude_unset=True).items():
        setattr(db_datasheet, key, value)
    db_datasheet.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(db_datasheet)
    return db_datasheet


@router.delete("/{datasheet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_datasheet(datasheet_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    db_datasheet = db.query(DatasheetModel).filter(DatasheetModel.id == datasheet_id).first()
    if not db_datasheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Datasheet not found")

    # detections keep their datasheet_id, the link is advisory
    db.delete(db_datasheet)
    db.commit()
    logger.info(f"Datasheet {datasheet_id} deleted by {current_user.username}")
    return None
