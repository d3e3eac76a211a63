import logging
from typing import List
from core.database import get_db
from sqlalchemy.orm import Session
from models.users import Users as UserModel
from api.auth.schemas import UserResponseSchema
from api.auth.security import is_admin, get_current_user, hash_password
from fastapi import APIRouter, Depends, HTTPException, status
from api.users.schemas import UserUpdate, UserBase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/", response_model=List[UserBase])
def get_users(db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    return db.query(UserModel).order_by(UserModel.id).all()


@router.get("/{user_id}", response_model=UserBase)
def get_user(user_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(get_current_user)):
    if not current_user.is_admin and current_user.id != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied to this user")

    user = db.query(UserModel).filter(UserModel.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/{user_id}", response_model=UserBase)
def update_user(user_id: int, user: UserUpdate, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    db_user = db.get(UserModel, user_id)
    if not db_user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    update_data = user.model_dump(exclude_unset=True)

    if "email" in update_data:
        taken = db.query(UserModel).filter(UserModel.email == update_data["email"], UserModel.id != user_id).first()
        if taken:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    # Handle password separately
    if "password" in update_data:
        db_user.hashed_password = hash_password(update_data.pop("password"))

    for key, value in update_data.items():
        setattr(db_user, key, value)

    db.commit()
    db.refresh(db_user)
    logger.info(f"User {db_user.username} updated by {current_user.username}: {sorted(update_data)}")

    return db_user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db), current_user: UserResponseSchema = Depends(is_admin)):
    db_user = db.query(UserModel).filter(UserModel.id == user_id).first()
    if not db_user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    db.delete(db_user)
    db.commit()
    return None
