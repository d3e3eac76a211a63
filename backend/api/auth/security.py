import bcrypt
from jose import jwt, JWTError
from config import settings
from datetime import datetime, timedelta
from models.users import UserRole
from api.auth.schemas import UserResponseSchema
from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(user_id: int, username: str, role: UserRole):
    expire_minutes = settings.ADMIN_TOKEN_EXPIRE_MINUTES if role == UserRole.admin else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.utcnow() + timedelta(minutes=expire_minutes)

    payload = {
        "sub": username,
        "id": user_id,
        "role": role.value,
        "exp": expire
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_current_user(token: str = Depends(oauth2_scheme)):
    """
    Extract and validate the token using oauth2_scheme.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        username: str = payload.get("sub")
        user_id: int = payload.get("id")
        role = UserRole(payload.get("role", UserRole.operator.value))

        if username is None or user_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")

        return UserResponseSchema(id=user_id, username=username, email=None, role=role)

    except (JWTError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")


def is_reviewer(current_user: UserResponseSchema = Depends(get_current_user)):
    """
    Dependency to check if the current user may override verdicts.
    """
    if not current_user.is_reviewer:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have access to this resource. Only reviewers can access.",
        )
    return current_user


def is_admin(current_user: UserResponseSchema = Depends(get_current_user)):
    """
    Dependency to check if the current user is an admin.
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have access to this resource. Only admins can access.",
        )
    return current_user
