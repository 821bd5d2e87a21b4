"""
Authentication
- bcrypt password hashing
- JWT access tokens issued on login
- role checks for admin-only endpoints
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from core.config import AppSettings
from core.models import User, UserRole
from core.storage import Storage, get_storage

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
BCRYPT_MAX_BYTES = 72

security = HTTPBearer(auto_error=False)


def _truncate_for_bcrypt(password: str) -> bytes:
    """bcrypt only looks at the first 72 bytes; cut on a UTF-8 character boundary."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= BCRYPT_MAX_BYTES:
        return password_bytes
    return password_bytes[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore").encode("utf-8")


def get_password_hash(password: str) -> str:
    if not password:
        raise ValueError("Password cannot be empty")
    hashed = bcrypt.hashpw(_truncate_for_bcrypt(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_truncate_for_bcrypt(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False


def create_access_token(
    data: dict,
    settings: AppSettings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=settings.jwt_expiration_hours))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: AppSettings) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def authenticate_user(storage: Storage, email: str, password: str) -> Optional[User]:
    """Returns the user when the email exists and the password matches its hash."""
    user = storage.get_user_by_email(email)
    if user is None:
        return None
    if not verify_password(password, user.password):
        return None
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    storage: Storage = Depends(get_storage),
    settings: AppSettings = Depends(get_settings),
) -> User:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    user = storage.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
        )
    return user


def require_role(allowed_roles: list[UserRole]):
    """Role based access check used as a dependency factory."""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required roles: {[role.value for role in allowed_roles]}",
            )
        return current_user
    return role_checker


def require_admin():
    return require_role([UserRole.admin])
