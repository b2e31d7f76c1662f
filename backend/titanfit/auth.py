"""
Bearer-token plumbing and role dependencies.

The store is the only authority on credentials; a token just carries the
authenticated user's id and role so later requests can find them again.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from .config import settings
from .schemas import User, UserRole
from .store import FitnessStore, get_store

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def resolve_user(store: FitnessStore, user_id: str, role: str) -> Optional[User]:
    if role == UserRole.COACH.value:
        user = store.get_user(user_id)
        return user if user and user.role == UserRole.COACH else None
    client = store.get_client(user_id)
    if client is None:
        return None
    return User(
        id=client.id,
        name=client.name,
        username=client.username,
        role=UserRole.CLIENT,
        avatar_url=client.avatar_url,
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    store: FitnessStore = Depends(get_store),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        user_id = payload.get("sub")
        role = payload.get("role")
    except JWTError:
        raise credentials_exception
    if user_id is None or role is None:
        raise credentials_exception

    user = resolve_user(store, str(user_id), role)
    if user is None:
        raise credentials_exception
    return user


def get_current_coach(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.COACH:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Coach access required"
        )
    return current_user


def get_current_client(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.CLIENT:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Client access required"
        )
    return current_user
