"""
Authentication routes: login and session identity.
"""
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from .. import schemas
from ..auth import create_access_token, get_current_user
from ..store import FitnessStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/login", response_model=schemas.Token)
def login(credentials: schemas.LoginRequest, store: FitnessStore = Depends(get_store)):
    """
    Sign in as a coach or a client.

    - **role**: COACH or CLIENT
    - **identifier**: username
    - **secret**: coach password, or the client's passport code

    Returns a bearer token for subsequent requests.
    """
    user = store.authenticate(credentials.identifier, credentials.secret, credentials.role)
    if not user:
        logger.info(f"Failed {credentials.role.value} login for {credentials.identifier}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": user.id, "role": user.role.value})
    return {"access_token": access_token, "token_type": "bearer", "user": user}


@router.get("/me", response_model=schemas.User)
def get_current_user_info(current_user: schemas.User = Depends(get_current_user)):
    """
    Get the signed-in user's identity.
    """
    return current_user
