# /app/routers/auth_router.py

"""
This module defines the public-facing API for account actions:
- Registration (`/register`), which also signs the new user in
- Sign in and sign out (`/login`, `/logout`)
- The current user's profile (`/me`)

Authentication is cookie-based: the signed session cookie carries the
account id, set by Starlette's SessionMiddleware.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.deps import SESSION_USER_KEY, get_current_active_user
from app.db.models.user_model import User as UserModel
from app.models.user_model import User, UserCreate, UserLogin
from app.services import user_service
from app.services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

# --- Router Initialization ---
router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED, summary="Register a New Account")
def register_user(
    request: Request,
    user_in: UserCreate,
    db: DatabaseService = Depends(get_db_service),
):
    try:
        new_user = user_service.create_user(db=db, user=user_in)
    except ValueError as e:
        # The service raises ValueError when the email already exists.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    request.session[SESSION_USER_KEY] = new_user.id
    logger.info("Registered account %s", new_user.id)
    return new_user


@router.post("/login", response_model=User, summary="Sign In")
def login(
    request: Request,
    credentials: UserLogin,
    db: DatabaseService = Depends(get_db_service),
):
    user = user_service.authenticate_user(db, email=credentials.email, password=credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/logout", summary="Sign Out")
def logout(request: Request):
    request.session.clear()
    return {"message": "Signed out successfully"}


@router.get("/me", response_model=User, summary="Get the Current Account")
def read_current_user(current_user: UserModel = Depends(get_current_active_user)):
    return current_user
