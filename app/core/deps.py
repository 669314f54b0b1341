# /app/core/deps.py

from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from app.db.models.user_model import User
from app.services.database_service import DatabaseService, get_db_service

SESSION_USER_KEY = "user_id"


def get_current_user(
    request: Request,
    db: DatabaseService = Depends(get_db_service),
) -> Optional[User]:
    """The signed-in account for this session, or None for anonymous callers."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    user = db.get_user_by_id(user_id)
    if user is None:
        # The account behind a stale cookie no longer exists.
        request.session.pop(SESSION_USER_KEY, None)
    return user


def get_current_active_user(
    current_user: Optional[User] = Depends(get_current_user),
) -> User:
    """Like get_current_user, but rejects anonymous callers with a 401."""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be signed in to use this feature.",
        )
    return current_user
