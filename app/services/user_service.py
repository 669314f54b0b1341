# /app/services/user_service.py

import uuid
from typing import Optional

from app.core import security
from app.db.models.user_model import User
from app.models.user_model import UserCreate, PlanTier
from .database_service import DatabaseService


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """
    Registers a new account on the free plan.
    Raises ValueError if the email is already registered.
    """
    email = _normalize_email(user.email)
    if db.get_user_by_email(email):
        raise ValueError("This email is already registered.")

    record = {
        "id": f"usr_{uuid.uuid4().hex[:16]}",
        "email": email,
        "name": user.name.strip() if user.name else None,
        "hashed_password": security.hash_password(user.password),
        "plan": PlanTier.FREE.value,
    }
    return db.add_user(record)


def authenticate_user(db: DatabaseService, email: str, password: str) -> Optional[User]:
    """Returns the account when the credentials match, otherwise None."""
    user = db.get_user_by_email(_normalize_email(email))
    if not user or not security.verify_password(password, user.hashed_password):
        return None
    return user
