# /app/services/database_service.py

from typing import Any, Dict, List, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.generation_repository_sql import GenerationRepositorySQL
from .database_helpers.user_repository_sql import UserRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        A single facade over every repository. Services depend on this class
        only, never on the repositories or the SQLAlchemy session directly.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.generation_repo = GenerationRepositorySQL(db_session)
        self.user_repo = UserRepositorySQL(db_session)

    # --- GENERATION REQUEST METHODS (DELEGATED) ---
    def create_generation_request(self, business_description: str, template_category: str, owner_id: Optional[str] = None):
        return self.generation_repo.add_generation_request(business_description, template_category, owner_id)
    def get_generation_request(self, request_id: str): return self.generation_repo.get_generation_request(request_id)
    def update_generation_request(self, request_id: str, data: Dict[str, Any]): return self.generation_repo.update_generation_request(request_id, data)
    def delete_generation_request(self, request_id: str) -> bool: return self.generation_repo.delete_generation_request(request_id)
    def get_generation_requests_by_owner(self, owner_id: str) -> List: return self.generation_repo.get_generation_requests_by_owner(owner_id)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def add_user(self, user_record: Dict): return self.user_repo.add_user(user_record)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
