# /app/services/database_helpers/generation_repository_sql.py

"""
Raw SQLAlchemy queries for the `generation_requests` table.

The three customization mappings (`custom_colors`, `custom_texts`,
`custom_images`) are never overwritten wholesale: an update merges the new
keys onto the stored mapping, last write wins per key. Every other field is
replaced directly.
"""

import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from app.db.models.generation_models import GenerationRequest

MERGED_MAPPING_FIELDS = ("custom_colors", "custom_texts", "custom_images")
IMMUTABLE_FIELDS = ("id", "created_at")


def new_generation_id() -> str:
    return f"web_{uuid.uuid4().hex}"


def merge_mapping(existing: Optional[Dict[str, Any]], updates: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Shallow union of two mappings. Keys whose new value is None are ignored."""
    if not updates:
        return existing
    merged = dict(existing or {})
    merged.update({key: value for key, value in updates.items() if value is not None})
    return merged or existing


class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_request(
        self,
        business_description: str,
        template_category: str,
        owner_id: Optional[str] = None,
    ) -> GenerationRequest:
        """Creates a new record in the pending state (no generated HTML yet)."""
        new_request = GenerationRequest(
            id=new_generation_id(),
            owner_id=owner_id,
            business_description=business_description,
            template_category=template_category,
        )
        self.db.add(new_request)
        self.db.commit()
        self.db.refresh(new_request)
        return new_request

    def get_generation_request(self, request_id: str) -> Optional[GenerationRequest]:
        return self.db.query(GenerationRequest).filter(GenerationRequest.id == request_id).first()

    def get_generation_requests_by_owner(self, owner_id: str) -> List[GenerationRequest]:
        """All records owned by an account, oldest first."""
        return (
            self.db.query(GenerationRequest)
            .filter(GenerationRequest.owner_id == owner_id)
            .order_by(GenerationRequest.created_at.asc())
            .all()
        )

    def update_generation_request(self, request_id: str, data: Optional[Dict[str, Any]]) -> Optional[GenerationRequest]:
        """
        Applies a partial update. Top-level None values are skipped, so an
        update with nothing to change simply returns the current record.
        """
        record = self.get_generation_request(request_id)
        if record is None:
            return None

        changes = {
            key: value for key, value in (data or {}).items()
            if value is not None and key not in IMMUTABLE_FIELDS
        }
        if not changes:
            return record

        for key, value in changes.items():
            if key in MERGED_MAPPING_FIELDS:
                # Assign a new dict so SQLAlchemy sees the JSON column as dirty.
                value = merge_mapping(getattr(record, key), value)
            elif not hasattr(GenerationRequest, key):
                raise ValueError(f"Unknown generation request field: {key}")
            setattr(record, key, value)

        self.db.commit()
        self.db.refresh(record)
        return record

    def delete_generation_request(self, request_id: str) -> bool:
        """Deletes a record. Deleting an id that does not exist is not an error."""
        record = self.get_generation_request(request_id)
        if record:
            self.db.delete(record)
            self.db.commit()
            return True
        return False
