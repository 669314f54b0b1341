# /app/db/models/user_model.py

"""
SQLAlchemy model for an account. An account holds credentials, a plan tier,
and owns zero or more generation requests.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from ..base_class import Base


class User(Base):
    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    hashed_password = Column(String, nullable=False)
    plan = Column(String, nullable=False, default="free")  # 'free' or 'premium'
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    websites = relationship("GenerationRequest", back_populates="owner")
