# /app/db/models/generation_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class GenerationRequest(Base):
    """
    One user's attempt to produce a website, from the business description
    through the final customized artifact. `generated_html` stays NULL until
    the generator service has returned; that NULL is the "pending" state.
    """
    __tablename__ = "generation_requests"  # Override automatic pluralization

    id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    business_description = Column(Text, nullable=False)
    template_category = Column(String, nullable=False)

    generated_html = Column(Text, nullable=True)
    generated_css = Column(Text, nullable=True)
    generated_js = Column(Text, nullable=True)

    custom_colors = Column(JSON, nullable=True)
    custom_texts = Column(JSON, nullable=True)
    custom_images = Column(JSON, nullable=True)

    # Set in Python so records created within the same second keep their order.
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    owner = relationship("User", back_populates="websites")
