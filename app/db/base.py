# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here makes sure
# the Base metadata knows about every table when Alembic or create_all runs.

from .base_class import Base

from .models.user_model import User
from .models.generation_models import GenerationRequest
