# /app/routers/templates_router.py

from fastapi import APIRouter

from ..models import website_model
from ..services import website_service

router = APIRouter()


@router.get("", response_model=website_model.TemplateListResponse, summary="List Template Categories")
def list_templates():
    """The fixed set of business categories a website can be generated for."""
    return {"templates": website_service.list_template_categories()}
