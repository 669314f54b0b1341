# /app/routers/websites_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_current_user, get_current_active_user
from ..core.exceptions import (
    AccessDeniedError,
    GenerationFailedError,
    InvalidRequestError,
    WebsiteNotFoundError,
    WebsiteNotReadyError,
    WebsiteServiceError,
)
from ..db.models.user_model import User
from ..models import website_model
from ..services import website_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_STATUS = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    WebsiteNotFoundError: status.HTTP_404_NOT_FOUND,
    WebsiteNotReadyError: status.HTTP_409_CONFLICT,
    GenerationFailedError: status.HTTP_502_BAD_GATEWAY,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
}


def _to_http_exception(error: WebsiteServiceError) -> HTTPException:
    """Translates a service failure into a structured HTTP error (kind + message)."""
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.to_detail())
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.to_detail())


def _unexpected(action: str, error: Exception) -> HTTPException:
    logger.exception("ERROR during %s: %s", action, error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"kind": "error", "message": f"An unexpected error occurred during {action}."},
    )


# --- COLLECTION ENDPOINTS (/api/websites) ---

@router.post(
    "/generate",
    response_model=website_model.Website,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a Website",
    description="Creates a website record and fills it with an AI-generated HTML/CSS/JS site. Works for anonymous and signed-in callers.",
)
async def generate_website(
    payload: website_model.WebsiteCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    try:
        return await website_service.create_and_generate(
            db=db,
            business_description=payload.business_description,
            template_category=payload.template_category,
            owner=current_user,
        )
    except WebsiteServiceError as e:
        raise _to_http_exception(e)
    except Exception as e:
        raise _unexpected("website generation", e)


@router.get("", response_model=website_model.WebsiteListResponse, summary="List My Websites")
def list_my_websites(
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    try:
        websites = website_service.list_websites(db=db, owner=current_user)
    except Exception as e:
        raise _unexpected("website listing", e)
    return {"websites": websites, "total": len(websites)}


# --- INDIVIDUAL WEBSITE ENDPOINTS (/api/websites/{website_id}) ---

@router.get("/{website_id}", response_model=website_model.Website, summary="Get a Website")
def get_website(
    website_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    try:
        return website_service.get_website(db=db, website_id=website_id, caller=current_user)
    except WebsiteServiceError as e:
        raise _to_http_exception(e)
    except Exception as e:
        raise _unexpected("website retrieval", e)


@router.post(
    "/{website_id}/customize",
    response_model=website_model.Website,
    summary="Customize a Website",
    description="Applies color, text and image directives to a generated website. Omitted directives are left as they are.",
)
async def customize_website(
    website_id: str,
    payload: website_model.WebsiteCustomize,
    db: DatabaseService = Depends(get_db_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    try:
        return await website_service.customize_website(
            db=db,
            website_id=website_id,
            caller=current_user,
            custom_colors=payload.custom_colors,
            custom_texts=payload.custom_texts,
            custom_images=payload.custom_images,
        )
    except WebsiteServiceError as e:
        raise _to_http_exception(e)
    except Exception as e:
        raise _unexpected("website customization", e)


@router.get(
    "/{website_id}/download",
    summary="Download a Website as ZIP",
    response_class=Response,
    responses={200: {"content": {"application/zip": {}}}},
)
def download_website(
    website_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: Optional[User] = Depends(get_current_user),
):
    try:
        archive, file_name = website_service.download_website(db=db, website_id=website_id, caller=current_user)
    except WebsiteServiceError as e:
        raise _to_http_exception(e)
    except Exception as e:
        raise _unexpected("website download", e)
    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": f"attachment; filename={file_name}"},
    )


@router.delete(
    "/{website_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Website",
    description="Permanently deletes a website owned by the signed-in user. Deleting an id that does not exist succeeds.",
)
def delete_website(
    website_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    try:
        website_service.delete_website(db=db, website_id=website_id, caller=current_user)
    except WebsiteServiceError as e:
        raise _to_http_exception(e)
    except Exception as e:
        raise _unexpected("website deletion", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
