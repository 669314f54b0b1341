# /app/services/website_service.py

"""
The request lifecycle orchestrator for generated websites.

A website moves through a small state machine:

    created (no generated HTML) --generate--> generated --customize--> generated
          \\______________________ delete ______________________/

This module sequences the store, the generator service, the customization
engine and the packaging service into that machine. It enforces the
preconditions of every transition (validation, existence, readiness,
ownership) and reports violations with the exceptions in `app.core.exceptions`.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from app.core.config import settings
from app.core.exceptions import (
    AccessDeniedError,
    GenerationFailedError,
    InvalidRequestError,
    PlanRequiredError,
    WebsiteNotFoundError,
    WebsiteNotReadyError,
)
from app.db.models.generation_models import GenerationRequest
from app.db.models.user_model import User
from app.models.website_model import TemplateCategory
from app.models.user_model import PlanTier
from . import customization_service, gemini_service, packaging_service
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

WEBSITE_ID_PATTERN = re.compile(r"^web_[0-9a-f]{32}$")

TEMPLATE_CATEGORIES = [
    {
        "id": TemplateCategory.RESTAURANT.value,
        "name": "Restaurant / Bar",
        "description": "Perfect for restaurants, cafes and bars",
    },
    {
        "id": TemplateCategory.CONSULTANCY.value,
        "name": "Consultancy / Advisory",
        "description": "For consultants, advisors and professional services firms",
    },
    {
        "id": TemplateCategory.SHOP.value,
        "name": "Shop / E-commerce",
        "description": "Show off your products and services",
    },
    {
        "id": TemplateCategory.SERVICES.value,
        "name": "Professional Services",
        "description": "Plumbers, electricians, renovations, etc",
    },
]


# --- HELPERS ---

def _validate_website_id(website_id: Any) -> str:
    if not isinstance(website_id, str) or not WEBSITE_ID_PATTERN.match(website_id):
        raise InvalidRequestError(f"'{website_id}' is not a valid website id.")
    return website_id


def _validate_category(template_category: Any) -> str:
    value = template_category.value if isinstance(template_category, TemplateCategory) else template_category
    try:
        return TemplateCategory(value).value
    except ValueError:
        allowed = ", ".join(c.value for c in TemplateCategory)
        raise InvalidRequestError(f"Unknown template category '{value}'. Expected one of: {allowed}.")


def _clean_mapping(directives: Any, allowed_keys: Optional[Tuple[str, ...]] = None) -> Optional[Dict[str, str]]:
    """
    Normalizes a directive (dict or pydantic model) to a dict of non-empty
    strings. When `allowed_keys` is given, any other key is dropped.
    """
    if directives is None:
        return None
    if hasattr(directives, "model_dump"):
        directives = directives.model_dump(exclude_none=True)
    if not isinstance(directives, Mapping):
        raise InvalidRequestError("Customization directives must be key/value mappings.")
    cleaned = {str(k): v for k, v in directives.items() if isinstance(v, str) and v.strip()}
    if allowed_keys is not None:
        cleaned = {k: v for k, v in cleaned.items() if k in allowed_keys}
    return cleaned or None


def _clean_colors(custom_colors: Any) -> Optional[Dict[str, str]]:
    colors = _clean_mapping(custom_colors, customization_service.COLOR_KEYS)
    for key, value in (colors or {}).items():
        if customization_service.FORBIDDEN_COLOR_CHARS.intersection(value):
            raise InvalidRequestError(
                f"Color value for '{key}' cannot contain ';', '{{', '}}', '<' or '>'."
            )
    return colors


def _load_accessible(db: DatabaseService, website_id: str, caller: Optional[User]) -> GenerationRequest:
    """Loads a record and checks the caller may touch it. Anonymous records are open by id."""
    record = db.get_generation_request(_validate_website_id(website_id))
    if record is None:
        raise WebsiteNotFoundError(f"Website with ID {website_id} not found.")
    if record.owner_id and (caller is None or caller.id != record.owner_id):
        raise AccessDeniedError("You do not have access to this website.")
    return record


def _require_generated(record: GenerationRequest) -> None:
    if not record.generated_html:
        raise WebsiteNotReadyError(
            f"Website with ID {record.id} has not been generated yet.", website_id=record.id
        )


# --- PUBLIC SERVICE FUNCTIONS ---

def list_template_categories() -> List[Dict[str, str]]:
    return [dict(category) for category in TEMPLATE_CATEGORIES]


async def create_and_generate(
    db: DatabaseService,
    business_description: str,
    template_category: Any,
    owner: Optional[User] = None,
) -> GenerationRequest:
    """
    Persists a pending record, calls the generator, then stores the generated
    files. If generation fails the pending record is kept (not rolled back)
    and the failure, carrying the record id, is raised to the caller.
    """
    description = business_description.strip() if isinstance(business_description, str) else ""
    if not description:
        raise InvalidRequestError("The business description cannot be empty.")
    category = _validate_category(template_category)

    record = db.create_generation_request(description, category, owner.id if owner else None)
    logger.info("Created website %s (category=%s, owner=%s)", record.id, category, record.owner_id)

    try:
        generated = await gemini_service.generate_website(description, category)
    except GenerationFailedError as e:
        logger.error("Generation failed for website %s: %s", record.id, e.message)
        raise GenerationFailedError(e.message, website_id=record.id) from e
    except Exception as e:
        logger.exception("Unexpected generator error for website %s", record.id)
        raise GenerationFailedError(f"Failed to generate website: {e}", website_id=record.id) from e

    html = generated.get("html") if isinstance(generated, dict) else None
    if not isinstance(html, str) or not html.strip():
        raise GenerationFailedError("Generated website has no HTML content.", website_id=record.id)

    updated = db.update_generation_request(record.id, {
        "generated_html": html,
        "generated_css": generated.get("css") or "",
        "generated_js": generated.get("js") or "",
    })
    if updated is None:
        raise WebsiteNotFoundError(f"Website with ID {record.id} was deleted during generation.")
    logger.info("Generated website %s", record.id)
    return updated


def get_website(db: DatabaseService, website_id: str, caller: Optional[User] = None) -> GenerationRequest:
    return _load_accessible(db, website_id, caller)


def list_websites(db: DatabaseService, owner: User) -> List[GenerationRequest]:
    return db.get_generation_requests_by_owner(owner.id)


async def customize_website(
    db: DatabaseService,
    website_id: str,
    caller: Optional[User] = None,
    custom_colors: Any = None,
    custom_texts: Any = None,
    custom_images: Any = None,
) -> GenerationRequest:
    """
    Applies colors, then texts, then images to a generated website and stores
    the result. The directive mappings are merged onto the stored ones by the
    repository. A request with no directives returns the record unchanged.
    """
    colors = _clean_colors(custom_colors)
    texts = _clean_mapping(custom_texts)
    images = _clean_mapping(custom_images, customization_service.IMAGE_KEYS)

    record = _load_accessible(db, website_id, caller)
    _require_generated(record)

    if not (colors or texts or images):
        return record

    updates: Dict[str, Any] = {}
    html = record.generated_html

    if colors:
        updates["generated_css"] = customization_service.apply_colors(record.generated_css or "", colors)
        updates["custom_colors"] = colors
    if texts:
        html = await customization_service.apply_texts(html, texts)
        updates["custom_texts"] = texts
    if images:
        html = customization_service.apply_images(html, images)
        updates["custom_images"] = images
    updates["generated_html"] = html

    updated = db.update_generation_request(record.id, updates)
    if updated is None:
        raise WebsiteNotFoundError(f"Website with ID {record.id} not found.")
    logger.info("Customized website %s (%s)", record.id, ", ".join(k for k in updates if k.startswith("custom_")))
    return updated


def download_website(db: DatabaseService, website_id: str, caller: Optional[User] = None) -> Tuple[bytes, str]:
    """Returns (zip_bytes, filename). Read-only."""
    record = _load_accessible(db, website_id, caller)
    _require_generated(record)

    if settings.DOWNLOAD_REQUIRES_PREMIUM and (caller is None or caller.plan != PlanTier.PREMIUM.value):
        raise PlanRequiredError("Downloading the website requires a premium plan.")

    archive = packaging_service.build_site_archive(
        record.generated_html, record.generated_css, record.generated_js
    )
    return archive, f"website-{record.id}.zip"


def delete_website(db: DatabaseService, website_id: str, caller: User) -> None:
    """
    Deletes a website owned by the caller, in any state. Ownership is checked
    here, before the store is called; an id that no longer exists is a no-op.
    """
    _validate_website_id(website_id)
    record = db.get_generation_request(website_id)
    if record is None:
        return
    if caller is None or record.owner_id != caller.id:
        raise AccessDeniedError("Only the owner of a website can delete it.")
    db.delete_generation_request(website_id)
    logger.info("Deleted website %s", website_id)
