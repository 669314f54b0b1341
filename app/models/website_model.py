# /app/models/website_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict, AliasChoices, field_validator, computed_field
from typing import Dict, List, Optional
from datetime import datetime
from enum import Enum


# --- Enumerations ---
class TemplateCategory(str, Enum):
    RESTAURANT = "restaurant"
    CONSULTANCY = "consultancy"
    SHOP = "shop"
    SERVICES = "services"


class WebsiteStatus(str, Enum):
    CREATED = "created"
    GENERATED = "generated"


# Characters that would let a color value break out of its CSS declaration.
_FORBIDDEN_COLOR_CHARS = set(";{}<>")


# --- Request Models ---
class WebsiteCreate(BaseModel):
    """
    The payload for POST /api/websites/generate. The original client sends
    camelCase keys (`businessDescription`, `templateType`), so both spellings
    are accepted.
    """
    model_config = ConfigDict(populate_by_name=True)

    business_description: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("business_description", "businessDescription"),
    )
    template_category: TemplateCategory = Field(
        ...,
        validation_alias=AliasChoices("template_category", "templateCategory", "templateType", "template_type"),
    )

    @field_validator("business_description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("The business description cannot be empty.")
        return value.strip()


class CustomColors(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None

    @field_validator("primary", "secondary", "accent")
    @classmethod
    def safe_color_value(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if _FORBIDDEN_COLOR_CHARS.intersection(value):
            raise ValueError("Color values cannot contain ';', '{', '}', '<' or '>'.")
        return value


class CustomImages(BaseModel):
    logo: Optional[str] = None
    hero: Optional[str] = None


class WebsiteCustomize(BaseModel):
    """All three directives are optional; an empty body is a no-op."""
    model_config = ConfigDict(populate_by_name=True)

    custom_colors: Optional[CustomColors] = Field(
        default=None, validation_alias=AliasChoices("custom_colors", "customColors")
    )
    custom_texts: Optional[Dict[str, str]] = Field(
        default=None, validation_alias=AliasChoices("custom_texts", "customTexts")
    )
    custom_images: Optional[CustomImages] = Field(
        default=None, validation_alias=AliasChoices("custom_images", "customImages")
    )


# --- Response Models ---
class Website(BaseModel):
    """A generation request as returned to the client."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: Optional[str] = None
    business_description: str
    template_category: TemplateCategory
    generated_html: Optional[str] = None
    generated_css: Optional[str] = None
    generated_js: Optional[str] = None
    custom_colors: Optional[Dict[str, str]] = None
    custom_texts: Optional[Dict[str, str]] = None
    custom_images: Optional[Dict[str, str]] = None
    created_at: datetime

    @computed_field
    @property
    def status(self) -> WebsiteStatus:
        return WebsiteStatus.GENERATED if self.generated_html else WebsiteStatus.CREATED


class WebsiteListResponse(BaseModel):
    websites: List[Website]
    total: int


class TemplateInfo(BaseModel):
    id: TemplateCategory
    name: str
    description: str


class TemplateListResponse(BaseModel):
    templates: List[TemplateInfo]
