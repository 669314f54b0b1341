# /app/services/gemini_service.py

"""
The generator service: every call to the LLM goes through this module.

Two entry points are used by the rest of the application:
- `generate_website` turns a business description into an HTML/CSS/JS triple.
- `edit_website_texts` asks the model to rewrite text inside existing HTML.

Every call is bounded by GENERATOR_TIMEOUT_SECONDS so a slow or stuck
upstream can never hang the request that is waiting on it.
"""

import asyncio
import json
import logging
from typing import Dict, Any

import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from app.core.config import settings
from app.core.exceptions import GenerationFailedError
from . import prompt_library

logger = logging.getLogger(__name__)

_configured_key = None


def _get_model() -> genai.GenerativeModel:
    """Configures the client on first use and returns the model handle."""
    global _configured_key
    if not settings.GOOGLE_API_KEY:
        raise GenerationFailedError("The generator service is not configured: GOOGLE_API_KEY is not set.")
    if _configured_key != settings.GOOGLE_API_KEY:
        genai.configure(api_key=settings.GOOGLE_API_KEY)
        _configured_key = settings.GOOGLE_API_KEY
    return genai.GenerativeModel(settings.GEMINI_MODEL)


# --- CORE GENERATIVE FUNCTIONS ---

async def generate_json(prompt: str, temperature: float = 0.1) -> Dict[str, Any]:
    """
    Generates a response using the Gemini API's JSON Mode and returns the
    parsed object. Raises GenerationFailedError on any failure, including
    a timeout.
    """
    try:
        model = _get_model()
        config = GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json"
        )
        response = await asyncio.wait_for(
            model.generate_content_async(prompt, generation_config=config),
            timeout=settings.GENERATOR_TIMEOUT_SECONDS,
        )
        if not response.text:
            raise ValueError("AI model returned an empty response.")
        result = json.loads(response.text)
    except GenerationFailedError:
        raise
    except asyncio.TimeoutError:
        logger.error("Gemini call timed out after %ss", settings.GENERATOR_TIMEOUT_SECONDS)
        raise GenerationFailedError(
            f"The generator service did not answer within {settings.GENERATOR_TIMEOUT_SECONDS:g} seconds."
        )
    except Exception as e:
        logger.error("ERROR in generate_json with Gemini API: %s", e)
        raise GenerationFailedError(f"Failed to get a valid JSON response from the AI. Error: {e}") from e

    if not isinstance(result, dict):
        raise GenerationFailedError("The AI response was not a JSON object.")
    return result


# --- WEBSITE OPERATIONS ---

async def generate_website(business_description: str, template_category: str) -> Dict[str, str]:
    """
    Returns {"html", "css", "js"}. The HTML is guaranteed non-empty; an empty
    or missing HTML document is reported as a failure, never returned.
    """
    prompt = prompt_library.WEBSITE_GENERATION_PROMPT.format(
        template_category=template_category,
        category_guidance=prompt_library.TEMPLATE_CATEGORY_GUIDANCE.get(template_category, ""),
        business_description=business_description,
    )
    result = await generate_json(prompt, temperature=0.7)

    html = result.get("html")
    if not isinstance(html, str) or not html.strip():
        raise GenerationFailedError("Generated website has no HTML content.")

    css = result.get("css")
    js = result.get("js")
    return {
        "html": html,
        "css": css if isinstance(css, str) else "",
        "js": js if isinstance(js, str) else "",
    }


async def edit_website_texts(original_html: str, replacements: Dict[str, str]) -> Dict[str, Any]:
    """
    Sends the HTML and the replacement directives to the content-editing
    prompt and returns the raw JSON object. Callers validate the result.
    """
    prompt = prompt_library.WEBSITE_TEXT_EDIT_PROMPT.format(
        replacements_json=json.dumps(replacements, indent=2, ensure_ascii=False),
        original_html=original_html,
    )
    return await generate_json(prompt, temperature=0.2)
