# /tests/test_gemini_service.py

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.core.config import settings
from app.core.exceptions import GenerationFailedError
from app.services import gemini_service


@pytest.mark.asyncio
async def test_generate_website_normalizes_optional_files(mocker):
    """Missing CSS/JS become empty strings and the prompt carries the business and category."""
    generate_json = mocker.patch.object(
        gemini_service, "generate_json",
        new=AsyncMock(return_value={"html": "<!DOCTYPE html><html></html>", "css": None}),
    )

    result = await gemini_service.generate_website("Bakery in Porto", "shop")

    assert result == {"html": "<!DOCTYPE html><html></html>", "css": "", "js": ""}
    prompt = generate_json.await_args.args[0]
    assert "Bakery in Porto" in prompt
    assert "--primary-color" in prompt
    assert gemini_service.prompt_library.TEMPLATE_CATEGORY_GUIDANCE["shop"] in prompt


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [{"html": ""}, {"html": "  "}, {"css": "body{}"}, {"html": ["<p>"]}])
async def test_generate_website_without_html_is_a_failure(mocker, response):
    """An empty or missing HTML document is raised as a failure, never returned."""
    mocker.patch.object(gemini_service, "generate_json", new=AsyncMock(return_value=response))

    with pytest.raises(GenerationFailedError):
        await gemini_service.generate_website("Bakery in Porto", "shop")


@pytest.mark.asyncio
async def test_edit_website_texts_sends_html_and_replacements(mocker):
    """The text-edit prompt includes the original HTML and the replacements as JSON."""
    generate_json = mocker.patch.object(gemini_service, "generate_json", new=AsyncMock(return_value={"html": "<p>x</p>"}))

    result = await gemini_service.edit_website_texts("<h1>{old}</h1>", {"title": "Nuevo título"})

    assert result == {"html": "<p>x</p>"}
    prompt = generate_json.await_args.args[0]
    assert "<h1>{old}</h1>" in prompt
    assert '"title": "Nuevo título"' in prompt


@pytest.mark.asyncio
async def test_generate_json_without_api_key_fails_cleanly(monkeypatch):
    """A missing GOOGLE_API_KEY is reported as a generation failure at call time."""
    monkeypatch.setattr(settings, "GOOGLE_API_KEY", "")

    with pytest.raises(GenerationFailedError, match="GOOGLE_API_KEY"):
        await gemini_service.generate_json("prompt")


@pytest.mark.asyncio
async def test_generate_json_is_bounded_by_timeout(mocker, monkeypatch):
    """A model that never answers fails after GENERATOR_TIMEOUT_SECONDS."""
    async def never_answers(*args, **kwargs):
        await asyncio.sleep(10)

    model = MagicMock()
    model.generate_content_async = never_answers
    mocker.patch.object(gemini_service, "_get_model", return_value=model)
    monkeypatch.setattr(settings, "GENERATOR_TIMEOUT_SECONDS", 0.05)

    with pytest.raises(GenerationFailedError, match="did not answer"):
        await gemini_service.generate_json("prompt")


@pytest.mark.asyncio
async def test_generate_json_rejects_invalid_json(mocker):
    """A non-JSON answer is a generation failure."""
    model = MagicMock()
    model.generate_content_async = AsyncMock(return_value=MagicMock(text="not json"))
    mocker.patch.object(gemini_service, "_get_model", return_value=model)

    with pytest.raises(GenerationFailedError):
        await gemini_service.generate_json("prompt")
