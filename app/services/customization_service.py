# /app/services/customization_service.py

"""
The customization engine: transforms already-generated CSS/HTML from
declarative color, text and image directives.

The HTML these functions receive was written by an LLM and never validated,
so matching is regex-based and best-effort. Every function is total: on
input it cannot work with it returns the input unchanged instead of raising.
Only `apply_texts` calls back into the generator service; the other two are
deterministic string transforms.
"""

import logging
import re
from typing import Any, Callable, Mapping, Optional

from . import gemini_service

logger = logging.getLogger(__name__)

COLOR_KEYS = ("primary", "secondary", "accent")
IMAGE_KEYS = ("logo", "hero")

# Characters that would let a color value escape its declaration.
FORBIDDEN_COLOR_CHARS = frozenset(";{}<>")

_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)

# One attribute: a name, optionally followed by a quoted or unquoted value.
_ATTR_RE = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?"""
)


# --- COLORS ---

def apply_colors(css: str, colors: Optional[Mapping[str, Any]]) -> str:
    """
    Rewrites the value of the first `--<key>-color: ...;` declaration for each
    key present in `colors`. Nothing else in the stylesheet is touched.
    Values containing any of FORBIDDEN_COLOR_CHARS are skipped.
    """
    if not isinstance(css, str) or not isinstance(colors, Mapping):
        return css

    for key in COLOR_KEYS:
        value = colors.get(key)
        if not isinstance(value, str) or not value.strip():
            continue
        if FORBIDDEN_COLOR_CHARS.intersection(value):
            logger.warning("Skipping unsafe value for --%s-color: %r", key, value)
            continue
        declaration = f"--{key}-color: {value.strip()};"
        css = re.sub(
            rf"--{key}-color\s*:\s*[^;{{}}]+;",
            lambda _match: declaration,
            css,
            count=1,
        )
    return css


# --- TEXTS ---

async def apply_texts(html: str, texts: Optional[Mapping[str, Any]]) -> str:
    """
    Asks the generator service to substitute text in the matching regions of
    the page. If the service fails or answers with anything other than a
    non-empty HTML string, the original HTML is returned: a skipped edit is
    better than a blanked or corrupted site.
    """
    if not isinstance(html, str) or not isinstance(texts, Mapping) or not texts:
        return html

    replacements = {str(k): v for k, v in texts.items() if isinstance(v, str)}
    if not replacements:
        return html

    try:
        result = await gemini_service.edit_website_texts(html, replacements)
    except Exception as e:
        logger.warning("Text customization failed, keeping original HTML: %s", e)
        return html

    edited = result.get("html") if isinstance(result, dict) else None
    if not isinstance(edited, str) or not edited.strip():
        logger.warning("Text customization returned no usable HTML, keeping original HTML.")
        return html
    return edited


# --- IMAGES ---

def _find_attr(tag: str, name: str) -> Optional["re.Match[str]"]:
    """
    Walks the attributes of an <img> tag in order and returns the first one
    called `name`. Quoted values are consumed whole, so text such as
    `alt="see src=x"` is never mistaken for an attribute.
    """
    for match in _ATTR_RE.finditer(tag, len("<img")):
        if match.group(1).lower() == name:
            return match
    return None


def _value_group(match: "re.Match[str]") -> Optional[int]:
    # 2: double-quoted, 3: single-quoted, 4: unquoted
    for group in (2, 3, 4):
        if match.group(group) is not None:
            return group
    return None


def _attr_value(tag: str, name: str) -> str:
    match = _find_attr(tag, name)
    group = _value_group(match) if match else None
    return match.group(group).lower() if group else ""


def _has_src(tag: str) -> bool:
    match = _find_attr(tag, "src")
    return match is not None and _value_group(match) is not None


def _is_logo(tag: str) -> bool:
    return "logo" in _attr_value(tag, "class") or "logo" in _attr_value(tag, "id")


def _is_hero(tag: str) -> bool:
    css_class = _attr_value(tag, "class")
    return "hero" in css_class or "banner" in css_class


def _is_not_logo(tag: str) -> bool:
    return not _is_logo(tag)


def _escape_for_quote(url: str, quote: str) -> str:
    return url.replace(quote, "&quot;" if quote == '"' else "&#39;")


def _replace_src(tag: str, url: str) -> str:
    match = _find_attr(tag, "src")
    group = _value_group(match) if match else None
    if group is None:
        return tag
    start, end = match.span(group)
    if group == 4:
        # Unquoted values are rewritten double-quoted.
        return tag[:start] + '"' + _escape_for_quote(url, '"') + '"' + tag[end:]
    quote = '"' if group == 2 else "'"
    return tag[:start] + _escape_for_quote(url, quote) + tag[end:]


def _replace_first_img_src(html: str, url: str, predicate: Callable[[str], bool]) -> Optional[str]:
    """Returns the new HTML, or None when no <img> with a src matches."""
    for match in _IMG_TAG_RE.finditer(html):
        tag = match.group(0)
        if not _has_src(tag) or not predicate(tag):
            continue
        return html[:match.start()] + _replace_src(tag, url) + html[match.end():]
    return None


def apply_images(html: str, images: Optional[Mapping[str, Any]]) -> str:
    """
    Swaps the `src` of the logo and hero images. The logo goes first, then the
    hero. The hero is the first image classed "hero" or "banner"; failing
    that, the first image that is not a logo.
    """
    if not isinstance(html, str) or not isinstance(images, Mapping):
        return html

    logo = images.get("logo")
    if isinstance(logo, str) and logo.strip():
        html = _replace_first_img_src(html, logo.strip(), _is_logo) or html

    hero = images.get("hero")
    if isinstance(hero, str) and hero.strip():
        replaced = _replace_first_img_src(html, hero.strip(), _is_hero)
        if replaced is None:
            replaced = _replace_first_img_src(html, hero.strip(), _is_not_logo)
        html = replaced or html

    return html
