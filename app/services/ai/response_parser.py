"""Parsing of provider output into ``{html, css}``.

Two stages, each returning a tagged ``ParseResult``:

1. strict: strip Markdown code fences and parse a JSON object
2. markup: pull a full ``<!DOCTYPE html> ... </html>`` document out of the
   raw text, plus the first ``<style>`` block as CSS

``parse_website`` runs the stages in order and raises ``GenerationParseError``
only when neither yields any HTML.
"""

import json
import logging
import re
from dataclasses import dataclass

from app.schemas.ai import GeneratedWebsite
from app.utils.exceptions import GenerationParseError

logger = logging.getLogger(__name__)

JSON_FENCE_PATTERN = re.compile(r"```json\n?")
FENCE_PATTERN = re.compile(r"```\n?")
HTML_DOCUMENT_PATTERN = re.compile(r"<!DOCTYPE html>[\s\S]*</html>", re.IGNORECASE)
STYLE_BLOCK_PATTERN = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)

STRICT = "strict"
MARKUP = "markup"


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    stage: str
    html: str = ""
    css: str = ""
    error: str | None = None

    @classmethod
    def failure(cls, stage: str, error: str) -> "ParseResult":
        return cls(ok=False, stage=stage, error=error)


def strip_code_fences(text: str) -> str:
    text = JSON_FENCE_PATTERN.sub("", text)
    text = FENCE_PATTERN.sub("", text)
    return text.strip()


def parse_structured(text: str) -> ParseResult:
    """Strict stage. Succeeds for any JSON object; missing fields come back empty."""
    try:
        parsed = json.loads(strip_code_fences(text))
    except ValueError as e:
        return ParseResult.failure(STRICT, f"invalid JSON: {e}")

    if not isinstance(parsed, dict):
        return ParseResult.failure(STRICT, f"expected a JSON object, got {type(parsed).__name__}")

    html = parsed.get("html")
    css = parsed.get("css")
    return ParseResult(
        ok=True,
        stage=STRICT,
        html=html if isinstance(html, str) else "",
        css=css if isinstance(css, str) else "",
    )


def extract_markup(text: str) -> ParseResult:
    """Fallback stage over the raw provider text."""
    html_match = HTML_DOCUMENT_PATTERN.search(text)
    if not html_match:
        return ParseResult.failure(MARKUP, "no HTML document found")

    style_match = STYLE_BLOCK_PATTERN.search(text)
    return ParseResult(
        ok=True,
        stage=MARKUP,
        html=html_match.group(0),
        css=style_match.group(1) if style_match else "",
    )


def parse_website(
    raw: str,
    previous: GeneratedWebsite | None = None,
    failure_message: str | None = None,
) -> GeneratedWebsite:
    """Turn provider text into a website.

    Args:
        raw: Provider response text
        previous: The caller's current site when editing a section. Fields the
            provider left empty fall back to it.
        failure_message: Message for the error raised when nothing is recoverable

    Raises:
        GenerationParseError: Neither stage produced any HTML
    """
    fallback_html = previous.html if previous else ""
    fallback_css = previous.css if previous else ""

    structured = parse_structured(raw)
    if structured.ok:
        html = structured.html or fallback_html
        if html:
            return GeneratedWebsite(html=html, css=structured.css or fallback_css)
        logger.warning("Provider JSON had no html field, trying markup extraction")
    else:
        logger.warning(f"Strict parse of provider response failed ({structured.error}), trying markup extraction")

    markup = extract_markup(raw)
    if markup.ok:
        return GeneratedWebsite(html=markup.html, css=markup.css or fallback_css)

    logger.error(f"Could not recover HTML from provider response ({markup.error})")
    raise GenerationParseError(failure_message)
