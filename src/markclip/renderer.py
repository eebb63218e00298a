# -*- coding: utf-8 -*-
"""
Template rendering for titles, frontmatter and backmatter.

Placeholders resolve independently: a placeholder that cannot be resolved
becomes an empty string, and a result with no alphanumeric content is
replaced by the page title, the article title or "download".
"""
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .placeholders import PLACEHOLDER, Token, scan_placeholders
from .resolvers import extract_domain, format_date, join_keywords
from .security import sanitize_value
from .transforms import apply_transform

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "{pageTitle}"
FALLBACK_TITLE = "download"

# Fields never substituted into templates
SKIPPED_FIELDS = frozenset({"content"})


def coerce_value(value: Any) -> str:
    """String form of a metadata value ("" for None, lists comma-joined)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(coerce_value(item) for item in value)
    return str(value)


def has_content(text: str) -> bool:
    return any(char.isalnum() for char in text)


class TemplateRenderer:
    """Resolves placeholder templates against a metadata record."""

    def render(
            self,
            template: Any,
            metadata: Mapping[str, Any] | None,
            now: datetime | None = None,
    ) -> str:
        """
        Render ``template`` with values from ``metadata``.

        Args:
            template: Template string. None, non-string or empty falls back to "{pageTitle}".
            metadata: Metadata record (field name -> value). None is treated as empty.
            now: Capture timestamp shared by every date placeholder. Defaults to local now.

        Returns:
            The rendered string, never empty.
        """
        if not isinstance(template, str) or not template:
            template = DEFAULT_TEMPLATE
        data = metadata if isinstance(metadata, Mapping) else {}
        moment = now or datetime.now()
        if moment.tzinfo is None:
            moment = moment.astimezone()

        parts = []
        for token in scan_placeholders(template):
            if token.kind == PLACEHOLDER:
                parts.append(sanitize_value(self._resolve(token, data, moment)))
            else:
                parts.append(token.text)
        result = "".join(parts)

        if not has_content(result.strip()):
            return self._fallback(data)
        return result

    def _resolve(self, token: Token, data: Mapping[str, Any], moment: datetime) -> str:
        name, modifier = token.name, token.modifier
        if name in SKIPPED_FIELDS:
            return ""

        try:
            if name == "date":
                return format_date(moment, modifier)
            if name == "keywords":
                return join_keywords(data.get("keywords"), modifier)
            if name == "domain":
                value = extract_domain(data.get("baseURI"))
            else:
                value = coerce_value(data.get(name))
            if modifier is None:
                return value

            transformed = apply_transform(modifier, value)
            if transformed is None:
                logger.debug(f"Unknown transform {modifier!r} in {token.text}")
                return ""
            return transformed

        except Exception as e:
            logger.debug(f"Placeholder {token.text} could not be resolved: {e}")
            return ""

    @staticmethod
    def _fallback(data: Mapping[str, Any]) -> str:
        for field in ("pageTitle", "title"):
            candidate = sanitize_value(coerce_value(data.get(field)))
            if candidate.strip():
                return candidate
        return FALLBACK_TITLE


# Global renderer instance
template_renderer = TemplateRenderer()


def render_template(
        template: Any,
        metadata: Mapping[str, Any] | None,
        now: datetime | None = None,
) -> str:
    """Render ``template`` with the shared renderer."""
    return template_renderer.render(template, metadata, now)
