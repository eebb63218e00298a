# -*- coding: utf-8 -*-
"""
Conversion pipeline: turns converter Markdown plus page metadata into the
final document.

Steps:
1. Title - render the title template (never empty)
2. Normalize - canonicalize the Markdown body
3. Frontmatter / Backmatter - render the templates and wrap the body
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .config import settings
from .normalizer import markdown_normalizer
from .renderer import template_renderer

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of the conversion pipeline."""

    markdown: str
    title: str | None = None
    steps_applied: list[str] = field(default_factory=list)


class ConversionPipeline:
    """
    Assembles the delivered document.

    Each step can be enabled/disabled via configuration or per call.
    """

    def process(
            self,
            markdown: str,
            metadata: Mapping[str, Any] | None,
            *,
            title_template: str | None = None,
            frontmatter_template: str | None = None,
            backmatter_template: str | None = None,
            include_template: bool | None = None,
            now: datetime | None = None,
    ) -> PipelineResult:
        """
        Process a converted Markdown body.

        Args:
            markdown: Markdown from the HTML converter
            metadata: Page metadata record
            title_template: Title template (defaults to settings.TITLE_TEMPLATE)
            frontmatter_template: Frontmatter template (defaults to settings.FRONTMATTER_TEMPLATE)
            backmatter_template: Backmatter template (defaults to settings.BACKMATTER_TEMPLATE)
            include_template: Wrap the body with front/backmatter (defaults to settings.INCLUDE_TEMPLATE)
            now: Capture timestamp shared by all templates

        Returns:
            PipelineResult with the assembled markdown and rendered title

        Raises:
            ValueError: If the body exceeds settings.MAX_MARKDOWN_CHARS
        """
        if len(markdown) > settings.MAX_MARKDOWN_CHARS:
            raise ValueError(
                f"Markdown body too large ({len(markdown)} chars, "
                f"limit {settings.MAX_MARKDOWN_CHARS})"
            )

        record = dict(metadata or {})
        now = now or datetime.now().astimezone()
        result = PipelineResult(markdown="")

        # Step 1: Title (always active)
        result.title = template_renderer.render(
            title_template if title_template is not None else settings.TITLE_TEMPLATE,
            record,
            now,
        )
        result.steps_applied.append("title")

        # Step 2: Normalization
        body = markdown
        if settings.ENABLE_NORMALIZATION:
            body = markdown_normalizer.normalize(markdown)
            result.steps_applied.append("normalize")

        # Step 3: Frontmatter / Backmatter
        if include_template if include_template is not None else settings.INCLUDE_TEMPLATE:
            body = self._step_wrap(
                body,
                record,
                now,
                frontmatter_template if frontmatter_template is not None else settings.FRONTMATTER_TEMPLATE,
                backmatter_template if backmatter_template is not None else settings.BACKMATTER_TEMPLATE,
                result.steps_applied,
            )

        result.markdown = body
        logger.info(
            "Conversion completed",
            extra={"title": result.title[:60], "chars": len(body), "steps": result.steps_applied},
        )
        return result

    @staticmethod
    def _step_wrap(
            body: str,
            record: dict[str, Any],
            now: datetime,
            frontmatter_template: str,
            backmatter_template: str,
            steps_applied: list[str],
    ) -> str:
        """Concatenate frontmatter + "\\n" + body + "\\n" + backmatter."""
        frontmatter = backmatter = ""
        if frontmatter_template:
            frontmatter = template_renderer.render(frontmatter_template, record, now)
            steps_applied.append("frontmatter")
        if backmatter_template:
            backmatter = template_renderer.render(backmatter_template, record, now)
            steps_applied.append("backmatter")
        return f"{frontmatter}\n{body}\n{backmatter}"


# Global pipeline instance
conversion_pipeline = ConversionPipeline()
