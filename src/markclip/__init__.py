# -*- coding: utf-8 -*-
"""
markclip - Markdown normalization and template rendering for web clippings.
"""
__version__ = "1.0.0"

from .normalizer import MarkdownNormalizer, normalize_markdown  # noqa: E402
from .pipeline import ConversionPipeline, PipelineResult  # noqa: E402
from .placeholders import scan_placeholders, template_variables  # noqa: E402
from .renderer import TemplateRenderer, render_template  # noqa: E402

__all__ = [
    "ConversionPipeline",
    "MarkdownNormalizer",
    "PipelineResult",
    "TemplateRenderer",
    "normalize_markdown",
    "render_template",
    "scan_placeholders",
    "template_variables",
    "__version__",
]
