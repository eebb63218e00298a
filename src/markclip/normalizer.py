# -*- coding: utf-8 -*-
"""
Markdown normalization pipeline.

Rewrites converter-produced Markdown into a canonical form:
1. Line endings - CRLF / CR become LF
2. Invisible characters - zero-width characters and BOM are removed
3. Fence scan - every line is classified as text, fence boundary or code
4. Entity decoding - fixed entity table, outside code
5. List markers - bullet glyphs and ordinal variants canonicalized
6. Block spacing - blank lines around headings, fences, tables, blockquotes
7. Blockquote markers and smart quotes
8. Whitespace - trailing spaces, blank-line runs, single final newline

Lines inside fenced code blocks pass through unchanged.
"""
import logging
from typing import Any

from .entities import decode_line, outside_inline_code
from .fences import TEXT, classify_lines, parse_fence
from .lists import canonicalize_lines
from .spacing import fix_blockquote_marker, space_blocks
from .whitespace import (
    collapse_whitespace,
    normalize_line_endings,
    straighten_quotes,
    strip_invisible,
)

logger = logging.getLogger(__name__)


class MarkdownNormalizer:
    """
    Ordered chain of line rules gated by the fenced-code state.

    Each call works on its own line list; the instance holds no state
    between calls.
    """

    def normalize(self, markdown: Any) -> Any:
        """
        Normalize a Markdown document.

        Args:
            markdown: Markdown text. Non-string input is returned unchanged.

        Returns:
            Normalized Markdown ending with exactly one newline, or "" for "".
        """
        if not isinstance(markdown, str) or markdown == "":
            return markdown

        text = strip_invisible(normalize_line_endings(markdown))
        lines = text.split("\n")
        kinds = classify_lines(lines)

        lines = self._step_decode_entities(lines, kinds)
        lines, kinds = self._step_list_markers(lines, kinds)
        lines, kinds = self._step_block_spacing(lines, kinds)
        lines = self._step_inline_rules(lines, kinds)
        lines = collapse_whitespace(lines, kinds)

        result = "\n".join(lines) + "\n"
        logger.debug(
            "Markdown normalized",
            extra={"input_chars": len(markdown), "output_chars": len(result)},
        )
        return result

    @staticmethod
    def _step_decode_entities(lines: list[str], kinds: list[str]) -> list[str]:
        """Decode entities on text lines, except where decoding would produce a fence line."""
        result = []
        for line, kind in zip(lines, kinds):
            if kind == TEXT:
                decoded = decode_line(line)
                if parse_fence(decoded) is None:
                    line = decoded
            result.append(line)
        return result

    @staticmethod
    def _step_list_markers(lines: list[str], kinds: list[str]) -> tuple[list[str], list[str]]:
        return canonicalize_lines(lines, kinds, TEXT)

    @staticmethod
    def _step_block_spacing(lines: list[str], kinds: list[str]) -> tuple[list[str], list[str]]:
        return space_blocks(lines, kinds)

    @staticmethod
    def _step_inline_rules(lines: list[str], kinds: list[str]) -> list[str]:
        """Blockquote marker spacing and straight quotes on text lines."""
        result = []
        for line, kind in zip(lines, kinds):
            if kind == TEXT:
                line = outside_inline_code(fix_blockquote_marker(line), straighten_quotes)
            result.append(line)
        return result


# Global normalizer instance
markdown_normalizer = MarkdownNormalizer()


def normalize_markdown(markdown: Any) -> Any:
    """Normalize ``markdown`` with the shared normalizer."""
    return markdown_normalizer.normalize(markdown)
