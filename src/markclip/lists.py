# -*- coding: utf-8 -*-
"""
List marker canonicalization.

Bullet glyphs become "- ", ordinal variants become "N. ", and inline bullet
runs ("Features: • a • b") are split onto separate lines.
"""
import re

from .spacing import BLOCKQUOTE_RE, HEADING_RE, TABLE_ROW_RE

# Glyphs recognized as bullets at the start of a line
BULLET_GLYPHS = (
    "•"  # bullet
    "·"  # middle dot
    "‧"  # hyphenation point
    "∙"  # bullet operator
    "●"  # black circle
    "○"  # white circle
    "◦"  # white bullet
    "◉"  # fisheye
    "▪"  # black small square
    "▫"  # white small square
    "■"  # black square
    "□"  # white square
    "‣"  # triangular bullet
    "⁃"  # hyphen bullet
    "⦁"  # z notation spot
    "▸"  # small right triangle
    "▹"  # white small right triangle
    "►"  # black right pointer
    "➢"  # arrowhead
    "➤"  # arrowhead
    "◆"  # black diamond
    "◇"  # white diamond
    "❖"  # diamond minus x
    "・"  # katakana middle dot
    "･"  # halfwidth katakana middle dot
)

# Glyphs that split a line when they appear mid-text surrounded by spaces.
# Middle dots are excluded: they commonly separate bylines and breadcrumbs.
INLINE_BULLET_GLYPHS = "•∙●◦▪‣⦁"

BULLET_LINE_RE = re.compile(r"^(\s*)[" + BULLET_GLYPHS + r"]\s+(\S.*)$")
ORDINAL_LINE_RE = re.compile(r"^(\s*)(\d+)[ \t]*[)）．。、][ \t]*(\S.*)$")
INLINE_SPLIT_RE = re.compile(r"\s+[" + INLINE_BULLET_GLYPHS + r"]\s+")


def canonicalize_ordinal(line: str) -> str:
    """Rewrite "1)", "1）", "1．", "1。" and "1、" markers as "1. "."""
    match = ORDINAL_LINE_RE.match(line)
    if not match:
        return line
    indent, number, text = match.groups()
    return f"{indent}{number}. {text}"


def split_bullets(line: str) -> list[str]:
    """
    Canonicalize a single line into one or more lines.

    A leading bullet glyph becomes "- " (indentation preserved). Any inline
    bullet run is split so each item sits on its own "- " line, with the
    preceding label (if any) kept alone on the first line.
    """
    if HEADING_RE.match(line) or TABLE_ROW_RE.match(line) or BLOCKQUOTE_RE.match(line):
        return [line]

    match = BULLET_LINE_RE.match(line)
    if match:
        indent, body = match.groups()
        label = None
        items = INLINE_SPLIT_RE.split(body)
    else:
        indent = line[: len(line) - len(line.lstrip())]
        parts = INLINE_SPLIT_RE.split(line.strip())
        if len(parts) == 1:
            return [canonicalize_ordinal(line)]
        label, items = parts[0].rstrip(), parts[1:]

    result = []
    if label:
        result.append(canonicalize_ordinal(indent + label))
    result.extend(f"{indent}- {item.strip()}" for item in items if item.strip())
    return result or [line]


def canonicalize_lines(lines: list[str], kinds: list[str], text_kind: str) -> tuple[list[str], list[str]]:
    """Canonicalize list markers on every ``text_kind`` line."""
    out_lines: list[str] = []
    out_kinds: list[str] = []
    for line, kind in zip(lines, kinds):
        if kind != text_kind:
            out_lines.append(line)
            out_kinds.append(kind)
            continue
        for new_line in split_bullets(line):
            out_lines.append(new_line)
            out_kinds.append(kind)
    return out_lines, out_kinds
