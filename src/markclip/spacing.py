# -*- coding: utf-8 -*-
"""
Block spacing rules.

Exactly one blank line separates headings, fenced blocks, table blocks and
blockquote groups from their neighbours. A heading directly under a list item
stays attached to it.
"""
import re

from .fences import CLOSE, CODE, OPEN, TEXT

HEADING_RE = re.compile(r"^ {0,3}#{1,6}(?:\s|$)")
TABLE_ROW_RE = re.compile(r"^\s*\|")
BLOCKQUOTE_RE = re.compile(r"^\s*>")
LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s")

# ">text" / ">>text" missing the space after the marker run
BLOCKQUOTE_MARKER_RE = re.compile(r"^(\s*)(>+)(?=[^\s>])")


def is_blank(line: str) -> bool:
    return not line.strip()


def is_heading(line: str) -> bool:
    return bool(HEADING_RE.match(line))


def is_table_row(line: str) -> bool:
    return bool(TABLE_ROW_RE.match(line))


def is_blockquote(line: str) -> bool:
    return bool(BLOCKQUOTE_RE.match(line))


def is_list_item(line: str) -> bool:
    return bool(LIST_ITEM_RE.match(line))


def needs_blank_line(prev_kind: str, prev: str, kind: str, line: str) -> bool:
    """Decide whether a blank line belongs between two adjacent non-blank lines."""
    if prev_kind in (OPEN, CODE):
        return False
    if kind == OPEN or prev_kind == CLOSE:
        return True
    if kind != TEXT:
        return False

    if is_heading(line):
        return not is_list_item(prev)
    if is_heading(prev):
        return True
    if is_table_row(prev) != is_table_row(line):
        return True
    return is_blockquote(prev) != is_blockquote(line)


def space_blocks(lines: list[str], kinds: list[str]) -> tuple[list[str], list[str]]:
    """Insert a blank line wherever two adjacent blocks need separating."""
    out_lines: list[str] = []
    out_kinds: list[str] = []
    for line, kind in zip(lines, kinds):
        if out_lines and not (kind == TEXT and is_blank(line)):
            prev, prev_kind = out_lines[-1], out_kinds[-1]
            if not (prev_kind == TEXT and is_blank(prev)) and needs_blank_line(prev_kind, prev, kind, line):
                out_lines.append("")
                out_kinds.append(TEXT)
        out_lines.append(line)
        out_kinds.append(kind)
    return out_lines, out_kinds


def fix_blockquote_marker(line: str) -> str:
    """Ensure a space follows the ">" run, keeping its nesting depth."""
    return BLOCKQUOTE_MARKER_RE.sub(r"\1\2 ", line, count=1)
