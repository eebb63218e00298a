# -*- coding: utf-8 -*-
"""
Content-safety filtering for values substituted into templates.
"""
import re

SCRIPT_BLOCK_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
STYLE_BLOCK_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
SCRIPT_URI_RE = re.compile(r"(?:javascript|vbscript)\s*:", re.IGNORECASE)
EVENT_HANDLER_RE = re.compile(r"""\bon\w+\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
# Unquoted handlers are only recognized inside a tag ("<a onclick=x()>")
TAG_EVENT_HANDLER_RE = re.compile(r"""(<[A-Za-z][^>]*?)\s+on\w+\s*=\s*[^\s>"']+""", re.IGNORECASE)

# Removing one match can join its neighbours into a new one
MAX_PASSES = 10


def _strip_once(value: str) -> str:
    value = SCRIPT_BLOCK_RE.sub("", value)
    value = STYLE_BLOCK_RE.sub("", value)
    value = SCRIPT_URI_RE.sub("", value)
    value = EVENT_HANDLER_RE.sub("", value)
    return TAG_EVENT_HANDLER_RE.sub(r"\1", value)


def sanitize_value(value: str) -> str:
    """Remove script/style blocks, script URI schemes and inline event handlers."""
    if not value:
        return value
    for _ in range(MAX_PASSES):
        cleaned = _strip_once(value)
        if cleaned == value:
            break
        value = cleaned
    return value
