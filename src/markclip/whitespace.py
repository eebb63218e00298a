# -*- coding: utf-8 -*-
"""
Quote and whitespace normalization.
"""
import re

from .fences import TEXT

QUOTE_MAP = {
    "\u201c": '"',  # left double quotation mark
    "\u201d": '"',  # right double quotation mark
    "\u201e": '"',  # double low-9 quotation mark
    "\u201f": '"',  # double high-reversed-9 quotation mark
    "\u2018": "'",  # left single quotation mark
    "\u2019": "'",  # right single quotation mark
    "\u201a": "'",  # single low-9 quotation mark
    "\u201b": "'",  # single high-reversed-9 quotation mark
}

# Zero-width space, non-joiner, joiner, word joiner, byte order mark
INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")

QUOTE_RE = re.compile("[" + "".join(QUOTE_MAP) + "]")
LINE_ENDING_RE = re.compile(r"\r\n?")


def normalize_line_endings(text: str) -> str:
    return LINE_ENDING_RE.sub("\n", text)


def strip_invisible(text: str) -> str:
    return INVISIBLE_RE.sub("", text)


def straighten_quotes(text: str) -> str:
    return QUOTE_RE.sub(lambda m: QUOTE_MAP[m.group(0)], text)


def collapse_whitespace(lines: list[str], kinds: list[str]) -> list[str]:
    """
    Tidy the line list outside code regions.

    Strips trailing whitespace, collapses runs of blank lines to one and drops
    leading and trailing blank lines. Code lines are kept verbatim.
    """
    result: list[str] = []
    previous_blank = False
    for line, kind in zip(lines, kinds):
        if kind != TEXT:
            result.append(line)
            previous_blank = False
            continue

        line = line.rstrip()
        if not line:
            if previous_blank or not result:
                continue
            previous_blank = True
        else:
            previous_blank = False
        result.append(line)

    while result and not result[-1].strip():
        result.pop()
    return result
