# -*- coding: utf-8 -*-
"""
HTML entity and punctuation decoding.

Only the fixed table below is decoded; unknown entities are left as-is.
"""
import re

ENTITY_MAP = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&apos;": "'",
    "&#39;": "'",
    "&#x27;": "'",
    "&#34;": '"',
    "&#x22;": '"',
    "&#x2F;": "/",
    "&#x2f;": "/",
    "&#47;": "/",
    "&#x60;": "`",
    "&#96;": "`",
    "&#x3D;": "=",
    "&#x3d;": "=",
    "&#61;": "=",
    "&nbsp;": " ",
    "&#160;": " ",
    "&#xA0;": " ",
    "&#xa0;": " ",
    "&mdash;": "—",
    "&ndash;": "–",
    "&hellip;": "…",
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&laquo;": "«",
    "&raquo;": "»",
    "&bull;": "•",
    "&middot;": "·",
    "&copy;": "©",
    "&reg;": "®",
    "&trade;": "™",
}

# Unicode variants decoded alongside the entities
PUNCTUATION_MAP = {
    "\u00a0": " ",  # no-break space
    "\u202f": " ",  # narrow no-break space
    "\u2007": " ",  # figure space
}

ENTITY_RE = re.compile(r"&(?:[A-Za-z]+|#\d+|#[xX][0-9A-Fa-f]+);")
PUNCTUATION_RE = re.compile("[" + "".join(PUNCTUATION_MAP) + "]")

# Inline code spans: a backtick run closed by a run of the same length
INLINE_CODE_RE = re.compile(r"(`+)(?!`).*?(?<!`)\1(?!`)")


def decode_entities(text: str) -> str:
    """Decode known entities and punctuation variants in ``text``."""
    text = ENTITY_RE.sub(lambda m: ENTITY_MAP.get(m.group(0), m.group(0)), text)
    return PUNCTUATION_RE.sub(lambda m: PUNCTUATION_MAP[m.group(0)], text)


def outside_inline_code(line: str, func) -> str:
    """Apply ``func`` to the parts of ``line`` that are not inline code spans."""
    parts = []
    position = 0
    for match in INLINE_CODE_RE.finditer(line):
        parts.append(func(line[position:match.start()]))
        parts.append(match.group(0))
        position = match.end()
    parts.append(func(line[position:]))
    return "".join(parts)


def decode_line(line: str) -> str:
    return outside_inline_code(line, decode_entities)
