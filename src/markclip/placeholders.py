# -*- coding: utf-8 -*-
"""
Template tokenizer.

Splits a template into literal runs, escaped braces (``\\{`` / ``\\}``) and
placeholder expressions ``{name}`` / ``{name:modifier}``.
"""
import re
from dataclasses import dataclass

LITERAL = "literal"
ESCAPED = "escaped"
PLACEHOLDER = "placeholder"

# Placeholder names cannot contain whitespace, braces, colons or backslashes
NAME_RE = re.compile(r"[^\s{}:\\]+")


@dataclass(frozen=True)
class Token:
    """One template token."""

    kind: str
    text: str
    name: str = ""
    modifier: str | None = None


def _parse_expression(body: str) -> tuple[str, str | None] | None:
    name, sep, modifier = body.partition(":")
    if not NAME_RE.fullmatch(name):
        return None
    return name, (modifier if sep else None)


def scan_placeholders(template: str) -> list[Token]:
    """
    Tokenize ``template``.

    Adjacent literal characters are merged into one literal token. A ``{``
    with no closing ``}`` before the next ``{``, or whose content is not a
    valid expression, is kept as literal text.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush():
        if literal:
            tokens.append(Token(LITERAL, "".join(literal)))
            literal.clear()

    position = 0
    length = len(template)
    while position < length:
        char = template[position]

        if char == "\\" and position + 1 < length and template[position + 1] in "{}":
            flush()
            tokens.append(Token(ESCAPED, template[position + 1]))
            position += 2
            continue

        if char == "{":
            end = template.find("}", position + 1)
            nested = template.find("{", position + 1)
            if end != -1 and (nested == -1 or nested > end):
                expression = _parse_expression(template[position + 1:end])
                if expression is not None:
                    flush()
                    name, modifier = expression
                    tokens.append(
                        Token(PLACEHOLDER, template[position:end + 1], name=name, modifier=modifier)
                    )
                    position = end + 1
                    continue

        literal.append(char)
        position += 1

    flush()
    return tokens


def template_variables(template: str) -> list[str]:
    """Distinct placeholder expressions in order of first appearance."""
    seen: list[str] = []
    for token in scan_placeholders(template or ""):
        if token.kind == PLACEHOLDER and token.text not in seen:
            seen.append(token.text)
    return seen
