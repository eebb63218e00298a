# -*- coding: utf-8 -*-
"""
Case and format transforms for ``{name:transform}`` placeholders.
"""
import re
from typing import Callable

_SPACE_THEN_CHAR_RE = re.compile(r" .")
_WHITESPACE_RE = re.compile(r"\s")
_DASH_RUN_RE = re.compile(r"-{2,}")


def _capitalize_words(value: str) -> str:
    # " x" -> "X"; inner characters keep their case
    return _SPACE_THEN_CHAR_RE.sub(lambda m: m.group(0).strip().upper(), value)


def to_camel(value: str) -> str:
    joined = _capitalize_words(value)
    return joined[:1].lower() + joined[1:]


def to_pascal(value: str) -> str:
    joined = _capitalize_words(value)
    return joined[:1].upper() + joined[1:]


def to_obsidian_cal(value: str) -> str:
    """Whitespace becomes "-" and dash runs collapse to a single dash."""
    return _DASH_RUN_RE.sub("-", _WHITESPACE_RE.sub("-", value))


TRANSFORMS: dict[str, Callable[[str], str]] = {
    "lower": str.lower,
    "upper": str.upper,
    "kebab": lambda value: value.replace(" ", "-").lower(),
    "mixed-kebab": lambda value: value.replace(" ", "-"),
    "snake": lambda value: value.replace(" ", "_").lower(),
    "mixed_snake": lambda value: value.replace(" ", "_"),
    "camel": to_camel,
    "pascal": to_pascal,
    "obsidian-cal": to_obsidian_cal,
}


def apply_transform(name: str, value: str) -> str | None:
    """Apply transform ``name`` to ``value``; None when the transform is unknown."""
    transform = TRANSFORMS.get(name)
    if transform is None:
        return None
    return transform(value)
