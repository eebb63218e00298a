# -*- coding: utf-8 -*-
"""
Fenced code block tracking.

Classifies every line of a document as plain text, a fence boundary, or code
content, so normalization rules can leave verbatim code regions untouched.
"""
import re
from bisect import bisect_right
from collections import defaultdict

# A fence is a run of at least 3 backticks or tildes, optionally indented and
# optionally followed by an info string.
FENCE_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")

TEXT = "text"
OPEN = "open"
CLOSE = "close"
CODE = "code"


def parse_fence(line: str) -> tuple[str, int, str] | None:
    """
    Parse a fence line.

    Returns:
        (marker character, run length, info string) or None if the line is not a fence.
    """
    match = FENCE_RE.match(line)
    if not match:
        return None
    run, info = match.group(1), match.group(2)
    # Backtick fences cannot carry backticks in their info string
    if run[0] == "`" and "`" in info:
        return None
    return run[0], len(run), info.strip()


class FenceTracker:
    """
    Two-state automaton (outside code / inside code) keyed by fence marker.

    Inside a fence, a bare fence line of the same character closes the
    innermost level when it has the same length. A strictly longer bare run
    opens a nested level when a partner of that exact length follows later,
    otherwise it closes the innermost level ("at least as long" rule).
    """

    def __init__(self, lines: list[str]):
        self._lines = lines
        self._stack: list[tuple[str, int]] = []
        # (char, length) -> sorted indices of bare fence lines
        self._bare_fences: dict[tuple[str, int], list[int]] = defaultdict(list)
        for index, line in enumerate(lines):
            fence = parse_fence(line)
            if fence and not fence[2]:
                self._bare_fences[(fence[0], fence[1])].append(index)

    @property
    def in_fence(self) -> bool:
        return bool(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _has_partner(self, index: int, char: str, length: int) -> bool:
        positions = self._bare_fences.get((char, length), [])
        return bisect_right(positions, index) < len(positions)

    def feed(self, index: int) -> str:
        """Advance over line ``index`` and return its kind."""
        fence = parse_fence(self._lines[index])

        if not self._stack:
            if fence:
                self._stack.append((fence[0], fence[1]))
                return OPEN
            return TEXT

        if fence is None or fence[2]:
            return CODE

        char, length, _info = fence
        top_char, top_length = self._stack[-1]
        if char != top_char or length < top_length:
            return CODE

        if length > top_length and self._has_partner(index, char, length):
            self._stack.append((char, length))
            return CODE

        self._stack.pop()
        return CLOSE if not self._stack else CODE


def classify_lines(lines: list[str]) -> list[str]:
    """Return the kind (text, open, close, code) of each line."""
    tracker = FenceTracker(lines)
    return [tracker.feed(index) for index in range(len(lines))]
