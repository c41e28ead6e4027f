"""Checks and transformations on bracket strings."""

from __future__ import annotations

_OPENERS = "({["
_MATCHING = {")": "(", "}": "{", "]": "["}


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive group in ``s``."""
    depth = 0
    kept: list[str] = []
    for ch in s:
        if ch == ")":
            depth -= 1
        if depth != 0:
            kept.append(ch)
        if ch == "(":
            depth += 1
    return "".join(kept)


def max_depth(s: str) -> int:
    """Return the deepest nesting of round parentheses in ``s``."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def is_valid(s: str) -> bool:
    """Return True when every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the innermost
    open one; only the three closing brackets must match its kind.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = stack.pop()
        if ch in _MATCHING and _MATCHING[ch] != opener:
            return False
    return not stack


def check_valid_string(s: str) -> bool:
    """Return True when ``s`` can be balanced, each ``*`` standing for
    ``(``, ``)`` or nothing."""
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low = max(low - 1, 0)
            high -= 1
        else:
            low = max(low - 1, 0)
            high += 1
        if high < 0:
            return False
    return low == 0