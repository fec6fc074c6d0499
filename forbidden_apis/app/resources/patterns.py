"""
Ant-style path patterns.

    **      any number of directories (including none)
    *       any run of characters within one path segment
    ?       exactly one character within one path segment

Paths are matched in their relative, '/'-separated form. A pattern ending
in '/' is shorthand for '<pattern>/**'.
"""

from __future__ import annotations

import functools
import re
from typing import Iterable


def _translate_segment(segment: str) -> str:
    out = []
    for ch in segment:
        if ch == "*":
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> "re.Pattern[str]":
    pattern = pattern.replace("\\", "/").lstrip("/")
    if pattern.endswith("/"):
        pattern += "**"

    segments = pattern.split("/")
    regex = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            regex.append(".*" if last else "(?:[^/]*/)*")
        else:
            regex.append(_translate_segment(segment))
            if not last:
                regex.append("/")

    return re.compile("".join(regex) + r"\Z")


def match_path(path: str, pattern: str) -> bool:
    return compile_pattern(pattern).match(path) is not None


def is_selected(path: str, includes: Iterable[str], excludes: Iterable[str]) -> bool:
    if not any(match_path(path, p) for p in includes):
        return False
    return not any(match_path(path, p) for p in excludes)
