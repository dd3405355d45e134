"""Regular expressions with JavaScript ``RegExp`` matching semantics.

Patterns in form documents are written for the browser: the generated zod
source passes them to ``new RegExp(...)`` unchanged. Python's ``re`` reads
a few tokens differently, so patterns are rewritten before compiling:

- ``$`` becomes ``(?!\\n)$``; Python's ``$`` also matches before a final
  newline, JavaScript's only at the very end
- ``\\d`` and ``\\w`` (and ``\\D``/``\\W`` outside a class) are ASCII-only
  in JavaScript
- ``[]`` and ``[^]`` are the empty and the match-anything class

The emitted JavaScript keeps the author's pattern text.
"""

from __future__ import annotations

import re
from functools import lru_cache

_OUTSIDE_CLASS = {
    "$": r"(?!\n)$",
    r"\d": "[0-9]",
    r"\D": "[^0-9]",
    r"\w": "[A-Za-z0-9_]",
    r"\W": "[^A-Za-z0-9_]",
}
_INSIDE_CLASS = {
    r"\d": "0-9",
    r"\w": "A-Za-z0-9_",
}


def to_python_pattern(pattern: str) -> str:
    """Rewrite a JavaScript pattern so ``re`` matches the same strings."""
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            token = pattern[i : i + 2]
            table = _INSIDE_CLASS if in_class else _OUTSIDE_CLASS
            out.append(table.get(token, token))
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            # In JavaScript "[]" matches nothing and "[^]" matches anything
            if pattern.startswith("[]", i):
                out.append("(?!)")
                i += 2
                continue
            if pattern.startswith("[^]", i):
                out.append(r"[\s\S]")
                i += 3
                continue
            in_class = True
            out.append(char)
            i += 1
            if pattern[i : i + 1] == "^":
                out.append("^")
                i += 1
            continue
        elif char == "$":
            out.append(_OUTSIDE_CLASS["$"])
            i += 1
            continue
        out.append(char)
        i += 1
    return "".join(out)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile *pattern* with JavaScript matching semantics.

    Raises:
        re.error: if the pattern is not a valid regular expression.
    """
    return re.compile(to_python_pattern(pattern))


def pattern_matches(pattern: str, value: str) -> bool:
    """Equivalent of ``new RegExp(pattern).test(value)``."""
    return compile_pattern(pattern).search(value) is not None
