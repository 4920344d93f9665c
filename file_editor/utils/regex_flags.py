"""Regular expression helpers for pattern substitution.

Flags are given as characters, e.g. "gi":
- g: replace every match (otherwise only the first)
- i: re.IGNORECASE
- m: re.MULTILINE
- s: re.DOTALL
- x: re.VERBOSE
- u, d: accepted, no effect (str patterns are Unicode, spans are always known)

Replacement templates use "$" tokens: $& (whole match), $1..$99 (groups),
$<name> (named group), $` (text before), $' (text after), $$ (a "$").
Any other character, backslashes included, is copied literally.
"""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

from file_editor.exceptions import PatternError

DEFAULT_FLAGS = "g"

_FLAG_MAP: dict[str, int] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
    "d": 0,
}


class CompiledPattern(NamedTuple):
    regex: re.Pattern[str]
    is_global: bool


def compile_pattern(pattern: str, flags: str | None = DEFAULT_FLAGS) -> CompiledPattern:
    """Compile `pattern` with flag characters; raises PatternError when invalid."""
    flags = DEFAULT_FLAGS if flags is None else flags
    re_flags = 0
    is_global = False
    seen: set[str] = set()
    for ch in flags:
        if ch in seen:
            raise PatternError(f"Duplicate regex flag '{ch}' in '{flags}'")
        seen.add(ch)
        if ch == "g":
            is_global = True
        elif ch in _FLAG_MAP:
            re_flags |= _FLAG_MAP[ch]
        else:
            raise PatternError(f"Unsupported regex flag '{ch}' in '{flags}'")
    try:
        regex = re.compile(pattern, re_flags)
    except re.error as e:
        raise PatternError(f"Invalid regular expression '{pattern}': {e}")
    return CompiledPattern(regex, is_global)


def count_matches(compiled: CompiledPattern, content: str) -> int:
    """Count the matches a replace would substitute in `content`."""
    if not compiled.is_global:
        return 1 if compiled.regex.search(content) else 0
    return sum(1 for _ in compiled.regex.finditer(content))


def expand_template(
    regex: re.Pattern[str], template: str
) -> Callable[[re.Match[str]], str]:
    """Turn a "$"-style template into a callable usable with re.sub."""
    group_count = regex.groups
    has_named = bool(regex.groupindex)
    # each part is either a literal string or a callable taking the match
    parts: list[str | Callable[[re.Match[str]], str]] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            parts.append("".join(literal))
            literal.clear()

    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch != "$" or i + 1 >= n:
            literal.append(ch)
            i += 1
            continue
        nxt = template[i + 1]
        if nxt == "$":
            literal.append("$")
            i += 2
        elif nxt == "&":
            flush()
            parts.append(lambda m: m.group(0))
            i += 2
        elif nxt == "`":
            flush()
            parts.append(lambda m: m.string[: m.start()])
            i += 2
        elif nxt == "'":
            flush()
            parts.append(lambda m: m.string[m.end() :])
            i += 2
        elif nxt == "<" and has_named and ">" in template[i + 2 :]:
            close = template.index(">", i + 2)
            name = template[i + 2 : close]
            flush()
            if name in regex.groupindex:
                parts.append(lambda m, name=name: m.group(name) or "")
            i = close + 1
        elif nxt.isdigit():
            two = template[i + 1 : i + 3]
            if len(two) == 2 and two.isdigit() and 1 <= int(two) <= group_count:
                index, width = int(two), 2
            elif 1 <= int(nxt) <= group_count:
                index, width = int(nxt), 1
            else:
                literal.append(ch)
                i += 1
                continue
            flush()
            parts.append(lambda m, index=index: m.group(index) or "")
            i += 1 + width
        else:
            literal.append(ch)
            i += 1
    flush()

    def render(match: re.Match[str]) -> str:
        return "".join(p if isinstance(p, str) else p(match) for p in parts)

    return render


def substitute(compiled: CompiledPattern, template: str, content: str) -> str:
    count = 0 if compiled.is_global else 1
    return compiled.regex.sub(
        expand_template(compiled.regex, template), content, count=count
    )
