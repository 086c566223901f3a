"""Glob-based exclusion of diff records by file path.

Patterns follow the usual ``**`` conventions: ``*`` and ``?`` stay inside one
path segment, ``**`` spans any number of segments (including none), ``{a,b}``
expands to alternatives and leading dots need no special treatment.
Matching is case-sensitive.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from diff_annotator.core.domain.review.raw_comment import RawComment

FILES_IGNORED_BY_DEFAULT: tuple[str, ...] = (
    "**/node_modules/**",
    "**/package-lock.json",
    "**/yarn.lock",
    ".cache/**",
    "**/*.{jpg,jpeg,png,svg,webp,avif,gif,ico,woff,woff2,ttf,otf}",
)

_BRACE = re.compile(r"\{([^{}]*,[^{}]*)\}")


def build_ignore_list(files_to_ignore: str, defaults: Iterable[str] = FILES_IGNORED_BY_DEFAULT) -> list[str]:
    """Split a ``;``-separated list, drop blanks, append the defaults and de-duplicate."""
    patterns = [item.strip() for item in files_to_ignore.split(";")]
    merged = [p for p in patterns if p] + list(defaults)
    return list(dict.fromkeys(merged))


def expand_braces(pattern: str) -> list[str]:
    match = _BRACE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    alternatives = [_translate(p) for p in expand_braces(pattern)]
    return re.compile("|".join(f"(?:{a})" for a in alternatives))


def is_ignored(path: str, patterns: Iterable[str]) -> bool:
    return any(compile_glob(pattern).fullmatch(path) for pattern in patterns)


def filter_comments(comments: Iterable[RawComment], patterns: Iterable[str]) -> list[RawComment]:
    patterns = tuple(patterns)
    return [comment for comment in comments if not is_ignored(comment.path, patterns)]


def _translate(pattern: str) -> str:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            out.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        elif pattern[i] == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape("["))
                i += 1
            else:
                body = pattern[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append(f"[{body}]")
                i = end + 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return "".join(out)
