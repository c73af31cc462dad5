"""Strip honorific prefixes from name lines and split first/last name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..utils.prefixes import SORTED_NAME_PREFIXES

INVALID_NAME = "สอบถามชื่อใหม่"

# Whitespace as browsers define it: includes U+FEFF, excludes U+001C..U+001F and U+0085
WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

EDGE_WHITESPACE_PATTERN = re.compile(f"^[{WHITESPACE}]+|[{WHITESPACE}]+\\Z")
WHITESPACE_RUN_PATTERN = re.compile(f"[{WHITESPACE}]+")

# Latin letters, Thai block (ก..๙), whitespace, period, apostrophe, hyphen
ALLOWED_NAME_PATTERN = re.compile(f"[a-zA-Zก-๙{WHITESPACE}.'\\-]+")


def trim(text: str) -> str:
    return EDGE_WHITESPACE_PATTERN.sub("", text)


def split_tokens(text: str) -> List[str]:
    return [token for token in WHITESPACE_RUN_PATTERN.split(trim(text)) if token]


@dataclass(frozen=True)
class ParsedName:
    first: str
    last: str

    @property
    def is_blank(self) -> bool:
        return not self.first and not self.last

    @property
    def is_invalid(self) -> bool:
        return self.first == INVALID_NAME and not self.last


def compile_prefix_patterns(prefixes: Sequence[str]) -> Tuple[re.Pattern[str], ...]:
    """Anchored, case-insensitive pattern per prefix, swallowing trailing whitespace."""
    return tuple(re.compile(rf"^{re.escape(prefix)}[{WHITESPACE}]*", re.IGNORECASE) for prefix in prefixes)


PREFIX_PATTERNS: Tuple[re.Pattern[str], ...] = compile_prefix_patterns(SORTED_NAME_PREFIXES)


def strip_prefixes(text: str, patterns: Sequence[re.Pattern[str]] = PREFIX_PATTERNS) -> str:
    """Remove leading prefixes until none match.

    After each removal the scan restarts from the longest prefix, so stacked
    titles such as a rank followed by an honorific are removed one by one.
    """
    while True:
        for pattern in patterns:
            match = pattern.match(text)
            if match:
                text = text[match.end():]
                break
        else:
            return text


def parse_name(line: str) -> ParsedName:
    """Parse one raw line into a first and last name.

    Lines with characters outside Thai/Latin letters, whitespace and ``.'-``
    yield ``ParsedName(INVALID_NAME, "")``; blank lines yield two empty fields.
    """
    clean = trim(line or "")
    if not clean:
        return ParsedName("", "")

    if not ALLOWED_NAME_PATTERN.fullmatch(clean):
        return ParsedName(INVALID_NAME, "")

    clean = strip_prefixes(clean)
    clean = clean.replace(".", " ").replace("'", "")

    parts = split_tokens(clean)
    if not parts:
        return ParsedName("", "")
    return ParsedName(parts[0], " ".join(parts[1:]))
