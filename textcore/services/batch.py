"""Line-oriented batch driver shared by the name and phone tools.

Input text is split on newlines and capped at ``max_lines`` lines; each line
is transformed on its own, in order, and the survivors are joined back with
newlines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, TypeVar

from ..clients.logging import get_logger, log_batch
from ..config.config_loader import get_runtime_config
from ..utils.timing import timed
from .name_parser import ParsedName, parse_name
from .phone_normalizer import INVALID_PHONE, normalize_phone

logger = get_logger(__name__)

DEFAULT_MAX_LINES = 200

T = TypeVar("T")


@dataclass(frozen=True)
class NameBatch:
    first_names: str
    last_names: str


def split_lines(text: str, max_lines: int = DEFAULT_MAX_LINES) -> List[str]:
    """Split on ``\\n`` and keep the first ``max_lines`` lines; the rest are ignored."""
    _check_max_lines(max_lines)
    if not text:
        return []
    return text.split("\n")[:max_lines]


def process_lines(
    lines: Iterable[str],
    transform: Callable[[str], T],
    keep: Callable[[T], bool],
) -> List[T]:
    """Transform each line in order, keeping results that pass ``keep``."""
    return [result for result in map(transform, lines) if keep(result)]


def _check_max_lines(max_lines: int) -> None:
    if max_lines < 1:
        raise ValueError(f"max_lines must be at least 1, got {max_lines}")


def _resolve_max_lines(max_lines: Optional[int]) -> int:
    if max_lines is not None:
        _check_max_lines(max_lines)
        return max_lines
    return get_runtime_config().processing.max_lines


def parse_names(text: str, max_lines: Optional[int] = None) -> NameBatch:
    """Parse a block of name lines into newline-joined first and last names.

    Lines where both fields come out empty are dropped.
    """
    if not text or not text.strip():
        return NameBatch("", "")

    limit = _resolve_max_lines(max_lines)
    with timed() as watch:
        lines = split_lines(text, limit)
        parsed: List[ParsedName] = process_lines(lines, parse_name, lambda name: not name.is_blank)

    log_batch(
        logger,
        "names",
        line_count=len(lines),
        kept_count=len(parsed),
        duration_ms=watch.elapsed_ms,
        invalid_count=sum(1 for name in parsed if name.is_invalid),
    )
    return NameBatch(
        first_names="\n".join(name.first for name in parsed),
        last_names="\n".join(name.last for name in parsed),
    )


def normalize_phones(text: str, max_lines: Optional[int] = None) -> str:
    """Normalize a block of phone lines.

    Lines without digits are dropped; invalid numbers stay as ``INVALID_PHONE``.
    """
    if not text or not text.strip():
        return ""

    limit = _resolve_max_lines(max_lines)
    with timed() as watch:
        lines = split_lines(text, limit)
        results: List[str] = process_lines(lines, normalize_phone, bool)

    log_batch(
        logger,
        "phones",
        line_count=len(lines),
        kept_count=len(results),
        duration_ms=watch.elapsed_ms,
        invalid_count=results.count(INVALID_PHONE),
    )
    return "\n".join(results)
