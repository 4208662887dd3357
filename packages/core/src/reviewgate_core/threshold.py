"""Resolve the required approval count from pull request labels."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from reviewgate_core.models import Label

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*")


def matching_labels(labels: Iterable[Label], prefix: str) -> list[str]:
    """Return the names of labels starting with ``prefix`` (plain, case-sensitive)."""
    return [label.name for label in labels if label.name.startswith(prefix)]


def parse_suffix(suffix: str) -> int:
    """Parse a label suffix into a reviewer count.

    Anything that is not a base-10 integer, and any value below 1, becomes 0.
    It never falls back to the configured default.
    """
    if not _INTEGER_RE.fullmatch(suffix):
        return 0
    value = int(suffix)
    return value if value >= 1 else 0


def resolve_threshold(labels: Iterable[Label], prefix: str, default_threshold: int) -> int:
    """Determine the number of approvals required for a pull request.

    If no label starts with ``prefix`` the default is returned. Otherwise each
    matching label's suffix is parsed (see parse_suffix) and the largest value
    wins, so a pull request labeled only with invalid suffixes requires 0
    approvals even when the default is higher.
    """
    names = matching_labels(labels, prefix)
    if not names:
        logger.warning("No label matched %r; falling back to default: %d", prefix, default_threshold)
        return default_threshold

    return max(parse_suffix(name[len(prefix) :]) for name in names)
