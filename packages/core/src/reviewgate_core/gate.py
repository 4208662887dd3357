"""Approval gate: compare active approvals with the label-derived threshold."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from reviewgate_core.approvals import count_active_approvals
from reviewgate_core.errors import ChangesRequestedError
from reviewgate_core.models import PullRequestRef, PullRequestSnapshot, ReviewDecision, ThresholdConfig
from reviewgate_core.threshold import resolve_threshold

logger = logging.getLogger(__name__)


@dataclass
class GateResult:
    """Outcome of one gate evaluation.

    A shortfall is reported here with ``passed=False``; it is the expected
    steady state while a pull request waits for reviews, not an error.
    """

    passed: bool
    approvals: int
    threshold: int
    warnings: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.passed:
            return f"Received {self.approvals}/{self.threshold} approvals"
        return f"Only {self.approvals} reviewer(s) have approved but {self.threshold} are required"


def evaluate(snapshot: PullRequestSnapshot, config: ThresholdConfig) -> GateResult:
    """Decide whether a pull request has enough approvals.

    Raises ChangesRequestedError, before the threshold is computed, when
    GitHub's aggregate decision is CHANGES_REQUESTED.
    """
    if snapshot.decision is ReviewDecision.CHANGES_REQUESTED:
        raise ChangesRequestedError('The pull request is in a "Changes requested" state and cannot be merged')

    threshold = resolve_threshold(snapshot.labels, config.label_prefix, config.default_threshold)
    approvals = count_active_approvals(snapshot.reviews)

    # Both situations are allowed, but they are rarely intentional.
    warnings = []
    if threshold < 1:
        warnings.append(f"Approval threshold ({threshold}) is less than 1. Is this intentional?")
    if threshold < config.default_threshold:
        warnings.append(
            f"Approval threshold ({threshold}) is less than the configured default "
            f"({config.default_threshold}). Is this intentional?"
        )
    for warning in warnings:
        logger.warning(warning)

    return GateResult(passed=approvals >= threshold, approvals=approvals, threshold=threshold, warnings=warnings)


def run_gate(
    ref: PullRequestRef,
    config: ThresholdConfig,
    fetch: Callable[[PullRequestRef], PullRequestSnapshot],
) -> GateResult:
    """Fetch ``ref`` with ``fetch`` and evaluate it against ``config``."""
    snapshot = fetch(ref)
    result = evaluate(snapshot, config)
    logger.info("%s: %s", ref, result.message)
    return result
