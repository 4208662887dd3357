"""Count the reviewers who currently approve a pull request."""

from __future__ import annotations

from typing import Iterable

from reviewgate_core.models import ReviewEvent, ReviewState


def effective_states(reviews: Iterable[ReviewEvent]) -> dict[str, ReviewState]:
    """Return each reviewer's effective state, keyed by reviewer login.

    The effective state is the state of the reviewer's newest approval,
    rejection or dismissal. Comments and pending reviews never change it, even
    when they are newer, and a reviewer who has only commented has no entry.

    Reviews are expected in submission order but that is not relied upon: a
    review replaces the recorded one only when its timestamp is strictly
    greater. On a tie the review seen first is kept.
    """
    latest: dict[str, tuple[str, ReviewState]] = {}
    for review in reviews:
        if not review.state.overrides:
            continue
        previous = latest.get(review.reviewer)
        if previous is None or review.submitted_at > previous[0]:
            latest[review.reviewer] = (review.submitted_at, review.state)
    return {reviewer: state for reviewer, (_, state) in latest.items()}


def count_active_approvals(reviews: Iterable[ReviewEvent]) -> int:
    """Return the number of distinct reviewers whose effective state is APPROVED.

    Only reviewers are counted, not reviews: several approvals from the same
    login count once, and an approval followed by requested changes or a
    dismissal does not count at all.
    """
    return sum(1 for state in effective_states(reviews).values() if state is ReviewState.APPROVED)
