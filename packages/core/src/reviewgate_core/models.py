"""Pull request data models.

Constructed fresh from upstream GraphQL nodes on every run and discarded once
the gate has decided. Nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

GHOST_LOGIN = "ghost"


class ReviewState(str, Enum):
    """State of a single submitted review, using GitHub's GraphQL names."""

    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    DISMISSED = "DISMISSED"
    COMMENTED = "COMMENTED"
    PENDING = "PENDING"

    @property
    def overrides(self) -> bool:
        """True when a review in this state replaces the reviewer's earlier verdict."""
        return self in _OVERRIDING_STATES


_OVERRIDING_STATES = frozenset({ReviewState.APPROVED, ReviewState.CHANGES_REQUESTED, ReviewState.DISMISSED})


class ReviewDecision(str, Enum):
    """Aggregate review decision computed by GitHub from branch protection."""

    REVIEW_REQUIRED = "REVIEW_REQUIRED"
    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"


@dataclass(frozen=True)
class ReviewEvent:
    reviewer: str
    state: ReviewState
    submitted_at: str  # ISO-8601 UTC, compared as a string

    @classmethod
    def from_node(cls, node: dict) -> ReviewEvent:
        # Deleted accounts come back with a null author.
        author = node.get("author") or {}
        return cls(
            reviewer=author.get("login") or GHOST_LOGIN,
            state=ReviewState(node["state"]),
            submitted_at=node.get("submittedAt") or "",
        )


@dataclass(frozen=True)
class Label:
    name: str

    @classmethod
    def from_node(cls, node: dict) -> Label:
        return cls(name=node["name"])


@dataclass(frozen=True)
class ThresholdConfig:
    """Validated gate settings: the label prefix and the fallback threshold."""

    label_prefix: str
    default_threshold: int


@dataclass(frozen=True)
class PullRequestRef:
    owner: str
    name: str
    number: int

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return f"{self.slug}#{self.number}"


@dataclass
class PullRequestSnapshot:
    """Review decision, review window and label window of one pull request.

    ``reviews`` holds at most the most recent REVIEW_WINDOW reviews and
    ``labels`` at most the first LABEL_WINDOW labels (see gh.pull_request).
    """

    decision: ReviewDecision | None
    reviews: list[ReviewEvent] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)
