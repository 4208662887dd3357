"""Read the pull request that triggered a GitHub Actions run."""

from __future__ import annotations

import json
import os
from pathlib import Path

from reviewgate_core.errors import GateError, UnsupportedEventError
from reviewgate_core.models import PullRequestRef


def read_event(event_name: str | None = None, event_path: str | None = None) -> PullRequestRef:
    """Return the pull request referenced by the current workflow event.

    Defaults to GITHUB_EVENT_NAME and GITHUB_EVENT_PATH. Only ``pull_request*``
    events (pull_request, pull_request_target, pull_request_review, ...) are
    supported; anything else raises UnsupportedEventError.
    """
    event_name = event_name if event_name is not None else os.environ.get("GITHUB_EVENT_NAME", "")
    if not event_name.startswith("pull_request"):
        raise UnsupportedEventError(f"The event type ({event_name or 'unknown'}) is not supported")

    event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise GateError("GITHUB_EVENT_PATH is not set; pass --repo and --pr outside GitHub Actions")

    payload = json.loads(Path(event_path).read_text())
    try:
        repository = payload["repository"]
        return PullRequestRef(
            owner=repository["owner"]["login"],
            name=repository["name"],
            number=int(payload["pull_request"]["number"]),
        )
    except (KeyError, TypeError) as e:
        raise GateError(f"Event payload at {event_path} has no pull request: missing {e}") from e
