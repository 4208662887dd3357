from __future__ import annotations

import logging

from github import Auth, Github, GithubException

from reviewgate_core.errors import GateError
from reviewgate_core.models import Label, PullRequestRef, PullRequestSnapshot, ReviewDecision, ReviewEvent

logger = logging.getLogger(__name__)

# Only the most recent reviews and the first labels are fetched. Anything
# beyond these windows is invisible to the gate.
REVIEW_WINDOW = 20
LABEL_WINDOW = 20

PULL_REQUEST_QUERY = """
query($owner: String!, $name: String!, $number: Int!, $reviewWindow: Int!, $labelWindow: Int!) {
  repository(name: $name, owner: $owner) {
    pullRequest(number: $number) {
      reviewDecision
      reviews(last: $reviewWindow) {
        nodes {
          author {
            login
          }
          state
          submittedAt
        }
      }
      labels(first: $labelWindow) {
        nodes {
          name
        }
      }
    }
  }
}
"""


def get_client(token: str) -> Github:
    return Github(auth=Auth.Token(token))


def parse_pull_request(payload: dict) -> PullRequestSnapshot:
    """Build a snapshot from the ``pullRequest`` object of the GraphQL response."""
    decision = payload.get("reviewDecision")
    return PullRequestSnapshot(
        decision=ReviewDecision(decision) if decision else None,
        reviews=[ReviewEvent.from_node(node) for node in (payload.get("reviews") or {}).get("nodes") or []],
        labels=[Label.from_node(node) for node in (payload.get("labels") or {}).get("nodes") or []],
    )


def fetch_pull_request(client: Github, ref: PullRequestRef) -> PullRequestSnapshot:
    """Fetch the review decision, recent reviews and labels of a pull request."""
    variables = {
        "owner": ref.owner,
        "name": ref.name,
        "number": ref.number,
        "reviewWindow": REVIEW_WINDOW,
        "labelWindow": LABEL_WINDOW,
    }
    try:
        _, response = client.requester.graphql_query(PULL_REQUEST_QUERY, variables)
    except GithubException as e:
        raise GateError(f"Could not fetch {ref}: {e}") from e

    repository = (response.get("data") or {}).get("repository") or {}
    payload = repository.get("pullRequest")
    if payload is None:
        raise GateError(f"Pull request {ref} was not found")

    snapshot = parse_pull_request(payload)
    logger.debug(
        "Fetched %s: decision=%s, %d review(s), %d label(s)",
        ref,
        snapshot.decision.value if snapshot.decision else None,
        len(snapshot.reviews),
        len(snapshot.labels),
    )
    if len(snapshot.reviews) >= REVIEW_WINDOW:
        logger.debug("Only the last %d reviews of %s were considered", REVIEW_WINDOW, ref)
    if len(snapshot.labels) >= LABEL_WINDOW:
        logger.debug("Only the first %d labels of %s were considered", LABEL_WINDOW, ref)
    return snapshot
