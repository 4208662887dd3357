"""Exceptions raised by the gate.

A pull request that simply lacks approvals is not an error; it is a failed
GateResult. These exceptions cover the conditions that stop the gate before
it can compare counts.
"""

from __future__ import annotations


class GateError(Exception):
    """Base class for fatal gate errors."""


class ConfigError(GateError):
    """Required configuration is missing or invalid."""


class UnsupportedEventError(GateError):
    """The workflow was triggered by an event that carries no pull request."""


class ChangesRequestedError(GateError):
    """GitHub's aggregate review decision is CHANGES_REQUESTED."""
