"""Exceptions raised by the periodicals package."""

from __future__ import annotations


class PeriodicalsError(Exception):
    """Base class for errors raised by this package."""


class RuleConfigError(PeriodicalsError, ValueError):
    """Raised when an anchor text rules document is malformed."""


class IngestError(PeriodicalsError):
    """Raised when supplier content cannot be turned into an edition."""
