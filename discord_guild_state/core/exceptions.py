"""Custom exceptions for discord-guild-state."""

from __future__ import annotations


class GuildStateError(Exception):
    """Base exception for all discord-guild-state errors.

    The entity models never raise on payload shape; these errors come from
    the surfaces that read payload documents.
    """


class PayloadError(GuildStateError):
    """Raised when a payload document is not a JSON object."""
