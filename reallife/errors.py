"""Exceptions raised by the simulation core and its driver."""

from __future__ import annotations


class ReallifeError(Exception):
    """Base class for all simulation errors."""


class InvalidStateError(ReallifeError):
    """A core invariant was violated mid-turn.

    Raised when an operation that only makes sense on a Life tile is given
    something else.  Fatal: the turn is abandoned and no partial world is
    returned.
    """


class NoLegalMoveError(ReallifeError):
    """A life tile is already next to its target resource and cannot step.

    Never escapes a turn; the life pass resolves it by foraging in place.
    """


class ConfigError(ReallifeError):
    """A configuration value is out of its allowed range."""
