"""Error types raised by the draft engine, scoring and event store."""

from typing import Any, Dict


class DraftError(Exception):
    """Base class for expected, recoverable draft errors.

    Each subclass carries an ``error_type`` string that the tool layer
    reports back to callers alongside the message.
    """

    error_type = "draft_error"

    def to_dict(self) -> Dict[str, Any]:
        """Error result in the shape returned by the tool layer."""
        return {
            "success": False,
            "error": str(self),
            "error_type": self.error_type,
        }


class NotFoundError(DraftError):
    """Raised when an event, player or team does not exist."""

    error_type = "not_found"


class InvalidStateError(DraftError):
    """Raised when an operation is not allowed in the event's current state."""

    error_type = "invalid_state"


class DraftValidationError(DraftError):
    """Raised for malformed input such as duplicate teams or out-of-range slots."""

    error_type = "validation"


class ConflictError(DraftError):
    """Raised when a player is already drafted or a draft already exists."""

    error_type = "conflict"


class ForbiddenError(DraftError):
    """Raised when the requester may not perform the operation."""

    error_type = "forbidden"


class DraftInvariantError(RuntimeError):
    """Raised when recorded picks disagree with the draft progression.

    This signals a programming error rather than bad input. It is not a
    DraftError, so the tool layer never turns it into an error dict.
    """

    pass
