"""Domain exceptions.

Errors raised at the edges of the collection engine. The query and
aggregation functions themselves are total over loaded data and never
raise; these exceptions cover loading and session lifecycle misuse.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching collection-specific errors at the session layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# State Machine Errors
# ============================================================================


class InvalidStateTransitionError(DomainError):
    """Raised when an invalid state transition is attempted.

    This error indicates that the requested operation cannot be performed
    in the current state of the session.
    """

    def __init__(
        self,
        entity_type: str,
        current_state: str,
        target_state: str,
        allowed_transitions: list[str] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of stateful object (e.g., "CollectionSession").
            current_state: Current state of the object.
            target_state: Attempted target state.
            allowed_transitions: List of allowed target states from current state.
        """
        allowed = allowed_transitions or []
        message = (
            f"Cannot transition {entity_type} "
            f"from '{current_state}' to '{target_state}'. "
            f"Allowed transitions: {allowed}"
        )
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "current_state": current_state,
                "target_state": target_state,
                "allowed_transitions": allowed,
            },
        )


# ============================================================================
# Load Errors
# ============================================================================


class CollectionLoadError(DomainError):
    """Raised when the collection document cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize collection load error.

        Args:
            source: URL or path the collection was loaded from.
            reason: Short description of the underlying failure.
        """
        super().__init__(
            f"Failed to load collection from {source}: {reason}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class CollectionImportError(DomainError):
    """Raised when the CSV export cannot be converted."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize collection import error.

        Args:
            path: Path of the CSV export.
            reason: Short description of the underlying failure.
        """
        super().__init__(
            f"Failed to import {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path
