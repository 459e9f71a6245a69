"""State machines for the collection session.

The session goes through a single load of the collection document.
Queries are only served once the load has succeeded; a failed load is
terminal and can only be retried by starting a new session.
"""

from enum import Enum

from brickfolio.domain.exceptions import InvalidStateTransitionError


# ============================================================================
# Load State Machine
# ============================================================================


class LoadStatus(str, Enum):
    """Collection load lifecycle states.

    State diagram:
        LOADING ──────── error ────────► FAILED
          │
          │ loaded
          ▼
        READY
    """

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

    def can_transition_to(self, target: "LoadStatus") -> bool:
        """Check if transition to target state is valid.

        Args:
            target: Target state to transition to.

        Returns:
            True if transition is valid.
        """
        return target in _LOAD_TRANSITIONS.get(self, set())

    def allowed_transitions(self) -> list["LoadStatus"]:
        """Get list of valid target states.

        Returns:
            List of states that can be transitioned to.
        """
        return sorted(_LOAD_TRANSITIONS.get(self, set()), key=lambda s: s.value)

    def accepts_queries(self) -> bool:
        """Check if queries can be served in this state."""
        return self is LoadStatus.READY


# Load transitions (defined outside enum to avoid Enum restrictions)
_LOAD_TRANSITIONS: dict[LoadStatus, set[LoadStatus]] = {
    LoadStatus.LOADING: {LoadStatus.READY, LoadStatus.FAILED},
    LoadStatus.READY: set(),  # Terminal state
    LoadStatus.FAILED: set(),  # Terminal state, restart the session to retry
}


def validate_load_transition(
    current_status: LoadStatus,
    target_status: LoadStatus,
) -> None:
    """Validate and raise if load state transition is invalid.

    Args:
        current_status: Current load status.
        target_status: Target load status.

    Raises:
        InvalidStateTransitionError: If transition is not valid.
    """
    if not current_status.can_transition_to(target_status):
        raise InvalidStateTransitionError(
            entity_type="CollectionSession",
            current_state=current_status.value,
            target_state=target_status.value,
            allowed_transitions=[s.value for s in current_status.allowed_transitions()],
        )
