"""State machines for domain entities.

Deterministic state machine for a shopper's selection session.
The state machine enforces which operations are valid in each state:
choices are only accepted while the session is interactive, and
finalize is a one-shot terminal action.
"""

from enum import Enum

from app.domain.exceptions import InvalidStateTransitionError


# ============================================================================
# Selection State Machine
# ============================================================================


class SelectionStatus(str, Enum):
    """Selection session lifecycle states.

    State diagram:
        INITIALIZING ──────────────────────────────────► FAILED
          │
          │ load garment
          ▼
        READY
          │
          │ choose design / color / size
          ▼
        SELECTING ◄──┐
          │    └─────┘ choose (any axis, any order)
          │ all chosen
          ▼
        COMPLETE ◄───┐
          │    └─────┘ re-choose (stays complete)
          │     ▲
          │     │ abort (customization not stored)
          ▼     │
        FINALIZING
          │
          │ customization stored
          ▼
        FINALIZED
    """

    INITIALIZING = "initializing"
    READY = "ready"
    SELECTING = "selecting"
    COMPLETE = "complete"
    FINALIZING = "finalizing"
    FINALIZED = "finalized"
    FAILED = "failed"

    def can_transition_to(self, target: "SelectionStatus") -> bool:
        """Check if transition to target state is valid.

        Args:
            target: Target state to transition to.

        Returns:
            True if transition is valid.
        """
        return target in _SELECTION_TRANSITIONS.get(self, set())

    def allowed_transitions(self) -> list["SelectionStatus"]:
        """Get list of valid target states.

        Returns:
            List of states that can be transitioned to.
        """
        return sorted(_SELECTION_TRANSITIONS.get(self, set()), key=lambda s: s.value)

    def accepts_choices(self) -> bool:
        """Check if the shopper may choose a design, color or size.

        Returns:
            True if the session is interactive.
        """
        return self in {
            SelectionStatus.READY,
            SelectionStatus.SELECTING,
            SelectionStatus.COMPLETE,
        }

    def is_busy(self) -> bool:
        """Check if the session is waiting on a boundary call.

        Returns:
            True while loading or finalizing.
        """
        return self in {SelectionStatus.INITIALIZING, SelectionStatus.FINALIZING}

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state.

        Returns:
            True if no further transitions are possible.
        """
        return len(_SELECTION_TRANSITIONS.get(self, set())) == 0


# Selection state transitions (defined outside enum to avoid Enum restrictions)
_SELECTION_TRANSITIONS: dict[SelectionStatus, set[SelectionStatus]] = {
    SelectionStatus.INITIALIZING: {SelectionStatus.READY, SelectionStatus.FAILED},
    SelectionStatus.READY: {SelectionStatus.SELECTING},
    SelectionStatus.SELECTING: {SelectionStatus.SELECTING, SelectionStatus.COMPLETE},
    SelectionStatus.COMPLETE: {SelectionStatus.COMPLETE, SelectionStatus.FINALIZING},
    SelectionStatus.FINALIZING: {SelectionStatus.FINALIZED, SelectionStatus.COMPLETE},
    SelectionStatus.FINALIZED: set(),  # Terminal state
    SelectionStatus.FAILED: set(),  # Terminal state
}


def validate_selection_transition(
    session_id: str,
    current_status: SelectionStatus,
    target_status: SelectionStatus,
) -> None:
    """Validate and raise if selection state transition is invalid.

    Args:
        session_id: Session identifier for error message.
        current_status: Current session status.
        target_status: Target session status.

    Raises:
        InvalidStateTransitionError: If transition is not valid.
    """
    if not current_status.can_transition_to(target_status):
        raise InvalidStateTransitionError(
            entity_type="SelectionSession",
            entity_id=session_id,
            current_state=current_status.value,
            target_state=target_status.value,
            allowed_transitions=[s.value for s in current_status.allowed_transitions()],
        )
