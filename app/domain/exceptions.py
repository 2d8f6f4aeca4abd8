"""Domain exceptions.

All domain-level errors that represent business rule violations.
Catalog and customization services raise them for missing input,
uniqueness violations and unknown identifiers; the selection engine
raises them when a choice or finalize is not permitted.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
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
# Input Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when required input is missing or malformed."""

    @classmethod
    def missing_fields(cls, entity_type: str, fields: list[str]) -> "ValidationError":
        """Build an error for absent required fields.

        Args:
            entity_type: Entity being validated (e.g., "Garment").
            fields: Names of the missing fields.

        Returns:
            ValidationError listing the fields.
        """
        return cls(
            f"{entity_type} is missing required fields: {', '.join(fields)}",
            details={"entity_type": entity_type, "missing_fields": fields},
        )


class SelectionIncompleteError(ValidationError):
    """Raised when finalizing a selection that lacks a design, color or size."""

    def __init__(self, session_id: str, missing: list[str]) -> None:
        """Initialize selection incomplete error.

        Args:
            session_id: Selection session identifier.
            missing: Option axes that are still unset.
        """
        super().__init__(
            f"Select all options before adding to cart (missing: {', '.join(missing)})",
            details={"session_id": session_id, "missing": missing},
        )


class OptionNotAvailableError(ValidationError):
    """Raised when a chosen design, color or size is not offered for the garment."""

    def __init__(self, option_type: str, option_id: int, garment_id: int) -> None:
        """Initialize option not available error.

        Args:
            option_type: "design", "color" or "size".
            option_id: The rejected option id.
            garment_id: Garment the session is scoped to.
        """
        super().__init__(
            f"The {option_type} {option_id} is not available for garment {garment_id}",
            details={
                "option_type": option_type,
                "option_id": option_id,
                "garment_id": garment_id,
            },
        )


class PriceMismatchError(ValidationError):
    """Raised when a submitted total does not match base price plus modifier."""

    def __init__(self, submitted: str, expected: str) -> None:
        """Initialize price mismatch error.

        Args:
            submitted: Total price sent by the caller.
            expected: Total price computed from the catalog.
        """
        super().__init__(
            f"Total price {submitted} does not match the catalog price {expected}",
            details={"submitted": submitted, "expected": expected},
        )


# ============================================================================
# Store Errors
# ============================================================================


class ConflictError(DomainError):
    """Raised when a uniqueness rule is violated (SKU, garment/design pair)."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Garment", "Design").
            entity_id: Identifier that was looked up.
            message: Optional message overriding the default one.
        """
        super().__init__(
            message or f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class TransportError(DomainError):
    """Raised when a boundary call fails or the remote side is unreachable."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize transport error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status returned by the remote side, if any.
            details: Optional additional context.
        """
        super().__init__(message, details=details)
        self.status_code = status_code


# ============================================================================
# State Machine Errors
# ============================================================================


class InvalidStateTransitionError(DomainError):
    """Raised when an invalid state transition is attempted.

    This error indicates that the requested operation cannot be performed
    in the current state of the entity.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        current_state: str,
        target_state: str,
        allowed_transitions: list[str] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of entity (e.g., "SelectionSession").
            entity_id: ID of the entity.
            current_state: Current state of the entity.
            target_state: Attempted target state.
            allowed_transitions: List of allowed target states from current state.
        """
        allowed = allowed_transitions or []
        message = (
            f"Cannot transition {entity_type}({entity_id}) "
            f"from '{current_state}' to '{target_state}'. "
            f"Allowed transitions: {allowed}"
        )
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "entity_id": entity_id,
                "current_state": current_state,
                "target_state": target_state,
                "allowed_transitions": allowed,
            },
        )


class SessionBusyError(InvalidStateTransitionError):
    """Raised when a shopper interacts while a boundary call is in flight."""

    def __init__(self, session_id: str, current_state: str) -> None:
        """Initialize session busy error.

        Args:
            session_id: Selection session identifier.
            current_state: State the session is waiting in.
        """
        super().__init__(
            entity_type="SelectionSession",
            entity_id=session_id,
            current_state=current_state,
            target_state=current_state,
        )
        self.message = f"Selection session {session_id} is busy ({current_state})"
        self.args = (self.message,)
