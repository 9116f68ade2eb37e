"""
Domain error taxonomy.

Every failure raised by the core carries an ``ErrorKind`` so the transport
boundary can map it to a status code without ``isinstance`` chains.
The subclasses exist for ``except`` clauses and readable raises.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INTERNAL = "INTERNAL"


_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_STATE_TRANSITION: 400,
    ErrorKind.BUSINESS_RULE_VIOLATION: 422,
    ErrorKind.INTERNAL: 500,
}


class DomainError(Exception):
    """
    Base class for all typed failures of the order core.

    Attributes:
        kind: Failure kind (drives status-code mapping)
        details: Structured context for the caller
        is_operational: False only for unexpected failures
        timestamp: When the error was raised (UTC)
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    is_operational: bool = True

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.timestamp = datetime.now(timezone.utc)

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for the transport layer."""
        return {
            "name": type(self).__name__,
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ValidationError(DomainError):
    """Malformed or missing input."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Referenced resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: Optional[str] = None) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """Uniqueness or concurrent-modification conflict reported by storage."""

    kind = ErrorKind.CONFLICT


class InvalidStateTransitionError(DomainError):
    """The status transition table forbids the requested move."""

    kind = ErrorKind.INVALID_STATE_TRANSITION

    def __init__(self, current_state: str, target_state: str, entity_type: str = "Order") -> None:
        super().__init__(
            f"Invalid state transition for {entity_type}: "
            f"cannot transition from '{current_state}' to '{target_state}'",
            {
                "current_state": current_state,
                "target_state": target_state,
                "entity_type": entity_type,
            },
        )
        self.current_state = current_state
        self.target_state = target_state


class BusinessRuleViolationError(DomainError):
    """Request is structurally valid but blocked by a domain rule."""

    kind = ErrorKind.BUSINESS_RULE_VIOLATION

    def __init__(self, rule: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Business rule violation: {rule}", details)
        self.rule = rule


class InternalServerError(DomainError):
    """Unexpected, non-operational failure."""

    kind = ErrorKind.INTERNAL
    is_operational = False

    def __init__(
        self,
        message: str = "Internal server error",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
