class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ScheduleError(ValidationError):
    """Raised when a work schedule entry is malformed."""


class InvalidWindowError(ValidationError):
    """Raised when a reporting window cannot be built (bad dates, unknown period, start > end)."""


class NotFoundError(DomainError):
    """Raised when a schedule, employee or punch record does not exist."""


class ConflictError(DomainError):
    """Raised when a punch action was already recorded (double clock-in, second lunch, ...).

    Retrying the same request triggers the same conflict.
    """


class PolicyViolation(DomainError):
    """Raised when a request is well-formed but breaks a business rule."""
