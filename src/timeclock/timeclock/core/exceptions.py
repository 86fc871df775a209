class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a workflow precondition fails."""


class InvalidDuration(DomainError):
    """Raised for negative or non-finite durations, or unparsable HH:MM:SS text."""


class IngestionError(DomainError):
    """Raised when an externally synced payload cannot be parsed."""


class MailDeliveryError(DomainError):
    """Raised when the report email could not be handed to the mail server."""
