"""Domain exceptions for object storage rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class InvalidArgumentError(DomainError):
    """Raised when a required input is absent or structurally malformed."""


class SigningNotSupportedError(DomainError):
    """Raised when the configured backend credentials cannot mint signed URLs."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (storage backend, network, etc.)."""


class UploadFailedError(InfrastructureError):
    """Raised when storing an uploaded file fails.

    The original backend error is kept as ``__cause__``.
    """
