"""Custom exceptions for nullsafe."""


class NullSafeError(Exception):
    """Base exception for nullsafe."""

    pass


class AbsentValueError(NullSafeError):
    """Exception raised by an operation or accessor to signal an absent value.

    Always treated as absence: the safe accessors convert it to ``None``.
    """

    pass


class InvalidChainError(NullSafeError, ValueError):
    """Exception raised when an accessor chain or path is malformed."""

    pass


class ConfigurationError(NullSafeError):
    """Exception raised for configuration errors."""

    pass
