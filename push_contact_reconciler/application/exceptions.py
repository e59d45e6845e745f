"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class InvalidArgumentError(ApplicationError, ValueError):
    """Raised when a caller passes an absent or malformed argument."""


class CredentialFailureError(ApplicationError):
    """Raised when a bearer credential for the Push Contact API cannot be acquired."""


class RegistryCallError(ApplicationError):
    """Raised when the Push Contact API cannot be reached."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
