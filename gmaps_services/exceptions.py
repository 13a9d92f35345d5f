"""Custom exceptions for the gmaps-services library."""


class GMapsServicesError(Exception):
    """Base exception for all gmaps-services errors."""
    pass


class MissingParameterError(GMapsServicesError, ValueError):
    """Raised when a request is formatted without one of its required parameters."""

    def __init__(self, field: str, message: str = None):
        self.field = field
        super().__init__(message or f"{field} must be set")


class TransportError(GMapsServicesError, IOError):
    """Raised when the web service cannot be reached or answers with an HTTP error."""
    pass


class ResponseParseError(GMapsServicesError, IOError):
    """Raised when a response body is not the JSON document the decoder expects."""
    pass


class ConfigurationError(GMapsServicesError):
    """Raised when configuration is invalid or incomplete."""
    pass
