"""Provider exceptions module."""


class ProviderError(Exception):
    """Base exception for all provider exceptions."""


class ProviderInvalidBackendError(ProviderError):
    """Exception raised when the backend is invalid."""


class ProviderRequestError(ProviderError):
    """Exception raised when a provider call fails or answers with an unexpected status."""

    def __init__(self, message, status_code=None, body=""):
        """Keep the upstream status and body for error classification."""
        super().__init__(message)
        self.status_code = status_code
        self.body = body
