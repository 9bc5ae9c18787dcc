"""GetResponse node exceptions module."""


class GetResponseError(Exception):
    """Base exception for all GetResponse node exceptions."""


class InvalidAuthenticationError(GetResponseError):
    """Exception raised when the authentication backend is invalid."""


class UnsupportedOperationError(GetResponseError):
    """Exception raised when a resource/operation pair is not supported."""

    def __init__(self, resource, operation):
        """Keep the rejected pair for the caller."""
        super().__init__(f"Operation {operation!r} is not supported for resource {resource!r}")
        self.resource = resource
        self.operation = operation


class GetResponseApiError(GetResponseError):
    """Exception raised when a call to the GetResponse API fails."""

    def __init__(self, message, status_code=None, response=None):
        """Keep the HTTP status and the decoded error body when available."""
        super().__init__(message)
        self.status_code = status_code
        self.response = response
