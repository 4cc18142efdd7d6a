"""Typed exceptions for the dashboard flows."""


class ContentHubError(Exception):
    """Base exception. `status_code` is what the API answers with."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or ""


class AuthError(ContentHubError):
    """No valid session. Please log in again."""

    status_code = 401


class RequestFailed(ContentHubError):
    """External generation call failed."""

    status_code = 502


class ReconciliationFailed(ContentHubError):
    """Could not retrieve the newly created blog post. Please check your posts list."""

    status_code = 404


class PersistenceFailed(ContentHubError):
    """Store read or write failed."""

    status_code = 500
