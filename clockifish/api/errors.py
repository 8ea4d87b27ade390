"""Errors raised while talking to the Clockify API."""


class ClockifyError(Exception):
    """Base class for all clockifish errors."""


class MissingCredential(ClockifyError):
    """A required credential is not configured."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"{variable} environment variable is not set")


class InvalidRequest(ClockifyError):
    """The request URL could not be constructed."""


class InvalidResponse(ClockifyError):
    """The transport failed or no usable HTTP response was received."""


class ApiError(ClockifyError):
    """The API answered with an unsuccessful status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API Error ({status_code}): {body}")


class Unauthorized(ApiError):
    """The API key was rejected (HTTP 401)."""
