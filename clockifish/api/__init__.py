"""Clockify API access for clockifish."""

from .errors import (
    ClockifyError, MissingCredential, InvalidRequest, InvalidResponse, ApiError, Unauthorized
)
from .models import User, TimeInterval, TimeEntry

__all__ = [
    'ClockifyError', 'MissingCredential', 'InvalidRequest', 'InvalidResponse', 'ApiError',
    'Unauthorized', 'User', 'TimeInterval', 'TimeEntry'
]
