"""
ClockifyClient: A client for interacting with the Clockify API.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..config import Credentials
from ..utils.date_utils import iso_datetime
from .errors import ApiError, InvalidRequest, InvalidResponse, Unauthorized
from .models import TimeEntry, User

logger = logging.getLogger(__name__)

BASE_URL = "https://api.clockify.me/api/v1"

_URL_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
)


class ClockifyClient:
    """A client for interacting with the Clockify API.

    Every call is a single request; nothing is retried or cached.
    """

    def __init__(self, credentials: Credentials, base_url: str = BASE_URL,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initialize the ClockifyClient.

        Args:
            credentials: API key and workspace ID
            base_url: API root URL
            session: HTTP session to use (a new one by default)
            timeout: Transport timeout in seconds (None uses the transport default)
        """
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def workspace_id(self) -> str:
        return self.credentials.workspace_id

    # --- HTTP plumbing ---
    def _headers(self) -> Dict[str, str]:
        return {
            "X-Api-Key": self.credentials.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _url(self, *segments: str) -> str:
        """Build an endpoint URL from path segments, percent-encoding each one.

        Raises:
            InvalidRequest: If a segment is empty or cannot be encoded
        """
        parts = [self.base_url]
        for segment in segments:
            if not isinstance(segment, str) or not segment:
                raise InvalidRequest(f"Invalid URL constructed for API request: bad path segment {segment!r}")
            try:
                parts.append(quote(segment, safe=""))
            except UnicodeEncodeError as e:
                raise InvalidRequest(f"Invalid URL constructed for API request: {e}") from e
        return "/".join(parts)

    def api_request(self, method: str, url: str, params: Optional[dict] = None,
                    body: Optional[dict] = None) -> Any:
        """Make a request to the Clockify API.

        GET requests succeed only on 200; other methods accept any 2xx.

        Args:
            method: HTTP method
            url: API endpoint URL
            params: Query parameters (optional)
            body: JSON body (optional)

        Returns:
            Decoded JSON response

        Raises:
            InvalidRequest: If requests rejects the URL
            InvalidResponse: If the transport fails
            ApiError: If the status code is not a success
            ValueError: If a successful response is not JSON
        """
        try:
            resp = self.session.request(
                method, url, headers=self._headers(), params=params, json=body, timeout=self.timeout
            )
        except _URL_ERRORS as e:
            raise InvalidRequest(f"Invalid URL constructed for API request: {e}") from e
        except requests.RequestException as e:
            raise InvalidResponse(f"Invalid response received from API: {e}") from e

        status = resp.status_code
        logger.debug("%s %s -> %s", method, url, status)

        ok = status == 200 if method.upper() == "GET" else 200 <= status < 300
        if not ok:
            body_text = _response_text(resp)
            if status == 401:
                raise Unauthorized(status, body_text)
            raise ApiError(status, body_text)
        return resp.json()

    # --- Resources ---
    def get_current_user(self) -> User:
        """Get the user the API key belongs to.

        Returns:
            Current user

        Raises:
            Unauthorized: On any non-200 status
        """
        try:
            data = self.api_request("GET", self._url("user"))
        except Unauthorized:
            raise
        except ApiError as e:
            raise Unauthorized(e.status_code, e.body) from e
        return User.from_dict(data)

    def start_timer(self, description: Optional[str] = None, project_id: Optional[str] = None) -> TimeEntry:
        """Start a new timer in the configured workspace.

        Args:
            description: Entry description (optional)
            project_id: Project to book the time on (optional)

        Returns:
            The created, running time entry
        """
        url = self._url("workspaces", self.workspace_id, "time-entries")
        body = {"start": iso_datetime()}
        if description is not None:
            body["description"] = description
        if project_id is not None:
            body["projectId"] = project_id
        return TimeEntry.from_dict(self.api_request("POST", url, body=body))

    def get_current_timer(self) -> Optional[TimeEntry]:
        """Get the running time entry of the current user, if any.

        Returns:
            The first in-progress entry, or None when nothing is running
        """
        user = self.get_current_user()
        url = self._url("workspaces", self.workspace_id, "user", user.id, "time-entries")
        data = self.api_request("GET", url, params={"in-progress": "true"})
        if not data:
            return None
        if len(data) > 1:
            logger.debug("%d in-progress entries returned, using the first", len(data))
        return TimeEntry.from_dict(data[0])

    def stop_timer(self, user_id: str, workspace_id: str) -> TimeEntry:
        """Stop the running timer of a user.

        The caller is expected to have checked that a timer is running.

        Args:
            user_id: User owning the timer
            workspace_id: Workspace of the timer

        Returns:
            The stopped time entry
        """
        url = self._url("workspaces", workspace_id, "user", user_id, "time-entries")
        return TimeEntry.from_dict(self.api_request("PATCH", url, body={"end": iso_datetime()}))

    def get_time_entries(self, start_date: datetime, end_date: datetime) -> List[TimeEntry]:
        """Get the current user's time entries for a date range.

        Args:
            start_date: Start of the range
            end_date: End of the range (exclusive)

        Returns:
            List of time entries as returned by the API
        """
        user = self.get_current_user()
        url = self._url("workspaces", self.workspace_id, "user", user.id, "time-entries")
        params = {
            "start": iso_datetime(start_date),
            "end": iso_datetime(end_date),
        }
        return [TimeEntry.from_dict(e) for e in self.api_request("GET", url, params=params)]


def _response_text(resp: requests.Response) -> str:
    try:
        return resp.content.decode("utf-8")
    except (AttributeError, UnicodeDecodeError):
        return "Unknown error"
