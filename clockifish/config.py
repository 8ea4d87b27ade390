"""Configuration for clockifish: credentials, env file and version."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import __version__
from .api.errors import MissingCredential

API_KEY_VAR = "CLOCKIFY_API_KEY"
WORKSPACE_ID_VAR = "CLOCKIFY_WORKSPACE_ID"
VERSION_VAR = "CLOCKIFISH_VERSION"
DEFAULT_ENV_FILE = "clockifish.env"


@dataclass(frozen=True)
class Credentials:
    """API key and workspace used for every request."""

    api_key: str
    workspace_id: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """Build credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Credentials

        Raises:
            MissingCredential: If a required variable is unset or empty
        """
        if environ is None:
            environ = os.environ
        return cls(
            api_key=_require(environ, API_KEY_VAR),
            workspace_id=_require(environ, WORKSPACE_ID_VAR),
        )

    def __repr__(self) -> str:
        return f"Credentials(api_key='***', workspace_id={self.workspace_id!r})"


def _require(environ: Mapping[str, str], key: str) -> str:
    value = environ.get(key)
    if not value:
        raise MissingCredential(key)
    return value


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load environment variables from a dotenv file.

    Variables already set in the environment are not overridden.

    Args:
        env_file: Explicit file path. When omitted, ``clockifish.env`` in the
            working directory is loaded if it exists.

    Returns:
        True if a file was loaded

    Raises:
        FileNotFoundError: If an explicit ``env_file`` does not exist
    """
    if env_file is None:
        if not os.path.exists(DEFAULT_ENV_FILE):
            return False
        env_file = DEFAULT_ENV_FILE
    elif not os.path.exists(env_file):
        raise FileNotFoundError(f"Missing environment file: {env_file}")
    return load_dotenv(env_file, override=False)


def get_version(environ: Optional[Mapping[str, str]] = None) -> str:
    """Get the version string, preferring ``CLOCKIFISH_VERSION``."""
    if environ is None:
        environ = os.environ
    return environ.get(VERSION_VAR) or __version__
