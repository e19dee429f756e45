"""
Process configuration shared by the API server and the store commands.

Settings are read from the environment (and an optional .env file) once, at
process entry, and handed to whichever component needs them.
"""
import os
import re
import logging
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"

_CREDENTIALS_PATTERN = re.compile(r":[^:]*@")


class Config:
    """Centralized configuration loaded from environment variables."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        log_level: str = DEFAULT_LOG_LEVEL,
        mongodb_uri: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.log_level = log_level
        self.mongodb_uri = mongodb_uri

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ after loading .env.

        Raises:
            ValueError: If PORT is set but is not an integer
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        port = environ.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(port)
        except ValueError:
            raise ValueError("PORT must be a valid integer. Configure this in your .env file.")

        return cls(
            host=environ.get("HOST") or DEFAULT_HOST,
            port=port,
            log_level=environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            mongodb_uri=environ.get("MONGODB_URI") or None,
        )

    def require_mongodb_uri(self) -> str:
        """Return MONGODB_URI or fail before any network activity."""
        if not self.mongodb_uri:
            raise ValueError("Missing required environment variable: MONGODB_URI. Configure this in your .env file.")
        return self.mongodb_uri

    def __repr__(self) -> str:
        uri = mask_connection_string(self.mongodb_uri) if self.mongodb_uri else None
        return f"Config(host={self.host!r}, port={self.port!r}, log_level={self.log_level!r}, mongodb_uri={uri!r})"


def mask_connection_string(uri: str) -> str:
    """Hide the password in a connection string (first ':<secret>@' only)."""
    return _CREDENTIALS_PATTERN.sub(":****@", uri, count=1)


def setup_logging(config: Config) -> logging.Logger:
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    # Driver chatter drowns out the probe's own output
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    return logging.getLogger(__name__)
