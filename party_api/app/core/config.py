"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Settings
are read exactly once, at process entry, by ``Settings.from_env`` and
then handed to ``create_app``; nothing in the application reads
``os.environ`` after that point.
"""

import os
from dataclasses import dataclass
from typing import Optional

from party_api import __version__


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Party API"
    api_version: str = __version__
    log_level: str = "INFO"

    # Static bearer token guarding the /admin routes.  When unset the
    # admin routes reject every request.
    api_key: Optional[str] = None

    # Origin echoed in CORS responses.  ``*`` allows any origin.
    cors_origin: str = "*"

    # Path to the SQLite database file.  Relative paths are resolved
    # against the working directory of the process.
    database_path: str = "data.db"

    # ``host:port`` the HTTP server binds to.
    listen_addr: str = "127.0.0.1:3000"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            api_key=os.getenv("API_KEY") or None,
            cors_origin=os.getenv("CORS_ORIGIN", cls.cors_origin),
            database_path=os.getenv("SQLITE_DB", cls.database_path),
            listen_addr=os.getenv("LISTEN_ADDR", cls.listen_addr),
        )

    @property
    def host(self) -> str:
        return self._split_listen_addr()[0]

    @property
    def port(self) -> int:
        return self._split_listen_addr()[1]

    def _split_listen_addr(self) -> tuple[str, int]:
        host, sep, port = self.listen_addr.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"bad LISTEN_ADDR: {self.listen_addr}")
        # Bracketed IPv6 literal, e.g. ``[::1]:3000``
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        return host, int(port)
