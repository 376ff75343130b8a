"""Runtime configuration read from the environment.

A ``.env`` file in the project root or in ``backend/`` is loaded first,
so values there act as defaults for unset environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_FRONTEND_URL = "http://localhost:5173"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class Settings:
    """Settings shared by the API server and the estimate client."""

    api_url: str = DEFAULT_API_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    frontend_url: str = DEFAULT_FRONTEND_URL
    environment: str = "development"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``GHANABUILD_*`` environment variables.

        Raises:
            ValueError: If ``GHANABUILD_REQUEST_TIMEOUT`` is not a positive number.
        """
        load_dotenv(_project_root / ".env")
        load_dotenv(_backend_dir / ".env")

        raw_timeout = os.environ.get("GHANABUILD_REQUEST_TIMEOUT", "")
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT_SECONDS
        if timeout <= 0:
            msg = f"GHANABUILD_REQUEST_TIMEOUT must be positive, got {raw_timeout!r}"
            raise ValueError(msg)

        return cls(
            api_url=os.environ.get("GHANABUILD_API_URL", DEFAULT_API_URL),
            request_timeout_seconds=timeout,
            frontend_url=os.environ.get("GHANABUILD_FRONTEND_URL", DEFAULT_FRONTEND_URL),
            environment=os.environ.get("GHANABUILD_ENV", "development"),
        )
