"""PyPI release lookup for the `version-check` command.

Responsibilities:
- Fetch the latest published version of a package from the PyPI JSON API.
- Raise actionable errors for transport, HTTP, and payload failures.
"""

from __future__ import annotations

from typing import Any

import requests

from .errors import VersionCheckError

PYPI_BASE_URL = "https://pypi.org/pypi"
PACKAGE_NAME = "llmstxt-cleaner"


def fetch_latest_version(
    package: str = PACKAGE_NAME,
    *,
    base_url: str = PYPI_BASE_URL,
    timeout_seconds: float = 10.0,
) -> str:
    """Return the latest released version string for `package`."""

    endpoint = f"{base_url.rstrip('/')}/{package}/json"
    try:
        response = requests.get(endpoint, timeout=timeout_seconds)
        response.raise_for_status()
        payload: Any = response.json()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else "unknown"
        raise VersionCheckError(f"PyPI returned HTTP {status} for `{package}`.") from exc
    except requests.Timeout as exc:
        raise VersionCheckError("PyPI request timed out.") from exc
    except ValueError as exc:
        raise VersionCheckError("Could not parse version info from PyPI.") from exc
    except requests.RequestException as exc:
        raise VersionCheckError(f"PyPI request transport error: {exc}") from exc

    info = payload.get("info") if isinstance(payload, dict) else None
    version = info.get("version") if isinstance(info, dict) else None
    if not isinstance(version, str) or not version.strip():
        raise VersionCheckError("Could not parse version info from PyPI.")
    return version.strip()


def compare_versions(current: str, latest: str) -> str:
    """Return a user-facing message comparing installed and latest versions."""

    if current == latest:
        return f"You are using the latest version ({current})."
    return f"A newer version is available: {latest}. You are using {current}."
