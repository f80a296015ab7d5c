"""Buildpack settings.

Settings that were historically hard-coded (the release host) are carried on
a dataclass so they can be overridden from optional configuration variables
or injected directly, e.g. to point at a local artifact server in tests.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vault_buildpack.config.reader import read_optional_variables
from vault_buildpack.core.exceptions import InvalidConfiguration

DEFAULT_RELEASE_HOST = "https://releases.hashicorp.com/vault"
DEFAULT_DOWNLOAD_TIMEOUT = 300.0
DEFAULT_LOCK_TIMEOUT = 600.0

VERSION_VARIABLE = "VAULT_VERSION"
RELEASE_HOST_VARIABLE = "VAULT_RELEASE_HOST"
DOWNLOAD_TIMEOUT_VARIABLE = "VAULT_DOWNLOAD_TIMEOUT"

PLATFORM = "linux"
ARCHITECTURE = "amd64"


@dataclass
class BuildpackSettings:
    """Settings for fetching and caching Vault releases."""

    release_host: str = DEFAULT_RELEASE_HOST
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT

    @classmethod
    def from_env_dir(cls, env_dir: Optional[Path]) -> "BuildpackSettings":
        """
        Build settings from optional configuration variables.

        Recognized variables are VAULT_RELEASE_HOST and VAULT_DOWNLOAD_TIMEOUT.
        Unset variables keep their defaults.

        Raises:
            InvalidConfiguration: If VAULT_DOWNLOAD_TIMEOUT is not a positive number
        """
        values = read_optional_variables(
            env_dir, [RELEASE_HOST_VARIABLE, DOWNLOAD_TIMEOUT_VARIABLE]
        )
        settings = cls()

        release_host = values.get(RELEASE_HOST_VARIABLE, "").strip()
        if release_host:
            settings.release_host = release_host

        if DOWNLOAD_TIMEOUT_VARIABLE in values:
            settings.download_timeout = _parse_timeout(values[DOWNLOAD_TIMEOUT_VARIABLE])

        return settings

    def archive_name(self, version: str) -> str:
        """Return the release archive file name for a version."""
        return f"vault_{version}_{PLATFORM}_{ARCHITECTURE}.zip"

    def release_url(self, version: str) -> str:
        """
        Return the download URL for a version.

        Example:
            >>> BuildpackSettings().release_url("1.2.3")
            'https://releases.hashicorp.com/vault/1.2.3/vault_1.2.3_linux_amd64.zip'
        """
        host = self.release_host.rstrip("/")
        return f"{host}/{version}/{self.archive_name(version)}"


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw.strip())
    except ValueError:
        raise InvalidConfiguration(
            f"{DOWNLOAD_TIMEOUT_VARIABLE} must be a number of seconds, got {raw!r}"
        )
    if timeout <= 0:
        raise InvalidConfiguration(
            f"{DOWNLOAD_TIMEOUT_VARIABLE} must be positive, got {raw!r}"
        )
    return timeout
