"""Configuration module for the Vault buildpack.

This module reads configuration variables from the platform's
one-file-per-variable directory and carries the buildpack settings.
"""

from vault_buildpack.config.reader import (
    read_required_variables,
    read_optional_variables,
)
from vault_buildpack.config.settings import (
    BuildpackSettings,
    DEFAULT_RELEASE_HOST,
    DEFAULT_DOWNLOAD_TIMEOUT,
    VERSION_VARIABLE,
)

__all__ = [
    "read_required_variables",
    "read_optional_variables",
    "BuildpackSettings",
    "DEFAULT_RELEASE_HOST",
    "DEFAULT_DOWNLOAD_TIMEOUT",
    "VERSION_VARIABLE",
]
