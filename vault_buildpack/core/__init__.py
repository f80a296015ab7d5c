"""
Core functionality for the Vault buildpack.

This package contains the foundational modules that the buildpack steps depend on.
"""

from .exceptions import (
    BuildpackError,
    ArgumentProtocolViolation,
    ConfigurationError,
    MissingConfiguration,
    InvalidConfiguration,
    TransferFailure,
    ArchiveFailure,
    FilesystemFailure,
    CacheLockTimeout,
)

from .download import (
    DownloadProgress,
    download_file,
    format_progress,
)

from .locking import LockManager

__all__ = [
    "BuildpackError",
    "ArgumentProtocolViolation",
    "ConfigurationError",
    "MissingConfiguration",
    "InvalidConfiguration",
    "TransferFailure",
    "ArchiveFailure",
    "FilesystemFailure",
    "CacheLockTimeout",
    "DownloadProgress",
    "download_file",
    "format_progress",
    "LockManager",
]
