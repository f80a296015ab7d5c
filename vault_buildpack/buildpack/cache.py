"""
Version-keyed cache of extracted Vault binaries.

The persistent build cache holds one extracted executable per version ever
built, at ``<cache_root>/vault_<version>``. Presence of that file is the sole
cache-hit signal: entries are never re-verified, mutated or evicted.

The key covers only the version. Platform and architecture are fixed
(linux/amd64); introducing variation there would require widening the key.

Cache entries are populated under a per-version file lock and placed with an
atomic rename, so concurrent builds sharing the cache never observe a
partially written entry.
"""

import logging
from pathlib import Path
from typing import Optional

from vault_buildpack.config.settings import BuildpackSettings
from vault_buildpack.core.download import DownloadProgress, download_file
from vault_buildpack.core.filesystem import (
    atomic_replace,
    ensure_directory,
    extract_member,
    make_executable,
    temporary_directory,
)
from vault_buildpack.core.locking import LockManager

logger = logging.getLogger(__name__)

BINARY_NAME = "vault"
LOCK_DIR_NAME = ".locks"


def cache_key(version: str) -> str:
    """Return the cache key for a version."""
    return f"{BINARY_NAME}_{version}"


def cache_path(cache_root: Path, version: str) -> Path:
    """Return the cache entry path for a version."""
    return Path(cache_root) / cache_key(version)


class _ProgressLogger:
    """Log download progress at every quarter of the total size."""

    def __init__(self, step: float = 25.0):
        self.step = step
        self.next_mark = step

    def __call__(self, progress: DownloadProgress) -> None:
        if progress.total_bytes <= 0:
            return
        if progress.percentage >= self.next_mark:
            logger.debug(f"       Downloaded {progress}")
            while self.next_mark <= progress.percentage:
                self.next_mark += self.step


class CacheStore:
    """
    Fetch Vault releases into the persistent build cache.

    Attributes:
        cache_root: Persistent cache directory supplied by the platform
        settings: Release host and timeout settings
    """

    def __init__(self, cache_root: Path, settings: Optional[BuildpackSettings] = None):
        self.cache_root = Path(cache_root)
        self.settings = settings or BuildpackSettings()

    def path_for(self, version: str) -> Path:
        return cache_path(self.cache_root, version)

    def is_cached(self, version: str) -> bool:
        """Check whether a cache entry exists for version."""
        return self.path_for(version).is_file()

    def ensure_cached(self, version: str) -> Path:
        """
        Return the cached binary for version, downloading it on a cache miss.

        Args:
            version: Vault version, used verbatim in the URL and the cache key

        Returns:
            Path to the cached executable

        Raises:
            TransferFailure: If the release archive cannot be downloaded
            ArchiveFailure: If the archive is corrupt or lacks the binary
            FilesystemFailure: If the cache cannot be written
        """
        ensure_directory(self.cache_root)
        entry = self.path_for(version)

        if entry.is_file():
            logger.info(f"       Using cached Vault {version}")
            return entry

        lock_manager = LockManager(self.cache_root / LOCK_DIR_NAME)
        with lock_manager.version_lock(version, timeout=self.settings.lock_timeout):
            # Another build may have populated the entry while we waited
            if entry.is_file():
                logger.info(f"       Using cached Vault {version}")
                return entry

            self._populate(version, entry)

        return entry

    def _populate(self, version: str, entry: Path) -> None:
        """Download, extract and atomically place the binary for version."""
        url = self.settings.release_url(version)
        logger.info(f"       Downloading {url}")

        with temporary_directory(self.cache_root, prefix=f".{cache_key(version)}-") as tmp:
            archive = tmp / self.settings.archive_name(version)
            download_file(
                url,
                archive,
                timeout=self.settings.download_timeout,
                progress_callback=_ProgressLogger(),
            )

            logger.info(f"       Extracting {archive.name}")
            extracted = extract_member(archive, BINARY_NAME, tmp / BINARY_NAME)
            make_executable(extracted)
            atomic_replace(extracted, entry)

        logger.debug(f"Cached Vault {version} at {entry}")


def ensure_cached(
    cache_root: Path, version: str, settings: Optional[BuildpackSettings] = None
) -> Path:
    """
    Ensure the binary for version is in the cache.

    Convenience wrapper around CacheStore.ensure_cached().

    Example:
        >>> ensure_cached(Path("/tmp/cache"), "1.2.3")
        PosixPath('/tmp/cache/vault_1.2.3')
    """
    return CacheStore(cache_root, settings).ensure_cached(version)
