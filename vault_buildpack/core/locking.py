"""
Concurrent access control for the shared build cache.

The persistent cache directory may be shared by concurrent builds on the same
host. Populating a cache entry is guarded by a per-version file lock so that
only one build downloads a given version at a time.

Usage:
    from vault_buildpack.core.locking import LockManager

    lock_manager = LockManager(cache_root / ".locks")
    with lock_manager.version_lock("1.2.3", timeout=600):
        # Populate the cache entry for 1.2.3
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from vault_buildpack.core.exceptions import CacheLockTimeout
from vault_buildpack.core.filesystem import ensure_directory

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages file locks for cache entries.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        self.lock_dir = ensure_directory(lock_dir)

    def lock_path(self, version: str) -> Path:
        """Return the lock file path for a version."""
        safe_id = version.replace("/", "-").replace("\\", "-").replace(":", "-")
        return self.lock_dir / f"vault-{safe_id}.lock"

    @contextmanager
    def version_lock(self, version: str, timeout: float = 600):
        """
        Acquire the lock for populating a version's cache entry.

        Args:
            version: Version identifier the cache entry is keyed by
            timeout: Maximum wait time in seconds

        Raises:
            CacheLockTimeout: If lock can't be acquired within timeout
        """
        lock_path = self.lock_path(version)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired cache lock: {lock_path}")
                yield
                logger.debug(f"Released cache lock: {lock_path}")
        except Timeout as e:
            raise CacheLockTimeout(
                f"Could not acquire cache lock for Vault {version} after {timeout}s. "
                "Another build may be populating the cache."
            ) from e


__all__ = ["LockManager"]
