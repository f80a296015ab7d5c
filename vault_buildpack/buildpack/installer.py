"""
Install the cached Vault binary into the build workspace.

The binary always lands at ``<build_root>/.vault-buildpack/vault``; the
startup profile and other scripts depend on that fixed location.
"""

import logging
from pathlib import Path

from vault_buildpack.core.filesystem import atomic_copy, ensure_directory, make_executable

logger = logging.getLogger(__name__)

INSTALL_DIR_NAME = ".vault-buildpack"
INSTALLED_BINARY_NAME = "vault"


def install_dir(build_root: Path) -> Path:
    """Return the fixed install directory under the build workspace."""
    return Path(build_root) / INSTALL_DIR_NAME


def install(build_root: Path, cached_artifact: Path) -> Path:
    """
    Copy a cached binary into the build workspace.

    Any copy from an earlier attempt in the same workspace is overwritten.
    The execute permission is set explicitly on the installed file.

    Args:
        build_root: Build workspace directory
        cached_artifact: Cache entry to install

    Returns:
        Path to the installed binary

    Raises:
        FilesystemFailure: If the directory cannot be created or the copy fails
    """
    target_dir = ensure_directory(install_dir(build_root))
    target = target_dir / INSTALLED_BINARY_NAME

    logger.debug(f"Copying {cached_artifact} to {target}")
    atomic_copy(cached_artifact, target)
    make_executable(target)

    return target
