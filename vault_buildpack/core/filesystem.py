"""
File system utilities for the Vault buildpack.

This module provides the file operations the compile pipeline relies on:
- Idempotent directory creation
- Single-member extraction from zip archives
- Atomic placement (temp file + rename) and atomic copies
- Explicit executable permissions

OSError and zipfile errors are translated into FilesystemFailure and
ArchiveFailure so callers only deal with the buildpack error hierarchy.
"""

import os
import shutil
import stat
import tempfile
import zipfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import Iterator, Union

from vault_buildpack.core.exceptions import ArchiveFailure, FilesystemFailure

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


# ============================================================================
# Directories
# ============================================================================


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent).

    Args:
        path: Directory path

    Returns:
        Path object

    Raises:
        FilesystemFailure: If the directory cannot be created

    Example:
        >>> ensure_directory('/tmp/build/.vault-buildpack')
        PosixPath('/tmp/build/.vault-buildpack')
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemFailure(f"Failed to create directory '{path}': {e}") from e
    return path


@contextmanager
def temporary_directory(parent: Union[str, Path], prefix: str = ".tmp-") -> Iterator[Path]:
    """
    Context manager for a temporary directory inside parent.

    Creating it next to the final destination keeps renames on the same
    filesystem. The directory and its contents are removed on exit.

    Yields:
        Path to temporary directory
    """
    try:
        temp_dir = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    except OSError as e:
        raise FilesystemFailure(
            f"Failed to create temporary directory in '{parent}': {e}"
        ) from e

    try:
        yield temp_dir
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


# ============================================================================
# Archive Extraction
# ============================================================================


def _find_member(zf: zipfile.ZipFile, member_name: str) -> zipfile.ZipInfo:
    """Locate a regular file entry by exact name, falling back to basename."""
    candidates = [info for info in zf.infolist() if not info.is_dir()]

    for info in candidates:
        if info.filename == member_name:
            return info

    for info in candidates:
        if PurePosixPath(info.filename).name == member_name:
            return info

    names = ", ".join(info.filename for info in candidates) or "<empty>"
    raise ArchiveFailure(
        f"Archive does not contain '{member_name}' (entries: {names})"
    )


def extract_member(
    archive_path: Union[str, Path], member_name: str, destination: Union[str, Path]
) -> Path:
    """
    Extract a single file entry from a zip archive to an exact path.

    Only the named entry is written, directly to destination, so archive
    paths never influence where data lands on disk.

    Args:
        archive_path: Path to the zip archive
        member_name: Entry name to extract (matched exactly, then by basename)
        destination: File path to write the entry to

    Returns:
        Path to the extracted file

    Raises:
        ArchiveFailure: If the archive is missing, corrupt, or lacks the entry
        FilesystemFailure: If the destination cannot be written
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveFailure(f"Archive not found: {archive_path}")

    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            info = _find_member(zf, member_name)
            with zf.open(info, "r") as src, open(destination, "wb") as dst:
                shutil.copyfileobj(src, dst)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as e:
        raise ArchiveFailure(f"Failed to extract {archive_path}: {e}") from e
    except OSError as e:
        raise FilesystemFailure(f"Failed to write '{destination}': {e}") from e

    return destination


# ============================================================================
# Safe File Operations
# ============================================================================


def make_executable(path: Union[str, Path]) -> Path:
    """
    Add execute permission for user, group and others.

    Raises:
        FilesystemFailure: If permissions cannot be changed
    """
    path = Path(path)
    try:
        mode = path.stat().st_mode
        path.chmod(mode | EXECUTABLE_BITS)
    except OSError as e:
        raise FilesystemFailure(f"Failed to make '{path}' executable: {e}") from e
    return path


def atomic_replace(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Atomically move source onto destination.

    Both paths must be on the same filesystem. Readers see either the old
    destination or the complete new file, never a partial one.

    Raises:
        FilesystemFailure: If the rename fails
    """
    source = Path(source)
    destination = Path(destination)
    try:
        os.replace(source, destination)
    except OSError as e:
        raise FilesystemFailure(
            f"Failed to move '{source}' to '{destination}': {e}"
        ) from e
    return destination


def atomic_copy(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Copy a file using temp file + rename, overwriting destination.

    Args:
        source: File to copy
        destination: Target file path (its parent must exist)

    Returns:
        Path to destination

    Raises:
        FilesystemFailure: If source is missing or the copy fails
    """
    source = Path(source)
    destination = Path(destination)

    if not source.is_file():
        raise FilesystemFailure(f"Source file does not exist: {source}")

    try:
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise FilesystemFailure(
            f"Failed to create temporary file in '{destination.parent}': {e}"
        ) from e

    os.close(temp_fd)
    temp_path = Path(temp_path_str)

    try:
        shutil.copy2(source, temp_path)
        os.replace(temp_path, destination)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise FilesystemFailure(
            f"Failed to copy '{source}' to '{destination}': {e}"
        ) from e

    return destination


__all__ = [
    "EXECUTABLE_BITS",
    "ensure_directory",
    "temporary_directory",
    "extract_member",
    "make_executable",
    "atomic_replace",
    "atomic_copy",
]
