"""
Helper functions for building test inputs.
"""

import io
import os
import zipfile
from pathlib import Path


def make_vault_zip(content: bytes, member: str = "vault", mode: int = 0o755) -> bytes:
    """
    Build a zip archive in memory containing a single file entry.

    Args:
        content: File content
        member: Entry name
        mode: Unix permission bits stored in the entry

    Returns:
        Zip archive bytes
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        info = zipfile.ZipInfo(member)
        info.external_attr = mode << 16
        info.compress_type = zipfile.ZIP_DEFLATED
        zf.writestr(info, content)
    return buffer.getvalue()


def write_config(env_dir: Path, **values: str) -> Path:
    """Write configuration variables the way the platform materializes them."""
    env_dir.mkdir(parents=True, exist_ok=True)
    for name, value in values.items():
        (env_dir / name).write_text(value)
    return env_dir


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def snapshot_tree(root: Path) -> dict:
    """Map every file under root (relative path) to its bytes."""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
