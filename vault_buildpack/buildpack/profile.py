"""
Startup profile wiring.

Scripts in ``<build_root>/.profile.d/`` are sourced by the runtime before the
application's processes start. At runtime the build workspace becomes
``$HOME``, so paths are written relative to ``$HOME`` rather than to the
absolute build-time location.
"""

import logging
from pathlib import Path, PurePosixPath

from vault_buildpack.core.exceptions import FilesystemFailure
from vault_buildpack.core.filesystem import ensure_directory

logger = logging.getLogger(__name__)

PROFILE_DIR_NAME = ".profile.d"
PROFILE_SCRIPT_NAME = "vault.sh"


def profile_script(build_root: Path) -> Path:
    """Return the startup script path under the build workspace."""
    return Path(build_root) / PROFILE_DIR_NAME / PROFILE_SCRIPT_NAME


def runtime_path(build_root: Path, directory: Path) -> str:
    """
    Express a build-time directory relative to the runtime $HOME.

    Raises:
        FilesystemFailure: If directory is not inside build_root

    Example:
        >>> runtime_path(Path("/tmp/build"), Path("/tmp/build/.vault-buildpack"))
        '$HOME/.vault-buildpack/'
    """
    build_root = Path(build_root).resolve()
    directory = Path(directory).resolve()

    try:
        relative = directory.relative_to(build_root)
    except ValueError:
        raise FilesystemFailure(
            f"'{directory}' is outside the build directory '{build_root}'"
        )

    if relative == Path("."):
        return "$HOME/"
    return f"$HOME/{PurePosixPath(*relative.parts)}/"


def profile_line(runtime_dir: str) -> str:
    """Render the PATH export line for a runtime directory."""
    return f"export PATH=$PATH:{runtime_dir}"


def write_profile_fragment(build_root: Path, installed_binary_dir: Path) -> Path:
    """
    Append a PATH extension for the installed binary to the startup script.

    The line is appended only when the script does not already contain it,
    so re-running a build in the same workspace keeps a single entry.
    Existing script content is never rewritten.

    Args:
        build_root: Build workspace directory
        installed_binary_dir: Directory holding the installed binary

    Returns:
        Path to the startup script

    Raises:
        FilesystemFailure: If the script cannot be written
    """
    script = profile_script(build_root)
    line = profile_line(runtime_path(build_root, installed_binary_dir))

    ensure_directory(script.parent)

    try:
        existing = script.read_text(encoding="utf-8") if script.exists() else ""
        if line in existing.splitlines():
            logger.debug(f"{script} already extends PATH, leaving it unchanged")
            return script

        with open(script, "a", encoding="utf-8") as f:
            if existing and not existing.endswith("\n"):
                f.write("\n")
            f.write(line + "\n")
    except OSError as e:
        raise FilesystemFailure(f"Failed to write startup script '{script}': {e}") from e

    logger.debug(f"Appended to {script}: {line}")
    return script
