"""Configuration variable reader.

The build platform materializes each configuration variable as one file in
the environment directory: the file name is the variable name and the whole
file content is the value.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from vault_buildpack.core.exceptions import (
    FilesystemFailure,
    InvalidConfiguration,
    MissingConfiguration,
)

logger = logging.getLogger(__name__)


def _read_variable(env_dir: Optional[Path], name: str) -> Optional[str]:
    """Return the raw value of a variable, or None if it is absent or empty."""
    if env_dir is None:
        return None

    path = Path(env_dir) / name
    if not path.is_file():
        return None

    try:
        value = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FilesystemFailure(
            f"Failed to read configuration variable {name}: {e}"
        ) from e
    except UnicodeDecodeError as e:
        raise InvalidConfiguration(f"{name} is not valid UTF-8 text") from e

    return value or None


def read_required_variables(
    env_dir: Optional[Path], names: Iterable[str]
) -> Dict[str, str]:
    """
    Read required configuration variables.

    Values are returned verbatim. A missing environment directory (or None)
    is treated as if nothing were configured, so every name is missing.

    Args:
        env_dir: Configuration-variable directory
        names: Variable names that must be present

    Returns:
        Mapping of name to value, containing every requested name

    Raises:
        MissingConfiguration: For the first variable that is absent or empty
        InvalidConfiguration: If a value file is not valid UTF-8

    Example:
        >>> read_required_variables(Path("/tmp/env"), ["VAULT_VERSION"])
        {'VAULT_VERSION': '1.2.3'}
    """
    if env_dir is None or not Path(env_dir).is_dir():
        logger.debug(f"Configuration directory not found: {env_dir}")

    values = {}
    for name in names:
        value = _read_variable(env_dir, name)
        if value is None:
            raise MissingConfiguration(name)
        values[name] = value

    return values


def read_optional_variables(
    env_dir: Optional[Path], names: Iterable[str]
) -> Dict[str, str]:
    """
    Read optional configuration variables.

    Returns:
        Mapping of name to value for the variables that are present
    """
    values = {}
    for name in names:
        value = _read_variable(env_dir, name)
        if value is not None:
            values[name] = value
    return values
