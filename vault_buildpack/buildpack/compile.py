"""
The compile step of the Vault buildpack.

Runs the install pipeline once per build, strictly in order:

    read configuration -> ensure cached -> install -> write profile

Any failure raises a BuildpackError and aborts the remaining steps.
"""

import logging
from pathlib import Path
from typing import Optional

from vault_buildpack.buildpack.cache import CacheStore
from vault_buildpack.buildpack.installer import install
from vault_buildpack.buildpack.profile import write_profile_fragment
from vault_buildpack.config.reader import read_required_variables
from vault_buildpack.config.settings import BuildpackSettings, VERSION_VARIABLE

logger = logging.getLogger(__name__)


def compile_build(
    build_dir: Path,
    cache_dir: Path,
    env_dir: Optional[Path],
    settings: Optional[BuildpackSettings] = None,
) -> Path:
    """
    Provision Vault into a build workspace.

    Args:
        build_dir: Build workspace; becomes $HOME at runtime
        cache_dir: Persistent cache shared across builds
        env_dir: Configuration-variable directory (None means nothing configured)
        settings: Override settings; read from env_dir when None

    Returns:
        Path to the installed binary

    Raises:
        MissingConfiguration: If VAULT_VERSION is not configured
        BuildpackError: If any later step fails
    """
    build_dir = Path(build_dir)
    cache_dir = Path(cache_dir)

    logger.info("-----> Reading configuration")
    version = read_required_variables(env_dir, [VERSION_VARIABLE])[VERSION_VARIABLE]
    if settings is None:
        settings = BuildpackSettings.from_env_dir(env_dir)

    logger.info(f"-----> Installing Vault {version}")
    cached = CacheStore(cache_dir, settings).ensure_cached(version)

    logger.info("       Installing binary")
    installed = install(build_dir, cached)

    logger.info("       Configuring PATH")
    write_profile_fragment(build_dir, installed.parent)

    logger.info(f"       Vault {version} installed at {installed}")
    return installed
