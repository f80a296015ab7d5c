"""
Vault buildpack.

Installs a pinned HashiCorp Vault release into an application's build
workspace and puts it on the runtime PATH.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("vault-buildpack")
except PackageNotFoundError:
    __version__ = "0.1.0"

from vault_buildpack.buildpack.compile import compile_build
from vault_buildpack.config.settings import BuildpackSettings
from vault_buildpack.core.exceptions import BuildpackError

__all__ = ["__version__", "compile_build", "BuildpackSettings", "BuildpackError"]
