"""
Smoke tests against the real release host.

Run with: pytest --integration tests/e2e
"""

import subprocess

import pytest

from vault_buildpack.cli.parser import CLI
from tests.utils.helpers import write_config


@pytest.mark.integration
def test_install_real_release(buildpack_dirs):
    """Install a published Vault release and run it."""
    dirs = buildpack_dirs
    write_config(dirs.env, VAULT_VERSION="1.15.6")

    assert CLI().run(dirs.as_args()) == 0

    vault = dirs.build / ".vault-buildpack" / "vault"
    result = subprocess.run(
        [str(vault), "version"], capture_output=True, text=True, check=True
    )
    assert "Vault v1.15.6" in result.stdout
