"""
Vault release fixtures.

Provides a fake Vault binary, its zip archive and helpers for registering
the archive with the `responses` HTTP mock.
"""

from dataclasses import dataclass

import pytest
import responses

from tests.utils.helpers import make_vault_zip

TEST_VERSION = "1.2.3"
RELEASE_HOST = "https://releases.hashicorp.com/vault"


def release_url(version: str = TEST_VERSION, host: str = RELEASE_HOST) -> str:
    return f"{host}/{version}/vault_{version}_linux_amd64.zip"


@dataclass
class VaultRelease:
    """A fake release: the binary content and the archive that ships it."""

    version: str
    binary: bytes
    archive: bytes

    @property
    def url(self) -> str:
        return release_url(self.version)

    def register(self, status: int = 200) -> None:
        """Serve the archive from the mocked release host."""
        responses.add(
            responses.GET,
            self.url,
            body=self.archive,
            status=status,
            content_type="application/zip",
        )


@pytest.fixture
def vault_release() -> VaultRelease:
    """Release 1.2.3 with a small fake executable."""
    binary = b"#!/bin/sh\necho Vault v1.2.3\n"
    return VaultRelease(
        version=TEST_VERSION,
        binary=binary,
        archive=make_vault_zip(binary),
    )
