"""Test fixtures for the Vault buildpack tests.

- releases: Vault release archives and a mocked release host
- directories: Build, cache and configuration-variable directories
"""

__all__ = [
    "releases",
    "directories",
]
