"""
Centralized exception hierarchy for the Vault buildpack.

Every failure in the compile pipeline is fatal. Each exception carries the
process exit code the CLI should terminate with.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class BuildpackError(Exception):
    """Base exception for all buildpack errors."""

    exit_code = 1


# ============================================================================
# Invocation Exceptions
# ============================================================================


class ArgumentProtocolViolation(BuildpackError):
    """Raised when the platform passes more positional arguments than expected."""

    def __init__(self, argument_count: int, expected: int = 3):
        self.argument_count = argument_count
        self.expected = expected
        self.exit_code = 1 + argument_count
        super().__init__(
            f"Expected at most {expected} arguments but received {argument_count}. "
            "The build platform interface may have changed."
        )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(BuildpackError):
    """Base exception for configuration errors."""

    pass


class MissingConfiguration(ConfigurationError):
    """Raised when a required configuration variable is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"{name} is not set. Please add it to your app configuration, "
            f"e.g. heroku config:set {name}=<value>"
        )


class InvalidConfiguration(ConfigurationError):
    """Raised when a configuration value cannot be interpreted."""

    pass


# ============================================================================
# Artifact Exceptions
# ============================================================================


class TransferFailure(BuildpackError):
    """Raised when fetching the release archive fails."""

    pass


class ArchiveFailure(BuildpackError):
    """Raised when the release archive is corrupt or lacks the expected entry."""

    pass


class FilesystemFailure(BuildpackError):
    """Raised when creating, copying or moving files fails."""

    pass


class CacheLockTimeout(FilesystemFailure):
    """Raised when the cache lock cannot be acquired within timeout."""

    pass
