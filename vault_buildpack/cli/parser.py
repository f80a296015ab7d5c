"""
Vault buildpack CLI argument parser.

The build platform invokes the compile step with positional directories:

    vault-buildpack-compile BUILD_DIR CACHE_DIR [ENV_DIR]

Exit codes:
    0           success
    1           missing configuration or any other build failure
    2           usage error (fewer than two directories)
    1 + N       N positional arguments received where at most 3 are expected
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from vault_buildpack import __version__
from vault_buildpack.buildpack.compile import compile_build
from vault_buildpack.core.exceptions import ArgumentProtocolViolation, BuildpackError

logger = logging.getLogger(__name__)

EXPECTED_ARGUMENTS = 3


class CLI:
    """Vault buildpack command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create the argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="vault-buildpack-compile",
            description="Install HashiCorp Vault into an application build",
            epilog="VAULT_VERSION must be set in ENV_DIR",
        )

        parser.add_argument(
            "--version", action="version", version=f"vault-buildpack {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        parser.add_argument("build_dir", type=Path, help="Build workspace directory")
        parser.add_argument("cache_dir", type=Path, help="Persistent cache directory")
        parser.add_argument(
            "env_dir",
            type=Path,
            nargs="?",
            help="Configuration-variable directory",
        )
        # Captured so the argument protocol check can report them
        parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv[1:])

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the compile step.

        Args:
            args: Command-line arguments (default: sys.argv[1:])

        Returns:
            Exit code
        """
        parsed_args = self.parse_args(args)
        self._configure_logging(parsed_args)

        try:
            self._check_argument_protocol(parsed_args)
            compile_build(
                parsed_args.build_dir, parsed_args.cache_dir, parsed_args.env_dir
            )
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except BuildpackError as e:
            logger.error(f" !     {e}")
            if parsed_args.verbose:
                traceback.print_exc(file=sys.stdout)
            return e.exit_code
        except Exception as e:
            logger.error(f" !     Unexpected error: {e}")
            if parsed_args.verbose:
                traceback.print_exc(file=sys.stdout)
            return 1

        return 0

    def _check_argument_protocol(self, args: argparse.Namespace) -> None:
        """
        Reject invocations with more positional arguments than expected.

        Raises:
            ArgumentProtocolViolation: If extra positional arguments were given
        """
        if args.extra:
            raise ArgumentProtocolViolation(
                EXPECTED_ARGUMENTS + len(args.extra), expected=EXPECTED_ARGUMENTS
            )

    def _configure_logging(self, args: argparse.Namespace) -> None:
        """
        Configure logging based on verbose/quiet flags.

        All output goes to stdout, which the build platform streams to the user.
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stdout,
            force=True,
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
