"""Command-line interface for the Vault buildpack."""

from .parser import CLI, main

__all__ = ["CLI", "main"]
