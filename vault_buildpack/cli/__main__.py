"""
Entry point for running the CLI as a module.

Usage: python -m vault_buildpack.cli BUILD_DIR CACHE_DIR [ENV_DIR]
"""

from .parser import main

if __name__ == "__main__":
    main()
