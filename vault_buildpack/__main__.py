"""
Entry point for running the buildpack compile step as a module.

Usage: python -m vault_buildpack BUILD_DIR CACHE_DIR [ENV_DIR]
"""

from vault_buildpack.cli.parser import main

if __name__ == "__main__":
    main()
