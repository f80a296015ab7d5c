"""
Vault buildpack steps.

Provides the cache, installer and startup-profile steps and the compile
pipeline that chains them.
"""

from .cache import CacheStore, cache_key, cache_path, ensure_cached
from .installer import install, install_dir
from .profile import profile_line, profile_script, runtime_path, write_profile_fragment
from .compile import compile_build

__all__ = [
    "CacheStore",
    "cache_key",
    "cache_path",
    "ensure_cached",
    "install",
    "install_dir",
    "profile_line",
    "profile_script",
    "runtime_path",
    "write_profile_fragment",
    "compile_build",
]
