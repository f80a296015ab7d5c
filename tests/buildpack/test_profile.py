"""
Tests for the startup profile fragment.
"""

import pytest

from vault_buildpack.buildpack.profile import (
    profile_line,
    profile_script,
    runtime_path,
    write_profile_fragment,
)
from vault_buildpack.core.exceptions import FilesystemFailure

EXPECTED_LINE = "export PATH=$PATH:$HOME/.vault-buildpack/"


class TestRuntimePath:
    """Test build-time to runtime path translation."""

    def test_relative_to_home(self, tmp_path):
        assert runtime_path(tmp_path, tmp_path / ".vault-buildpack") == (
            "$HOME/.vault-buildpack/"
        )

    def test_nested(self, tmp_path):
        assert runtime_path(tmp_path, tmp_path / "a" / "bin") == "$HOME/a/bin/"

    def test_build_root_itself(self, tmp_path):
        assert runtime_path(tmp_path, tmp_path) == "$HOME/"

    def test_outside_build_root(self, tmp_path):
        build = tmp_path / "build"
        build.mkdir()

        with pytest.raises(FilesystemFailure, match="outside the build directory"):
            runtime_path(build, tmp_path / "elsewhere")


class TestProfileLine:
    def test_line(self):
        assert profile_line("$HOME/.vault-buildpack/") == EXPECTED_LINE


class TestWriteProfileFragment:
    """Test write_profile_fragment function."""

    def test_creates_script(self, tmp_path):
        script = write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")

        assert script == tmp_path / ".profile.d" / "vault.sh"
        assert script == profile_script(tmp_path)
        assert script.read_text() == EXPECTED_LINE + "\n"

    def test_no_absolute_build_path(self, tmp_path):
        """Test the build-time location never leaks into the runtime script."""
        script = write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")

        assert str(tmp_path) not in script.read_text()

    def test_rerun_keeps_single_line(self, tmp_path):
        write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")
        script = write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")

        assert script.read_text().splitlines().count(EXPECTED_LINE) == 1

    def test_appends_to_existing_content(self, tmp_path):
        """Test existing lines are preserved and the new line appended."""
        script = profile_script(tmp_path)
        script.parent.mkdir()
        script.write_text("export VAULT_ADDR=https://vault.example.com")

        write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")

        assert script.read_text().splitlines() == [
            "export VAULT_ADDR=https://vault.example.com",
            EXPECTED_LINE,
        ]

    def test_other_profile_scripts_untouched(self, tmp_path):
        other = tmp_path / ".profile.d" / "python.sh"
        other.parent.mkdir()
        other.write_text("export PYTHONHOME=$HOME/.heroku/python\n")

        write_profile_fragment(tmp_path, tmp_path / ".vault-buildpack")

        assert other.read_text() == "export PYTHONHOME=$HOME/.heroku/python\n"
