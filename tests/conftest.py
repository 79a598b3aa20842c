"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from aimax.constants import CLAUDE_DIR_ENV, SOURCE_DIR_ENV
from aimax.paths import InstallPaths


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """Keep tests away from the real ~/.claude."""
    monkeypatch.delenv(SOURCE_DIR_ENV, raising=False)
    monkeypatch.delenv(CLAUDE_DIR_ENV, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


@pytest.fixture
def write_file():
    """Create a file with content, making parent directories."""
    def _write(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def source_dir(tmp_path: Path, write_file) -> Path:
    """Source tree with one file set per component."""
    root = tmp_path / "source"
    write_file(root / "agents" / "test-agent.md", "# Test Agent")
    write_file(root / "agents" / "notes.json", "{}")
    write_file(root / "rules" / "test-rule.md", "# Test Rule")
    write_file(root / "commands" / "test-command.md", "# Test Command")
    write_file(root / "skills" / "test-skill" / "SKILL.md", "# Test Skill")
    write_file(root / "skills" / "test-skill" / "scripts" / "run.sh", "echo hi")
    return root


@pytest.fixture
def claude_dir(tmp_path: Path) -> Path:
    """Target Claude directory (not created)."""
    return tmp_path / ".claude"


@pytest.fixture
def paths(source_dir: Path, claude_dir: Path) -> InstallPaths:
    """InstallPaths pointing at the temporary source and target trees."""
    return InstallPaths(source_dir=source_dir, claude_dir=claude_dir)
