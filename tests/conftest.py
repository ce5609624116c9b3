"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
import tomli_w

APP_ENTRIES = [
    ".DS_Store",
    ".localized",
    "Safari.app",
    "Utilities",
    "Visual Studio Code.app",
    "Firefox.app",
    "Docker.app",
]


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def apps_dir(tmp_path: Path) -> Path:
    """A fake /Applications with a mix of Apple and third-party entries."""
    root = tmp_path / "Applications"
    root.mkdir()
    for name in APP_ENTRIES:
        entry = root / name
        if name.endswith(".app") or name == "Utilities":
            entry.mkdir()
        else:
            entry.write_text("")
    return root


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Location for the report artifact."""
    return tmp_path / "output.out"


@pytest.fixture
def config_file(tmp_path: Path, apps_dir: Path) -> Path:
    """Config file pointing the workflow at the fake applications directory."""
    path = tmp_path / "config.toml"
    path.write_bytes(tomli_w.dumps({"apps_dir": str(apps_dir)}).encode())
    return path


@pytest.fixture
def fake_chflags(tmp_path: Path) -> tuple[Path, Path]:
    """Executable standing in for chflags.

    Logs ``flag|path`` for every call and fails with a message on stderr
    for any path containing "Broken".

    Returns:
        Tuple of (script path, call log path).
    """
    log = tmp_path / "chflags.log"
    script = tmp_path / "chflags"
    script.write_text(
        "#!/bin/sh\n"
        f"printf '%s|%s\\n' \"$1\" \"$2\" >> '{log}'\n"
        'case "$2" in\n'
        '  *Broken*) echo "chflags: $2: Operation not permitted" >&2; exit 1;;\n'
        "esac\n"
        "exit 0\n"
    )
    script.chmod(0o755)
    return script, log
