import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest


def _termlinkc_command() -> list[str]:
    """Prefer the installed ``termlinkc`` script, else run the package module."""
    project_root = Path(__file__).parents[2]
    venv_termlinkc = project_root / ".venv" / "bin" / "termlinkc"
    if venv_termlinkc.exists():
        return [str(venv_termlinkc)]
    termlinkc_path = shutil.which("termlinkc")
    if termlinkc_path:
        return [termlinkc_path]
    return [sys.executable, "-m", "termlink"]


@pytest.fixture
def smoke_env(tmp_path):
    """Environment with HOME and TERMLINK_HOME isolated under tmp_path."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    env = os.environ.copy()
    env["HOME"] = str(home_dir)
    env["TERMLINK_HOME"] = str(home_dir / ".termlink")
    return env


@pytest.fixture
def termlinkc(smoke_env):
    """Run termlinkc with the isolated environment."""

    def run(*args: str, input_text: str | None = None) -> subprocess.CompletedProcess:
        return subprocess.run(
            [*_termlinkc_command(), *args],
            env=smoke_env,
            input=input_text,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return run
