import importlib
import os
import subprocess
import sys
from pathlib import Path

import pytest

from sshminisig import config

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.delenv("SSHMINISIG_LOG_LEVEL", raising=False)
    importlib.reload(config)


@pytest.mark.parametrize("value,expected", [
    ("debug", "DEBUG"),
    ("INFO", "INFO"),
    ("verbose", "WARNING"),
    ("", "WARNING"),
])
def test_log_level_from_env(monkeypatch, reload_config, value, expected):
    monkeypatch.setenv("SSHMINISIG_LOG_LEVEL", value)
    assert reload_config().LOG_LEVEL == expected


def test_unknown_log_level_does_not_break_cli():
    env = dict(os.environ, SSHMINISIG_LOG_LEVEL="verbose", PYTHONPATH=str(SRC))
    out = subprocess.run(
        [sys.executable, "-m", "sshminisig.cli", "decode", "eAQID"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert out.returncode == 0, out.stderr
    assert out.stdout == "ssh-ed25519 sha512 010203\n"
