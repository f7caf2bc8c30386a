from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep GREETER_* variables and a stray ``.env`` from leaking into tests."""
    for key in list(os.environ):
        if key.upper().startswith("GREETER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
