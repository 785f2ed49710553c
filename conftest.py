import os
import sys
from unittest import mock

import pytest

# The packages live at the repository root (flat layout)
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))


@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove every MONGODB_* variable so settings only see what a test sets.

    The whole environment is restored afterwards, including variables that
    a test loaded from a .env file.
    """
    with mock.patch.dict(os.environ):
        for name in list(os.environ):
            if name.upper().startswith("MONGODB_"):
                monkeypatch.delenv(name)
        yield monkeypatch
