"""Shared fixtures for the console test suite."""

import os
import sys

import pytest

# Add app/ to path so `sqltutor` imports without an install
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, os.path.join(project_root, "app"))

from sqltutor.controller import ConsoleController
from sqltutor.services.sqlite_engine import SQLiteQueryEngine

from console_helpers import FakeEngine


@pytest.fixture
def engine():
    """Fresh in-memory sample database."""
    eng = SQLiteQueryEngine()
    yield eng
    eng.close()


@pytest.fixture
def controller(engine):
    return ConsoleController(engine)


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def fake_controller(fake_engine):
    return ConsoleController(fake_engine)
