"""Shared pytest fixtures for pomotimer tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from pomotimer.database.db import configure_engine, init_db
from pomotimer.settings import SettingsStore
from pomotimer.timer.engine import TimerEngine

from helpers import FakeScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return SettingsStore()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def engine(qapp, store, scheduler):
    """Fresh TimerEngine on default settings with a virtual clock."""
    return TimerEngine(parent=None, store=store, scheduler=scheduler)


@pytest.fixture
def engine_no_store(qapp, scheduler):
    """Fresh TimerEngine with persistence disabled (pure state machine)."""
    return TimerEngine(parent=None, scheduler=scheduler)
