"""
Pytest configuration and shared fixtures for FastBatch tests.
"""

import io
import sys

import pytest
from faker import Faker
from rich.console import Console

from fast_batch.application import Application
from fast_batch.core.output import ConsoleOutput, Verbosity

fake = Faker()


class RecordingStyle:
    """Stands in for BatchStyle: records calls and answers questions from a list."""

    def __init__(self, answers=None):
        self.calls = []
        self.answers = list(answers or [])

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, *args))
        return record

    def ask(self, question):
        self.calls.append(("ask", question))
        return self.answers.pop(0)

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def verbose_output(console):
    return ConsoleOutput(console, Verbosity.VERBOSE)


@pytest.fixture
def normal_output(console):
    return ConsoleOutput(console, Verbosity.NORMAL)


@pytest.fixture
def recording_style():
    """Factory for RecordingStyle: recording_style(answers=[...])."""
    return RecordingStyle


@pytest.fixture
def sample_data():
    """Provide sample data for tests."""
    return {
        "name": fake.user_name(),
        "words": fake.words(nb=3),
    }


@pytest.fixture(autouse=True)
def reset_application():
    Application().reset()
    yield
    Application().reset()


@pytest.fixture
def purge_app_modules():
    """Forget modules imported from a temporary project's `app` package."""
    def purge():
        for module_name in list(sys.modules):
            if module_name == "app" or module_name.startswith("app."):
                del sys.modules[module_name]
    purge()
    yield
    purge()
