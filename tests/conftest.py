"""Shared fixtures for the rental tests."""

import pytest


class RecordingLog:
    """In-memory stand-in for ActivityLog."""

    is_open = True

    def __init__(self):
        self.lines = []

    def log(self, line):
        self.lines.append(line)


@pytest.fixture
def log():
    return RecordingLog()
