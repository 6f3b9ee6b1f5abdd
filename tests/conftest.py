"""Test configuration and fixtures."""

import pytest

from tokensplit.config.loader import load_config_from_string


WHITESPACE = [' ', '\n', '\t', '\r']


@pytest.fixture
def whitespace():
    """Provide the usual whitespace separator set."""
    return WHITESPACE


@pytest.fixture
def sample_config_yaml():
    """Provide sample splitter settings as YAML."""
    return """
tokenizer:
  separators: [" ", "\\n", "\\t"]
  encoding: utf-8
  errors: strict
terminators: [".", "!", "?"]
quotes: ['"']
continue_on_ellipsis: true
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded settings object for testing."""
    return load_config_from_string(sample_config_yaml)


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that sums counters and keeps observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
