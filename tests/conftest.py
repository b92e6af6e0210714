"""
Pytest configuration and fixtures for test isolation.
"""
import logging
import os

import pytest

from hostel.config.environment import EnvironmentVariables
from hostel.models import Student
from hostel.utils import logging_config as logging_config_module


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary directory so no project config is found
    2. Removing hostel environment variables
    """
    monkeypatch.chdir(tmp_path)
    for name in EnvironmentVariables.get_variable_documentation():
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by the code under test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
    logging_config_module.logging_config = logging_config_module.LoggingConfig()


@pytest.fixture
def john():
    return Student(name="John Doe", distance=15, fee_paid=True)


@pytest.fixture
def jane():
    return Student(name="Jane", distance=5, fee_paid=True)


@pytest.fixture
def unpaid():
    return Student(name="Sam", distance=15, fee_paid=False)
