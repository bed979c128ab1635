"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['BENCHDOCS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['benchdocs.runner', 'benchdocs.cli']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


@pytest.fixture
def no_github_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
