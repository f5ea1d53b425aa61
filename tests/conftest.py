"""
Root pytest configuration file for MCP Jira tests.
"""

import os
from unittest.mock import patch

import pytest


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def clean_env():
    """Run a test with an empty environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield
