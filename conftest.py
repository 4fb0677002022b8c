"""pytest common configuration."""

import os

import pytest

# Settings read by the HTTP layer during tests
os.environ["SRS_SECRET_KEY"] = "aSecretKey"
os.environ["TESTING"] = "1"

@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Select the anyio backend."""
    return "asyncio"
