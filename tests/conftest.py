"""Pytest configuration and shared fixtures."""

import pytest

from mailsrs.application.services import SRSService
from tests.fixtures.srs_fixtures import make_service


@pytest.fixture
def srs() -> SRSService:
    """SRS service creating 4 character hashes."""
    return make_service()


@pytest.fixture
def srs_hash_len() -> SRSService:
    """SRS service creating 20 character hashes."""
    return make_service(hash_length=20)
