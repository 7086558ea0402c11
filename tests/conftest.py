"""
Core configuration
"""

import pytest
import respx
import structlog

from groupsio.config.settings import ClientSettings
from groupsio.toolkit.client import GroupsIOApiClient


@pytest.fixture
def base_url():
    yield "https://groups.test/api/v1/"


@pytest.fixture
def settings(base_url):
    yield ClientSettings(api_key="test-api-key", base_url=base_url, max_results=2)


@pytest.fixture
def logger():
    yield structlog.get_logger()


@pytest.fixture
def rsps():
    with respx.mock(assert_all_called=False) as rsps:
        yield rsps


@pytest.fixture
def client(settings, logger):
    with GroupsIOApiClient(settings=settings, log=logger) as client:
        yield client


@pytest.fixture
def grant(rsps, base_url):
    """
    Mock `getperms` to grant exactly the given capabilities.
    """

    def grant_permissions(**flags):
        return rsps.get(f"{base_url}getperms").respond(
            json={"object": "permissions", **flags}
        )

    yield grant_permissions
