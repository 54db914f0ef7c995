"""Pytest configuration and shared fixtures."""

import pytest

from db.client import init_db, close_db


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "no_db: mark test to skip record store setup")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="function", autouse=True)
async def setup_db(request, tmp_path):
    """Initialize a throwaway record store in tmp_path for each test.

    Tests marked with @pytest.mark.no_db will skip store initialization.
    """
    if "no_db" in [marker.name for marker in request.node.iter_markers()]:
        yield
        return

    await init_db(str(tmp_path))
    yield
    await close_db()
