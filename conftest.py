import pathlib

import pytest
from faker import Faker

from opmlkit.config import get_settings
from opmlkit.http_client import get_client


@pytest.fixture(scope="session")
def faker():
    faker = Faker()
    yield faker
    faker.unique.clear()


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch):
    """Settings and the default client are re-read from a clean environment."""
    for name in (
        "OPMLKIT_USER_AGENT",
        "OPMLKIT_HTTP_TIMEOUT",
        "OPMLKIT_FOLLOW_REDIRECTS",
        "OPMLKIT_INDENT",
        "OPMLKIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_client.cache_clear()


@pytest.fixture(scope="session")
def mocks_dir() -> pathlib.Path:
    return pathlib.Path(__file__).parent / "opmlkit" / "tests" / "mocks"


@pytest.fixture
def read_mock_file(mocks_dir):
    return lambda mock_filename="feeds.opml": (mocks_dir / mock_filename).read_bytes()
