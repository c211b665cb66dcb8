"""
Conftest for pure unit tests - no external dependencies.

Override function/session fixtures to avoid database and HTTP client setup.
"""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
import pytest


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    """No-op: unit tests never touch the database"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - no FastAPI app needed"""
    yield MagicMock(spec=TestClient)


@pytest.fixture(autouse=True)
def clear_client_cookies() -> Generator[None, None, None]:
    yield
