"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (migrated with alembic once per session)
- Table cleanup between integration tests
- The shared TestClient and user fixtures (regular user, organizer, super admin)

Architecture:
- Unit tests (test/**/unit/): Override fixtures with mocks in their own conftest.py
- Integration tests: Use the real app and database with cleanup per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL must be in place first
# =============================================================================
import os
from pathlib import Path


TEST_DIR = Path(__file__).parent
TEST_DB_FILE = TEST_DIR / 'partier_test.db'
TEST_DATABASE_URL = f'sqlite+aiosqlite:///{TEST_DB_FILE}'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = TEST_DATABASE_URL
    os.environ['AUTO_CREATE_TABLES'] = 'false'
    os.environ['PAYMENT_FAILURE_RATE'] = '0'
    os.environ['SESSION_COOKIE_SECURE'] = 'false'
    os.environ.setdefault('SECRET_KEY', 'partier_test_secret_key')

    # Create test log directory
    test_log_dir = TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from dotenv import load_dotenv  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from test.shared.utils import create_user, login_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_FULL_NAME,
    ADMIN_USERNAME,
    DEFAULT_PASSWORD,
    ORGANIZER_EMAIL,
    ORGANIZER_FULL_NAME,
    ORGANIZER_USERNAME,
    USER_EMAIL,
    USER_FULL_NAME,
    USER_USERNAME,
)


# Anything not pinned above (log level, timezone, ...) comes from the env files
load_dotenv(TEST_DIR.parent / ('.env' if (TEST_DIR.parent / '.env').exists() else '.env.example'))

# Child tables first so foreign keys never block a delete
TABLES_IN_DELETE_ORDER = (
    'user_session',
    'ticket',
    'performer',
    'ticket_type',
    'event',
    'user',
)


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _sync_database_url() -> str:
    return TEST_DATABASE_URL.replace('sqlite+aiosqlite://', 'sqlite://')


def _setup_test_database() -> None:
    # Start from an empty file and migrate to head
    TEST_DB_FILE.unlink(missing_ok=True)

    alembic_cfg = Config(str(TEST_DIR.parent / 'alembic.ini'))
    alembic_cfg.set_main_option('sqlalchemy.url', TEST_DATABASE_URL)
    command.upgrade(alembic_cfg, 'head')


def _clean_all_tables() -> None:
    engine = create_engine(_sync_database_url(), connect_args={'timeout': 30})
    try:
        with engine.begin() as conn:
            for table in TABLES_IN_DELETE_ORDER:
                conn.execute(text(f'DELETE FROM "{table}"'))
            # Restart AUTOINCREMENT counters when the table exists
            if conn.execute(
                text("SELECT name FROM sqlite_master WHERE name = 'sqlite_sequence'")
            ).first():
                conn.execute(text('DELETE FROM sqlite_sequence'))
    finally:
        engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = create_engine(_sync_database_url(), connect_args={'timeout': 30})
        try:
            with engine.begin() as conn:
                result = conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
            return None
        finally:
            engine.dispose()

    return _execute


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    # Lazily get client to avoid creating it for unit tests
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# User Fixtures (function-scoped: tables are wiped before every test)
# =============================================================================
@pytest.fixture
def regular_user(client: TestClient, clean_database: None) -> dict[str, Any]:
    created = create_user(client, USER_USERNAME, DEFAULT_PASSWORD, USER_EMAIL, USER_FULL_NAME)
    client.cookies.clear()
    return created


@pytest.fixture
def organizer_user(
    client: TestClient, clean_database: None, execute_sql_statement: Callable[..., Any]
) -> dict[str, Any]:
    created = create_user(
        client, ORGANIZER_USERNAME, DEFAULT_PASSWORD, ORGANIZER_EMAIL, ORGANIZER_FULL_NAME
    )
    execute_sql_statement(
        'UPDATE "user" SET is_organizer = 1 WHERE id = :id', {'id': created['id']}
    )
    client.cookies.clear()
    return {**created, 'isOrganizer': True}


@pytest.fixture
def super_admin_user(
    client: TestClient, clean_database: None, execute_sql_statement: Callable[..., Any]
) -> dict[str, Any]:
    created = create_user(client, ADMIN_USERNAME, DEFAULT_PASSWORD, ADMIN_EMAIL, ADMIN_FULL_NAME)
    execute_sql_statement(
        'UPDATE "user" SET is_organizer = 1, is_super_admin = 1 WHERE id = :id',
        {'id': created['id']},
    )
    client.cookies.clear()
    return {**created, 'isOrganizer': True, 'isSuperAdmin': True}


@pytest.fixture
def login_as(client: TestClient) -> Callable[[dict[str, Any]], Any]:
    def _login(user: dict[str, Any]) -> Any:
        client.cookies.clear()
        return login_user(client, user['username'], DEFAULT_PASSWORD)

    return _login
