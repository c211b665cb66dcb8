#!/usr/bin/env python3
"""
Database Reset Script
Reset the Partier database structure

Features:
1. Drop & Recreate Database - completely wipe the database
   (PostgreSQL: DROP/CREATE DATABASE, SQLite: remove the file)
2. Run Alembic Migrations - create the latest schema

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import os
from pathlib import Path
import subprocess
import sys
import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR


DB_WAIT_SECONDS = 1


def _get_sync_url(async_url: str) -> str:
    """Convert async database URL to sync URL"""
    if async_url.startswith('postgresql+asyncpg://'):
        return async_url.replace('postgresql+asyncpg://', 'postgresql://')
    if async_url.startswith('sqlite+aiosqlite://'):
        return async_url.replace('sqlite+aiosqlite://', 'sqlite://')
    return async_url


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Parse database URL and return (server_url, db_name)"""
    sync_url = _get_sync_url(database_url)
    db_name = sync_url.split('/')[-1]
    server_url = sync_url.rsplit('/', 1)[0]
    return server_url, db_name


def _terminate_connections(conn, db_name: str) -> None:
    """Terminate all connections to the specified database"""
    conn.execute(
        text(f"""
        SELECT pg_terminate_backend(pid)
        FROM pg_stat_activity
        WHERE datname = '{db_name}' AND pid <> pg_backend_pid();
        """)
    )


def _drop_and_create_postgres(database_url: str) -> None:
    server_url, db_name = _parse_db_connection(database_url)
    print(f'Server URL: {server_url}')
    print(f'Database name: {db_name}')

    admin_engine = create_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')
    try:
        with admin_engine.connect() as conn:
            _terminate_connections(conn, db_name)

            conn.execute(text(f'DROP DATABASE IF EXISTS {db_name};'))
            print(f"   ✅ Database '{db_name}' dropped")

            time.sleep(DB_WAIT_SECONDS)

            conn.execute(text(f'CREATE DATABASE {db_name};'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        admin_engine.dispose()


def _remove_sqlite_file(database_url: str) -> None:
    database = make_url(database_url).database
    if not database or database == ':memory:':
        return
    db_file = Path(database)
    if db_file.exists():
        db_file.unlink()
        print(f"   ✅ SQLite file '{db_file}' removed")


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


def drop_and_recreate_database() -> None:
    """Completely drop and recreate database"""
    database_url = settings.DATABASE_URL_ASYNC
    print(f'Database URL: {make_url(database_url).render_as_string()}')

    print('🗑️ Dropping database...')
    if make_url(database_url).get_backend_name() == 'sqlite':
        _remove_sqlite_file(database_url)
    else:
        _drop_and_create_postgres(database_url)

    print('🏗️ Running database migrations...')
    _run_alembic_migrations()
    print('Database recreation completed!')


def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        drop_and_recreate_database()
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        sys.exit(1)

    print('=' * 50)
    print('✅ Database reset completed!')
    print('💡 To seed demo data, run: python script/seed_data.py')


if __name__ == '__main__':
    main()
