#!/usr/bin/env python3
"""
Door Scanner Script
Validate tickets at the venue entrance from a keyboard-wedge / piped reader

Usage:
    python script/gate_scanner.py            # type or scan one code per line
    cat codes.txt | python script/gate_scanner.py

Each line is treated as a decoded QR payload. After every verdict the
scanner goes straight back to scanning; EOF (Ctrl-D) ends the session.
"""

import asyncio
import sys

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.query.validate_ticket_use_case import ValidateTicketUseCase
from src.service.partier.domain.scanner.scanner_session import (
    DeviceUnavailableError,
    ScannerSession,
)
from src.service.partier.driven_adapter.device.stream_code_reader import StreamCodeReader
from src.service.partier.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl


async def run_gate(database: Database) -> int:
    validate_ticket = ValidateTicketUseCase(ticket_query_repo=TicketQueryRepoImpl(database.session))
    session = ScannerSession(
        code_reader=StreamCodeReader(sys.stdin),
        validate=validate_ticket.validate,
    )

    scanned = 0
    async with session:
        while True:
            result = await session.scan()
            if result is None:
                break

            scanned += 1
            badge = '✅' if result.is_valid else '❌'
            print(f'{badge} {result.code or "?"}: {result.message}')
            if result.ticket is not None:
                print(
                    f'   qty={result.ticket.quantity} '
                    f'purchased={result.ticket.purchase_date}'
                )
            await session.scan_again()

    return scanned


async def main() -> None:
    print('📷 Gate scanner ready (one code per line, Ctrl-D to stop)')
    print('=' * 50)

    database = Database()
    try:
        scanned = await run_gate(database)
    except DeviceUnavailableError as e:
        Logger.base.error(f'📷 [GATE] {e.message}')
        sys.exit(1)
    finally:
        await database.dispose()

    print('=' * 50)
    print(f'👋 Scanned {scanned} codes')


if __name__ == '__main__':
    asyncio.run(main())
