"""
Door scanner state machine

    scanning --(non-empty payload)--> decoded --(lookup)--> valid | invalid
        ^                                                        |
        +------------------- scan_again() -----------------------+

The code reader is held only while in `scanning`; it is released as soon as
a payload is captured and on every exit path (errors, cancellation, close).
"""

from typing import Awaitable, Callable, Optional

from src.platform.exception.exceptions import CustomBaseError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.partier.domain.scanner.i_code_reader import ICodeReader
from src.service.partier.domain.scanner.scan_state import TERMINAL_SCAN_STATES, ScanState
from src.service.partier.domain.scanner.ticket_validation import ScanResult


class DeviceUnavailableError(CustomBaseError):
    def __init__(self, message: str = 'Unable to access camera. Please check permissions.') -> None:
        super().__init__(message, 503)


class InvalidScannerTransitionError(DomainError):
    def __init__(self, current: ScanState, action: str) -> None:
        super().__init__(f'Cannot {action} while scanner is {current.value}', 409)


class ScannerSession:
    def __init__(
        self,
        *,
        code_reader: ICodeReader,
        validate: Callable[[str], Awaitable[ScanResult]],
    ) -> None:
        self.code_reader = code_reader
        self.validate = validate
        self.state: ScanState = ScanState.SCANNING
        self.scanned_code: Optional[str] = None
        self.result: Optional[ScanResult] = None
        self.last_device_error: Optional[DeviceUnavailableError] = None

    async def __aenter__(self) -> 'ScannerSession':
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def start(self) -> None:
        """Acquire the device. On failure the session stays in `scanning` without a handle."""
        if self.state != ScanState.SCANNING:
            raise InvalidScannerTransitionError(self.state, 'start scanning')
        if self.code_reader.is_acquired:
            return
        try:
            await self.code_reader.acquire()
        except DeviceUnavailableError as e:
            self.last_device_error = e
            Logger.base.warning(f'📷 [SCANNER] Device unavailable: {e.message}')
            await self._release()
            raise
        self.last_device_error = None

    async def scan(self) -> Optional[ScanResult]:
        """
        Wait for one payload and validate it.

        Returns None when the device runs out of input; the session is then
        still `scanning` with the device released.
        """
        if self.state != ScanState.SCANNING:
            raise InvalidScannerTransitionError(self.state, 'scan')

        await self.start()
        try:
            code = await self._read_non_empty()
        finally:
            # Suspend scanning: the device is never held past this point
            await self._release()

        if code is None:
            return None

        self.scanned_code = code
        self.state = ScanState.DECODED
        Logger.base.info(f'🔎 [SCANNER] Decoded payload {code!r}')

        try:
            result = await self.validate(code)
        except Exception as e:
            # Lookup failures are reported the same way as an unknown ticket
            Logger.base.opt(exception=e).error(f'❌ [SCANNER] Lookup failed for {code!r}: {e}')
            result = ScanResult.not_found(code)

        self.result = result
        self.state = result.state
        Logger.base.info(f'🎟️ [SCANNER] {code!r} -> {result.state.value}: {result.message}')
        return result

    async def scan_again(self) -> None:
        if self.state not in TERMINAL_SCAN_STATES:
            raise InvalidScannerTransitionError(self.state, 'scan again')
        self.state = ScanState.SCANNING
        self.scanned_code = None
        self.result = None
        await self.start()

    async def close(self) -> None:
        await self._release()

    async def _read_non_empty(self) -> Optional[str]:
        while True:
            code = await self.code_reader.read_code()
            if code is None:
                return None
            if code.strip():
                return code.strip()

    async def _release(self) -> None:
        if self.code_reader.is_acquired:
            await self.code_reader.release()
