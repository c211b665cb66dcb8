from typing import Optional, TextIO

import anyio.to_thread

from src.service.partier.domain.scanner.i_code_reader import ICodeReader
from src.service.partier.domain.scanner.scanner_session import DeviceUnavailableError


class StreamCodeReader(ICodeReader):
    """
    Keyboard-wedge style reader: one decoded code per line of a text stream.

    The stream is owned by the caller; release() only drops the handle.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._acquired = False

    @property
    def is_acquired(self) -> bool:
        return self._acquired

    async def acquire(self) -> None:
        if self._stream.closed or not self._stream.readable():
            raise DeviceUnavailableError('Code reader stream is not readable')
        self._acquired = True

    async def read_code(self) -> Optional[str]:
        if not self._acquired:
            raise DeviceUnavailableError('Code reader is not acquired')
        line = await anyio.to_thread.run_sync(self._stream.readline)
        if line == '':
            return None  # EOF
        return line.rstrip('\r\n')

    async def release(self) -> None:
        self._acquired = False
