from abc import ABC, abstractmethod
from typing import Optional


class ICodeReader(ABC):
    """A device that decodes QR/barcode payloads (camera, keyboard-wedge scanner, ...)."""

    @property
    @abstractmethod
    def is_acquired(self) -> bool:
        pass

    @abstractmethod
    async def acquire(self) -> None:
        """Open the device. Raises DeviceUnavailableError when it cannot be opened."""
        pass

    @abstractmethod
    async def read_code(self) -> Optional[str]:
        """Block until the next decoded payload; None once the device has no more input."""
        pass

    @abstractmethod
    async def release(self) -> None:
        """Close the device. Safe to call when not acquired."""
        pass
