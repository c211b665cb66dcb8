from datetime import datetime, timezone
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.partier.domain.scanner.ticket_validation import ScanResult, evaluate_ticket
from src.service.partier.domain.value_object.reference_number import ReferenceNumber


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ValidateTicketUseCase:
    """The decoded -> valid/invalid step of the door scanner."""

    def __init__(
        self,
        ticket_query_repo: ITicketQueryRepo,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.clock = clock or utc_now

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def validate(self, code: str) -> ScanResult:
        reference = ReferenceNumber.parse(code)
        if reference is None:
            Logger.base.info(f'🚫 [VALIDATE] Unrecognized payload {code!r}')
            return ScanResult.not_found(code.strip() if code else '')

        try:
            ticket = await self.ticket_query_repo.get_by_reference(
                reference_number=str(reference)
            )
        except CustomBaseError:
            raise
        except Exception as e:
            # a failed lookup reads as an unknown ticket at the door
            Logger.base.opt(exception=e).error(f'💥 [VALIDATE] Lookup failed for {reference}')
            return ScanResult.not_found(str(reference))

        return evaluate_ticket(ticket, now=self.clock(), code=str(reference))
