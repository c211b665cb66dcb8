from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.partier.domain.entity.ticket_entity import TicketEntity


class GetTicketUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> TicketEntity:
        ticket = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
        if ticket is None:
            raise NotFoundError('Ticket not found')
        return ticket

    @Logger.io
    async def get_by_reference(self, *, reference_number: str) -> TicketEntity:
        ticket = await self.ticket_query_repo.get_by_reference(reference_number=reference_number)
        if ticket is None:
            raise NotFoundError('Ticket not found')
        return ticket

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[TicketEntity]:
        tickets = await self.ticket_query_repo.list_by_user(user_id=user_id)
        Logger.base.info(f'✅ [LIST_TICKETS] Found {len(tickets)} tickets for user {user_id}')
        return tickets

    @Logger.io
    async def list_all(self) -> List[TicketEntity]:
        return await self.ticket_query_repo.list_all()
