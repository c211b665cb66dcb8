from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.driven_adapter.model.ticket_model import TicketModel
from src.service.partier.driven_adapter.repo.model_mapper import ticket_to_entity


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            ticket_model = await session.get(TicketModel, ticket_id)
            return ticket_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def get_by_reference(self, *, reference_number: str) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel).where(TicketModel.reference_number == reference_number)
            )
            ticket_model = result.scalar_one_or_none()
            return ticket_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .where(TicketModel.user_id == user_id)
                .order_by(TicketModel.purchase_date.desc(), TicketModel.id.desc())
            )
            return [ticket_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_all(self) -> List[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(TicketModel).order_by(TicketModel.id))
            return [ticket_to_entity(model) for model in result.scalars()]
