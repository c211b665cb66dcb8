from typing import AsyncContextManager, Callable

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DuplicateReferenceError, SoldOutError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.driven_adapter.model.ticket_model import TicketModel
from src.service.partier.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.partier.driven_adapter.repo.model_mapper import ticket_to_entity


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create_with_inventory_hold(self, *, ticket: TicketEntity) -> TicketEntity:
        """
        One transaction:
        1. Conditional decrement (`available >= quantity`) on the ticket type row
        2. Insert the ticket; the store stamps purchase_date

        Either both land or neither does. Concurrent buyers of the last units
        serialize on the ticket type row, so at most one sees a non-zero rowcount.
        """
        async with self.session_factory() as session:
            result = await session.execute(
                update(TicketTypeModel)
                .where(
                    TicketTypeModel.id == ticket.ticket_type_id,
                    TicketTypeModel.available >= ticket.quantity,
                )
                .values(available=TicketTypeModel.available - ticket.quantity)
            )
            if result.rowcount == 0:
                await session.rollback()
                raise SoldOutError('Not enough tickets available')

            ticket_model = TicketModel(
                user_id=ticket.user_id,
                event_id=ticket.event_id,
                ticket_type_id=ticket.ticket_type_id,
                quantity=ticket.quantity,
                total_price=ticket.total_price,
                reference_number=ticket.reference_number,
                payment_details=ticket.payment_details,
            )
            session.add(ticket_model)

            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if 'reference_number' in str(e.orig):
                    raise DuplicateReferenceError(ticket.reference_number) from e
                raise

            await session.refresh(ticket_model)
            return ticket_to_entity(ticket_model)
