from abc import ABC, abstractmethod

from src.service.partier.domain.entity.ticket_entity import TicketEntity


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def create_with_inventory_hold(self, *, ticket: TicketEntity) -> TicketEntity:
        """
        Decrement the ticket type's inventory and insert the ticket atomically.

        Raises:
            SoldOutError: fewer than `ticket.quantity` units remain (nothing written)
            DuplicateReferenceError: `ticket.reference_number` is taken (nothing written)
        """
        pass
