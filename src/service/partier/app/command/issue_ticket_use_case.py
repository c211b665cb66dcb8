"""
Issue Ticket Use Case

Flow:
1. Resolve the owner (caller, or another user when the caller is an organizer)
2. Load event + ticket type, check they belong together
3. Price on the server; a client-sent total must match it
4. Charge the (simulated) payment processor
5. Allocate a reference number and persist with an atomic inventory hold,
   regenerating the reference on collision up to TICKET_REFERENCE_MAX_ATTEMPTS
"""

from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    DomainError,
    DuplicateReferenceError,
    ForbiddenError,
    NotFoundError,
    PaymentDeclinedError,
    ReferenceAllocationError,
    SoldOutError,
)
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.app.interface.i_payment_processor import IPaymentProcessor
from src.service.partier.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.domain.value_object.payment_details import (
    PaymentDetails,
    payment_method_name,
)
from src.service.partier.domain.value_object.price_breakdown import PriceBreakdown, round_money
from src.service.partier.domain.value_object.reference_number import ReferenceNumber


class IssueTicketUseCase:
    def __init__(
        self,
        *,
        event_catalog_query_repo: IEventCatalogQueryRepo,
        ticket_command_repo: ITicketCommandRepo,
        user_query_repo: IUserQueryRepo,
        payment_processor: IPaymentProcessor,
        max_reference_attempts: Optional[int] = None,
    ) -> None:
        self.event_catalog_query_repo = event_catalog_query_repo
        self.ticket_command_repo = ticket_command_repo
        self.user_query_repo = user_query_repo
        self.payment_processor = payment_processor
        if max_reference_attempts is None:
            max_reference_attempts = settings.TICKET_REFERENCE_MAX_ATTEMPTS
        if max_reference_attempts < 1:
            raise ValueError('max_reference_attempts must be at least 1')
        self.max_reference_attempts = max_reference_attempts

    @classmethod
    @inject
    def depends(
        cls,
        event_catalog_query_repo: IEventCatalogQueryRepo = Depends(
            Provide[Container.event_catalog_query_repo]
        ),
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        payment_processor: IPaymentProcessor = Depends(Provide[Container.payment_processor]),
    ) -> Self:
        return cls(
            event_catalog_query_repo=event_catalog_query_repo,
            ticket_command_repo=ticket_command_repo,
            user_query_repo=user_query_repo,
            payment_processor=payment_processor,
        )

    async def _resolve_owner_id(self, buyer: UserEntity, user_id: Optional[int]) -> int:
        if user_id is None or user_id == buyer.id:
            if buyer.id is None:
                raise DomainError('Invalid user ID')
            return buyer.id

        if not buyer.is_organizer:
            raise ForbiddenError('Cannot purchase tickets for another user')
        if await self.user_query_repo.get_by_id(user_id) is None:
            raise NotFoundError('User not found')
        return user_id

    @Logger.io
    async def issue(
        self,
        *,
        buyer: UserEntity,
        event_id: int,
        ticket_type_id: int,
        quantity: int,
        total_price: Optional[Decimal] = None,
        user_id: Optional[int] = None,
        payment_method: Optional[str] = None,
    ) -> TicketEntity:
        owner_id = await self._resolve_owner_id(buyer, user_id)
        TicketEntity.validate_quantity(quantity)

        event = await self.event_catalog_query_repo.get_event(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')

        ticket_type = await self.event_catalog_query_repo.get_ticket_type(
            ticket_type_id=ticket_type_id
        )
        if ticket_type is None:
            raise NotFoundError('Ticket type not found')
        if not ticket_type.belongs_to(event_id):
            raise DomainError('Ticket type does not belong to this event')

        # Fail before charging; the conditional decrement at insert time is the real guard
        if ticket_type.available < quantity:
            raise SoldOutError('Not enough tickets available')

        price = PriceBreakdown.for_purchase(unit_price=ticket_type.price, quantity=quantity)
        if total_price is not None and round_money(total_price) != price.total:
            Logger.base.warning(
                f'⚠️ [ISSUE_TICKET] Total mismatch: client={total_price} server={price.total}'
            )
            raise DomainError('Total price mismatch')

        payment = await self.payment_processor.charge(amount=price.total, method=payment_method)
        if not payment.success:
            raise PaymentDeclinedError(payment.error or 'Payment failed')

        payment_details = PaymentDetails(
            method=payment_method_name(payment_method),
            price=price,
            transaction_id=payment.transaction_id,
            last4=payment.last4,
        )
        ticket = TicketEntity(
            user_id=owner_id,
            event_id=event_id,
            ticket_type_id=ticket_type_id,
            quantity=quantity,
            total_price=price.total,
            payment_details=payment_details.to_dict(),
        )

        issued = await self._persist_with_unique_reference(ticket)
        Logger.base.info(
            f'🎫 [ISSUE_TICKET] {issued.reference_number} issued to user {owner_id} '
            f'(event={event_id}, type={ticket_type_id}, qty={quantity}, total={price.total})'
        )
        return issued

    async def _persist_with_unique_reference(self, ticket: TicketEntity) -> TicketEntity:
        for attempt in range(1, self.max_reference_attempts + 1):
            candidate = ticket.with_reference(str(ReferenceNumber.generate()))
            try:
                return await self.ticket_command_repo.create_with_inventory_hold(ticket=candidate)
            except DuplicateReferenceError as e:
                Logger.base.warning(
                    f'🔁 [ISSUE_TICKET] Reference {e.reference_number} taken '
                    f'(attempt {attempt}/{self.max_reference_attempts})'
                )

        raise ReferenceAllocationError()
