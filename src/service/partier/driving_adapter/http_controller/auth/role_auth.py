from fastapi import Depends

from src.platform.exception.exceptions import ForbiddenError
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.user_controller import (
    get_current_user as get_user_from_controller,
)


class RoleAuthStrategy:
    @staticmethod
    def can_view_tickets_of(user: UserEntity, owner_id: int) -> bool:
        return user.id == owner_id or user.is_organizer


async def get_current_user(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    return current_user


async def require_organizer(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    current_user.validate_organizer()
    return current_user


async def require_super_admin(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    current_user.validate_super_admin()
    return current_user


def ensure_can_view_tickets_of(current_user: UserEntity, owner_id: int) -> None:
    if not RoleAuthStrategy.can_view_tickets_of(current_user, owner_id):
        raise ForbiddenError('Forbidden - Cannot view tickets of another user')
