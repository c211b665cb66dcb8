from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from src.platform.constant.route_constant import (
    ORGANIZER_CREATE,
    USER_LIST,
    USER_ORGANIZER_STATUS,
    USER_UPDATE,
)
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.command.manage_user_use_case import ManageUserUseCase
from src.service.partier.app.command.register_user_use_case import RegisterUserUseCase
from src.service.partier.app.query.list_users_use_case import ListUsersUseCase
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.role_auth import require_super_admin
from src.service.partier.driving_adapter.schema.user_schema import (
    RegisterRequest,
    UserResponse,
    UserUpdateRequest,
)


router = APIRouter(tags=['admin'])


@router.get(USER_LIST, status_code=status.HTTP_200_OK)
@Logger.io
async def list_users(
    current_user: UserEntity = Depends(require_super_admin),
    use_case: ListUsersUseCase = Depends(ListUsersUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.list_all()
    return [UserResponse.model_validate(user) for user in users]


@router.post(ORGANIZER_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_organizer(
    request: RegisterRequest,
    current_user: UserEntity = Depends(require_super_admin),
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> UserResponse:
    organizer = await use_case.register(
        username=request.username,
        password=request.password.get_secret_value(),
        email=str(request.email),
        full_name=request.full_name,
        is_organizer=True,
    )
    return UserResponse.model_validate(organizer)


@router.patch(USER_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    current_user: UserEntity = Depends(require_super_admin),
    use_case: ManageUserUseCase = Depends(ManageUserUseCase.depends),
) -> UserResponse:
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    if request.password is not None:
        changes['password'] = request.password.get_secret_value()
    if 'email' in changes:
        changes['email'] = str(changes['email'])

    updated = await use_case.update_user(user_id=user_id, changes=changes)
    return UserResponse.model_validate(updated)


@router.put(USER_ORGANIZER_STATUS, status_code=status.HTTP_200_OK)
@Logger.io
async def set_organizer_status(
    user_id: int,
    payload: Dict[str, Any] = Body(..., examples=[{'isOrganizer': True}]),
    current_user: UserEntity = Depends(require_super_admin),
    use_case: ManageUserUseCase = Depends(ManageUserUseCase.depends),
) -> UserResponse:
    # Raw body so a non-boolean value reaches the domain check instead of being coerced
    updated = await use_case.set_organizer_status(
        user_id=user_id, is_organizer=payload.get('isOrganizer')
    )
    return UserResponse.model_validate(updated)
