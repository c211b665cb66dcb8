from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_LOGOUT, AUTH_ME, AUTH_REGISTER
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.command.register_user_use_case import RegisterUserUseCase
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.partier.driving_adapter.schema.user_schema import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter(tags=['auth'])


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    token: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
) -> UserEntity:
    """Resolve the session cookie to a freshly loaded user (401 otherwise)"""
    return await jwt_auth.get_current_user(user_query_repo=user_query_repo, token=token)


async def _set_session_cookie(
    response: Response, jwt_auth: JwtAuth, user_entity: UserEntity
) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=await jwt_auth.start_session(user_entity),
        max_age=jwt_auth.cookie_max_age,
        httponly=True,
        samesite='lax',
        secure=settings.SESSION_COOKIE_SECURE,
    )


@router.post(AUTH_REGISTER, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register(
    response: Response,
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserResponse:
    user_entity = await use_case.register(
        username=request.username,
        password=request.password.get_secret_value(),
        email=str(request.email),
        full_name=request.full_name,
    )
    await _set_session_cookie(response, jwt_auth, user_entity)
    return UserResponse.model_validate(user_entity)


@router.post(AUTH_LOGIN)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        username=request.username,
        password=request.password,
    )
    await _set_session_cookie(response, jwt_auth, user_entity)
    return UserResponse.model_validate(user_entity)


@router.post(AUTH_LOGOUT)
@Logger.io
@inject
async def logout(
    response: Response,
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
) -> MessageResponse:
    await jwt_auth.end_session(token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite='lax',
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return MessageResponse(message='Logged out')


@router.get(AUTH_ME)
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
