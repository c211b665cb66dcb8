from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError, DomainError, ForbiddenError
from src.service.partier.app.interface.i_password_hasher import IPasswordHasher


@attrs.define
class UserEntity:
    username: str = ''
    email: str = ''
    full_name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    is_organizer: bool = False
    is_super_admin: bool = False

    @staticmethod
    def validate_credentials(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('Invalid username or password')
        return user_entity

    def validate_organizer(self) -> None:
        if not self.is_organizer:
            raise ForbiddenError('Forbidden - Requires organizer role')

    def validate_super_admin(self) -> None:
        if not self.is_super_admin:
            raise ForbiddenError('Forbidden - Requires super admin role')

    def validate_profile(self) -> None:
        if not self.username.strip():
            raise DomainError('Username is required')
        if not self.email.strip():
            raise DomainError('Email is required')
        if not self.full_name.strip():
            raise DomainError('Full name is required')

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        if not plain_password:
            raise DomainError('Password is required')
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
