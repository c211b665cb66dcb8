"""
User API Schemas - Pydantic models for request/response
"""

from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, SecretStr, field_validator

from src.service.partier.driving_adapter.schema.base_schema import CamelModel


# bcrypt only looks at the first 72 bytes of the UTF-8 encoded password
BCRYPT_MAX_PASSWORD_BYTES = 72


def ensure_password_fits_bcrypt(password: Optional[SecretStr]) -> Optional[SecretStr]:
    if password is not None and (
        len(password.get_secret_value().encode('utf-8')) > BCRYPT_MAX_PASSWORD_BYTES
    ):
        raise ValueError(f'Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes')
    return password


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: SecretStr = Field(
        ..., min_length=1, description='User password (bcrypt limit: 72 bytes)'
    )
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=255)

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        return ensure_password_fits_bcrypt(v)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'username': 'nightowl',
                'password': 'P@ssw0rd',
                'email': 'owl@example.com',
                'fullName': 'Night Owl',
            }
        }
    )


class LoginRequest(CamelModel):
    """User login request schema"""

    username: str = Field(..., min_length=1)
    password: SecretStr = Field(..., min_length=1)

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        return ensure_password_fits_bcrypt(v)

    model_config = ConfigDict(
        json_schema_extra={'example': {'username': 'nightowl', 'password': 'P@ssw0rd'}}
    )


class UserResponse(CamelModel):
    """User response schema (never carries the password hash)"""

    id: int
    username: str
    email: str
    full_name: str
    is_organizer: bool
    is_super_admin: bool


class UserUpdateRequest(CamelModel):
    """Super-admin partial update; omitted fields are left unchanged"""

    username: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    is_organizer: Optional[bool] = None
    is_super_admin: Optional[bool] = None
    password: Optional[SecretStr] = Field(None, min_length=1)

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        return ensure_password_fits_bcrypt(v)


class MessageResponse(CamelModel):
    message: str
