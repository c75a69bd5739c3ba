from roster_identity.application.dtos.user_dtos import (
    UserLoginDTO,
    UserRegistrationDTO,
    UserUpdateDTO,
)

__all__ = [
    "UserLoginDTO",
    "UserRegistrationDTO",
    "UserUpdateDTO",
]
