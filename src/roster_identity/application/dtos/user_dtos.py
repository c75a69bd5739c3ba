"""Request DTOs for the user service."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserRegistrationDTO:
    """Data needed to register a new user."""

    username: str
    email: str
    password: str

    def __repr__(self) -> str:
        return (
            f"UserRegistrationDTO(username={self.username!r}, "
            f"email={self.email!r}, password='***')"
        )


@dataclass(frozen=True)
class UserUpdateDTO:
    """Partial profile update; None or blank fields are left unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class UserLoginDTO:
    """Credentials presented for authentication."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"UserLoginDTO(username={self.username!r}, password='***')"
