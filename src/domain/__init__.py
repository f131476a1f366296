"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user registration use case. It defines its own
port interfaces for infrastructure abstraction, so adapters can be swapped
without touching the business rules.
"""

from .exceptions import (
    InvalidEmail,
    MissingParam,
    PasswordMismatch,
    RegistrationError,
    UserAlreadyExists,
)
from .models import NewUser, User
from .ports import EmailValidator, UserRepository
from .registration import RegistrationInput, UserRegistration

__all__ = [
    "EmailValidator",
    "InvalidEmail",
    "MissingParam",
    "NewUser",
    "PasswordMismatch",
    "RegistrationError",
    "RegistrationInput",
    "User",
    "UserAlreadyExists",
    "UserRegistration",
    "UserRepository",
]
