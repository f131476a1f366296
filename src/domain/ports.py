"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import NewUser, User


class EmailValidator(Protocol):
    """Port interface for email syntax validation."""

    def validate(self, email: str) -> bool:
        """
        Check whether an email address is syntactically valid.

        Args:
            email: Email address as provided by the caller

        Returns:
            True if the address is acceptable, False otherwise
        """
        ...


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def create(self, user: NewUser) -> User:
        """
        Persist a new user.

        Implementations guard email uniqueness themselves and raise
        UserAlreadyExists when the store rejects a duplicate.

        Args:
            user: Email and password of the user to create

        Returns:
            The stored user, including its assigned id
        """
        ...

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by email.

        Args:
            email: Email address to search for (exact match)

        Returns:
            The matching user, or None if there is none
        """
        ...
