"""
Domain models - User entity and creation payload.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewUser:
    """Data handed to the repository to create a user (no identity yet)."""

    email: str
    password: str


@dataclass(frozen=True)
class User:
    """
    Registered user.

    The id is assigned by the persistence layer and never changes afterwards.
    """

    id: str
    email: str
    password: str
