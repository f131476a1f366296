"""
Registration use case - validation, uniqueness check and persistence.

Registration Flow (short-circuits on the first failure)
=======================================================

1. email, password and confirmPassword must be present and non-empty,
   checked in that order (MissingParam)
2. password must equal confirmPassword exactly (PasswordMismatch)
3. the email validator must accept the email (InvalidEmail)
4. no user may already exist for the email (UserAlreadyExists)
5. the repository creates the user, which is returned

Exceptions raised by the validator or the repository propagate unchanged.
Nothing is persisted unless every step before create succeeds.

Note: The find-before-create check is not atomic. Repositories enforce
email uniqueness themselves, so a concurrent duplicate surfaces as
UserAlreadyExists from create.
"""

import logging
from dataclasses import dataclass

from .exceptions import InvalidEmail, MissingParam, PasswordMismatch, UserAlreadyExists
from .models import NewUser, User
from .ports import EmailValidator, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationInput:
    """Raw registration request; any field may be missing."""

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


@dataclass
class UserRegistration:
    """
    Use case for registering a new user.

    Stateless apart from its injected collaborators, so one instance
    can serve every request.
    """

    repository: UserRepository
    email_validator: EmailValidator

    def execute(self, data: RegistrationInput) -> User:
        """
        Register a new user.

        Args:
            data: Email, password and password confirmation

        Returns:
            The created user as returned by the repository

        Raises:
            MissingParam: If a required field is absent or empty
            PasswordMismatch: If password and confirmation differ
            InvalidEmail: If the email validator rejects the email
            UserAlreadyExists: If the email is already registered
        """
        email, password, confirm_password = data.email, data.password, data.confirm_password

        if not email:
            raise MissingParam("email")
        if not password:
            raise MissingParam("password")
        if not confirm_password:
            raise MissingParam("confirmPassword")

        if password != confirm_password:
            raise PasswordMismatch()

        if not self.email_validator.validate(email):
            raise InvalidEmail()

        if self.repository.find_by_email(email) is not None:
            raise UserAlreadyExists()

        user = self.repository.create(NewUser(email=email, password=password))
        logger.info("User registered: %s", user.email)
        return user
