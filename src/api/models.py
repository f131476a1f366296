"""
API request models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Business validation (presence, matching passwords, email syntax) is left to
the use case, so every field here is optional.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.registration import RegistrationInput


class UserRegistrationRequest(BaseModel):
    """Request model for user registration."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = Field(
        default=None,
        alias="confirmPassword",
        description="Must equal password",
    )

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
        )
