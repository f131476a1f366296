"""
REST routes.

Defines the user registration endpoint. Responses are plain text:
- 201 with a confirmation message on success
- 400 with the error message for registration rule violations
- 500 with a generic message for anything else
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_user_registration
from src.api.models import UserRegistrationRequest
from src.domain.exceptions import RegistrationError
from src.domain.registration import UserRegistration

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registration"])

INTERNAL_ERROR_MESSAGE = "Internal server error"


def confirmation_message(email: str) -> str:
    """Message returned by both transports after a successful registration."""
    return f"User created for email: {email}"


@router.post(
    "/user-registration",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User created", "content": {"text/plain": {}}},
        400: {"description": "Registration rule violated", "content": {"text/plain": {}}},
        500: {"description": "Internal server error", "content": {"text/plain": {}}},
    },
    summary="Register a new user",
    description="Submit email, password and password confirmation to create a user.",
)
def register_user(
    request_data: UserRegistrationRequest,
    user_registration: UserRegistration = Depends(get_user_registration),
) -> PlainTextResponse:
    """
    Register a new user.

    - **email**: Email address to register
    - **password**: Password
    - **confirmPassword**: Must equal password
    """
    try:
        user = user_registration.execute(request_data.to_input())
    except RegistrationError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except Exception:
        logger.exception("User registration failed")
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return PlainTextResponse(confirmation_message(user.email), status_code=status.HTTP_201_CREATED)
