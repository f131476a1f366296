"""
GraphQL schema - userRegistration mutation.

The mutation runs the same UserRegistration instance as the REST endpoint.
RegistrationError messages reach the client unchanged; every other error
is masked so infrastructure details do not leak.
"""

from typing import Any

import strawberry
from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from src.api.dependencies import get_user_registration
from src.api.rest.routes import INTERNAL_ERROR_MESSAGE, confirmation_message
from src.domain.exceptions import RegistrationError
from src.domain.registration import RegistrationInput, UserRegistration


@strawberry.input
class UserRegistrationInput:
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "healthy"


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def user_registration(self, info: Info, input: UserRegistrationInput) -> str:
        """
        Register a new user and return a confirmation message.

        The use case blocks on repository I/O, so it runs in the threadpool.
        """
        user_registration: UserRegistration = info.context["user_registration"]
        user = await run_in_threadpool(
            user_registration.execute,
            RegistrationInput(
                email=input.email,
                password=input.password,
                confirm_password=input.confirm_password,
            ),
        )
        return confirmation_message(user.email)


def should_mask_error(error: GraphQLError) -> bool:
    """Mask resolver failures other than registration rule violations."""
    original = error.original_error
    return original is not None and not isinstance(original, RegistrationError)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        lambda: MaskErrors(
            should_mask_error=should_mask_error, error_message=INTERNAL_ERROR_MESSAGE
        ),
    ],
)


async def get_graphql_context(
    user_registration: UserRegistration = Depends(get_user_registration),
) -> dict[str, Any]:
    """Build the resolver context from FastAPI dependencies."""
    return {"user_registration": user_registration}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_graphql_context)
