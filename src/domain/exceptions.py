"""
Domain exceptions - Semantic error types for registration.

These are the business rule violations a caller can correct by changing
its input. Failures raised by collaborators (validators, repositories)
are not part of this hierarchy and propagate unchanged.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class MissingParam(RegistrationError):
    """A required input field was absent or empty."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Missing parameter: {param}")
        self.param = param


class PasswordMismatch(RegistrationError):
    """Password and its confirmation differ."""

    def __init__(self) -> None:
        super().__init__("Passwords do not match!")


class InvalidEmail(RegistrationError):
    """Email failed syntactic validation."""

    def __init__(self) -> None:
        super().__init__("Invalid email!")


class UserAlreadyExists(RegistrationError):
    """A user with this email is already registered."""

    def __init__(self) -> None:
        super().__init__("There is already a user with this email!")
