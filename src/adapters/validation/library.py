"""
email-validator backed validator - Implements EmailValidator protocol.

Stricter than the regex validator: applies the RFC syntax rules that
pydantic's EmailStr relies on. Deliverability (DNS) checks are off so
validation never performs network I/O.
"""

from email_validator import EmailNotValidError, validate_email


class LibraryEmailValidator:
    """
    Implements EmailValidator protocol via the email-validator package.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def validate(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
