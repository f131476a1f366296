"""
Regex email validator - Implements EmailValidator protocol.

Accepts addresses of the form local@domain.tld, where the top-level
domain is at least two letters.
"""

import re

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


class RegexEmailValidator:
    """
    Implements EmailValidator protocol with a regular expression.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pattern: re.Pattern[str] = EMAIL_PATTERN) -> None:
        self._pattern = pattern

    def validate(self, email: str) -> bool:
        """Return True if the whole email matches the pattern."""
        return self._pattern.fullmatch(email) is not None
