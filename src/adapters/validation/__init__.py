"""Email validation adapters."""

from .library import LibraryEmailValidator
from .regex import RegexEmailValidator

__all__ = ["LibraryEmailValidator", "RegexEmailValidator"]
