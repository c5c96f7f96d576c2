"""
Exception classes for the domain-addr package.

All exceptions inherit from AddrError and provide structured
error information with codes, messages, and optional details.
"""

from typing import Optional


class AddrError(Exception):
    """Base exception for all domain-addr errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class TokenizeError(AddrError):
    """Raised when a name cannot be split into labels."""

    pass


class LabelError(AddrError):
    """Raised when a single label fails validation."""

    pass


class DomainError(AddrError):
    """Raised when a string is not a valid domain name."""

    pass


class DnsError(AddrError):
    """Raised when a string is not a valid DNS record name."""

    pass


class RuleListError(AddrError):
    """Raised when rule list text cannot be read, parsed or downloaded."""

    pass
