"""
Name validation module.

Wraps domain and DNS name parsing in result objects for callers that check
many names and prefer a verdict per name over exceptions.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from domain_addr import dns, domain
from domain_addr.config import RelaxedLabelPolicy
from domain_addr.enums import NameKind
from domain_addr.event_logger import EventLogger
from domain_addr.exceptions import AddrError
from domain_addr.rules import RuleDatabase


COMPONENT = "name_validator"


@dataclass
class NameValidationError:
    """Structured error information for name validation failures."""

    code: str
    message: str
    details: dict


@dataclass
class NameValidationResult:
    """Result of a name validation operation."""

    raw: str
    kind: NameKind
    valid: bool
    name: Optional[Union[domain.Name, dns.Name]]
    error: Optional[NameValidationError]

    @property
    def root(self) -> Optional[str]:
        return self.name.root() if self.name else None

    @property
    def suffix(self) -> Optional[str]:
        if self.name is None:
            return None
        if isinstance(self.name, dns.Name):
            return self.name.root_name.suffix()
        return self.name.suffix()

    def to_dict(self) -> dict:
        """Convert result to dictionary for serialization."""
        return {
            "name": self.raw,
            "kind": self.kind.value,
            "valid": self.valid,
            "root": self.root,
            "suffix": self.suffix,
            "error": {
                "code": self.error.code,
                "message": self.error.message,
                "details": self.error.details,
            } if self.error else None,
        }


class NameValidator:
    """
    Validates domain and DNS record names against a rule database.

    Handles:
    - Domain names (registrable domain plus optional sub-domains)
    - DNS record names (relaxed record labels plus a valid root domain)
    """

    def __init__(
        self,
        db: Optional[RuleDatabase] = None,
        policy: Optional[RelaxedLabelPolicy] = None,
        logger: Optional[EventLogger] = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            db: Rule database; the bundled default database when omitted
            policy: Special characters accepted in DNS record labels
            logger: Optional event logger for rejected names
        """
        self._db = db
        self._policy = policy
        self._logger = logger

    def validate(self, raw_name: str, kind: NameKind = NameKind.DOMAIN) -> NameValidationResult:
        """
        Validate a name.

        Args:
            raw_name: The name to validate, exactly as given
            kind: Whether to validate as a domain name or a DNS record name

        Returns:
            NameValidationResult with the parsed name or the error
        """
        try:
            if kind is NameKind.DNS:
                name = dns.Name.parse(raw_name, self._db, self._policy)
            else:
                name = domain.Name.parse(raw_name, self._db)
        except AddrError as e:
            if self._logger:
                self._logger.debug(
                    COMPONENT,
                    "Name rejected",
                    {"name": raw_name, "kind": kind.value, "code": e.code},
                )
            return NameValidationResult(
                raw=raw_name,
                kind=kind,
                valid=False,
                name=None,
                error=NameValidationError(code=e.code, message=e.message, details=e.details),
            )

        return NameValidationResult(
            raw=raw_name,
            kind=kind,
            valid=True,
            name=name,
            error=None,
        )

    def validate_many(
        self,
        raw_names: Iterable[str],
        kind: NameKind = NameKind.DOMAIN,
    ) -> list[NameValidationResult]:
        """Validate several names, one result per name, in input order."""
        return [self.validate(raw_name, kind) for raw_name in raw_names]

    def is_valid(self, raw_name: str, kind: NameKind = NameKind.DOMAIN) -> bool:
        return self.validate(raw_name, kind).valid
