"""
Domain name parsing.

A domain name is a public suffix (as determined by the Public Suffix List)
preceded by a registrable label and, optionally, further sub-domain labels:

    www . example . co.uk .
    |     |         |      `- fully-qualified marker
    |     |         `- suffix
    |     `- registrable label; "example.co.uk." is the root
    `- sub-domain

Names keep the exact text they were parsed from; equality and hashing use
that text, so "example.com" and "example.com." are different names.
"""

from dataclasses import dataclass, field
from typing import Optional

from domain_addr.enums import DomainErrorCode, Profile, TokenizeErrorCode
from domain_addr.exceptions import DomainError, LabelError, TokenizeError
from domain_addr.labels import validate_label
from domain_addr.matcher import SuffixMatch, match_suffix
from domain_addr.rules import RuleDatabase
from domain_addr.tokenizer import MAX_NAME_LENGTH, TokenizedName, tokenize


@dataclass(frozen=True)
class Name:
    """
    A validated domain name.

    Create instances with Name.parse(); the remaining fields are offsets into
    ``full`` and do not take part in comparisons.
    """

    full: str
    root_start: int = field(compare=False)
    suffix_start: int = field(compare=False)
    suffix_match: SuffixMatch = field(compare=False, repr=False)

    @classmethod
    def parse(cls, name: str, db: Optional[RuleDatabase] = None) -> "Name":
        """
        Parse and validate a domain name.

        Args:
            name: Name to parse, e.g. 'www.example.com' or 'example.com.'
            db: Rule database; the bundled default database when omitted

        Returns:
            The validated Name

        Raises:
            DomainError: If the name is not a valid domain name
        """
        tokens = _tokenize(name)

        ascii_labels = []
        for label in tokens.labels:
            try:
                ascii_labels.append(validate_label(label.text, Profile.STRICT))
            except LabelError as e:
                raise DomainError(
                    code=DomainErrorCode.INVALID_LABEL.value,
                    message=f"Invalid label {label.text!r}: {e.message}",
                    details={"name": name, "position": label.position, "cause": e.code},
                ) from e

        # The length limit applies to the encoded form as well
        encoded_length = len(".".join(ascii_labels)) + int(tokens.fully_qualified)
        if encoded_length > MAX_NAME_LENGTH:
            raise DomainError(
                code=DomainErrorCode.INVALID_SYNTAX.value,
                message=f"Encoded name is longer than {MAX_NAME_LENGTH} characters",
                details={"name": name, "cause": TokenizeErrorCode.TOO_LONG.value},
            )

        suffix = match_suffix(ascii_labels, db)

        if len(ascii_labels) - suffix.label_count < 1:
            raise DomainError(
                code=DomainErrorCode.NOT_A_REGISTRABLE_DOMAIN.value,
                message="Name is a public suffix without a registrable label",
                details={"name": name},
            )

        if ascii_labels[-1].isdigit():
            raise DomainError(
                code=DomainErrorCode.NUMERIC_TLD.value,
                message="Top-level label must not be all numeric",
                details={"name": name},
            )

        labels = tokens.labels
        return cls(
            full=name,
            root_start=labels[-suffix.label_count - 1].position,
            suffix_start=labels[-suffix.label_count].position,
            suffix_match=suffix,
        )

    def __str__(self) -> str:
        return self.full

    def as_str(self) -> str:
        return self.full

    def root(self) -> str:
        """Registrable domain: registrable label plus suffix."""
        return self.full[self.root_start:]

    def suffix(self) -> str:
        """Public suffix, with the trailing dot if the name has one."""
        return self.full[self.suffix_start:]

    def prefix(self) -> str:
        """Everything before the suffix, without the separating dot."""
        return self.full[:self.suffix_start - 1]

    def label(self) -> str:
        """The registrable label."""
        return self.full[self.root_start:self.suffix_start - 1]

    def subdomain(self) -> Optional[str]:
        """Labels left of the registrable label, or None."""
        if self.root_start == 0:
            return None
        return self.full[:self.root_start - 1]

    def is_fully_qualified(self) -> bool:
        return self.full.endswith(".")

    def is_known_suffix(self) -> bool:
        """False when only the implicit single-label rule matched."""
        return not self.suffix_match.is_default

    def is_icann(self) -> bool:
        return self.is_known_suffix() and not self.suffix_match.is_private

    def is_private(self) -> bool:
        return self.suffix_match.is_private


def parse(name: str, db: Optional[RuleDatabase] = None) -> Name:
    """Parse a domain name; shorthand for Name.parse()."""
    return Name.parse(name, db)


def _tokenize(name: str) -> TokenizedName:
    try:
        return tokenize(name)
    except TokenizeError as e:
        code = DomainErrorCode.INVALID_SYNTAX
        if e.code == TokenizeErrorCode.IP_ADDRESS.value:
            code = DomainErrorCode.IS_IP_ADDRESS
        raise DomainError(
            code=code.value,
            message=e.message,
            details={"name": name, "cause": e.code},
        ) from e
