"""
DNS record name parsing.

A DNS name is a valid domain name (the root) preceded by any number of
record labels, which may use the relaxed DNS label charset:

    _telnet._tcp.example.com.  ->  root 'example.com.'
    *.example.com.             ->  root 'example.com.'
"""

from dataclasses import dataclass, field
from typing import Optional

from domain_addr import domain
from domain_addr.config import RelaxedLabelPolicy
from domain_addr.enums import DnsErrorCode, Profile, TokenizeErrorCode
from domain_addr.exceptions import DnsError, DomainError, LabelError, TokenizeError
from domain_addr.labels import to_ascii, validate_label
from domain_addr.matcher import match_suffix
from domain_addr.rules import RuleDatabase
from domain_addr.tokenizer import MAX_NAME_LENGTH, tokenize


@dataclass(frozen=True)
class Name:
    """
    A validated DNS record name.

    Create instances with Name.parse(); only ``full`` takes part in
    comparisons.
    """

    full: str
    root_name: domain.Name = field(compare=False)
    root_start: int = field(compare=False)

    @classmethod
    def parse(
        cls,
        name: str,
        db: Optional[RuleDatabase] = None,
        policy: Optional[RelaxedLabelPolicy] = None,
    ) -> "Name":
        """
        Parse and validate a DNS record name.

        Args:
            name: Name to parse, e.g. '_sip._tcp.example.com.'
            db: Rule database; the bundled default database when omitted
            policy: Special characters accepted in record labels

        Returns:
            The validated Name

        Raises:
            DnsError: If the name is malformed or has no valid root domain
        """
        try:
            tokens = tokenize(name)
        except TokenizeError as e:
            code = DnsErrorCode.INVALID_SYNTAX
            if e.code == TokenizeErrorCode.IP_ADDRESS.value:
                code = DnsErrorCode.IS_IP_ADDRESS
            raise DnsError(
                code=code.value,
                message=e.message,
                details={"name": name, "cause": e.code},
            ) from e

        labels = tokens.labels
        suffix = match_suffix([_match_form(label.text) for label in labels], db)

        if suffix.label_count >= len(labels):
            raise DnsError(
                code=DnsErrorCode.NO_VALID_ROOT.value,
                message="Name has no registrable label before its public suffix",
                details={"name": name},
            )

        root_index = len(labels) - suffix.label_count - 1
        root_start = labels[root_index].position

        try:
            root_name = domain.Name.parse(name[root_start:], db)
        except DomainError as e:
            raise DnsError(
                code=DnsErrorCode.NO_VALID_ROOT.value,
                message=f"Root {name[root_start:]!r} is not a valid domain name: {e.message}",
                details={"name": name, "cause": e.code},
            ) from e

        ascii_labels = []
        for label in labels[:root_index]:
            try:
                ascii_labels.append(validate_label(label.text, Profile.RELAXED, policy))
            except LabelError as e:
                raise DnsError(
                    code=DnsErrorCode.INVALID_LABEL.value,
                    message=f"Invalid label {label.text!r}: {e.message}",
                    details={"name": name, "position": label.position, "cause": e.code},
                ) from e

        ascii_labels.extend(_match_form(label.text) for label in labels[root_index:])
        encoded_length = len(".".join(ascii_labels)) + int(tokens.fully_qualified)
        if encoded_length > MAX_NAME_LENGTH:
            raise DnsError(
                code=DnsErrorCode.INVALID_SYNTAX.value,
                message=f"Encoded name is longer than {MAX_NAME_LENGTH} characters",
                details={"name": name, "cause": TokenizeErrorCode.TOO_LONG.value},
            )

        return cls(full=name, root_name=root_name, root_start=root_start)

    def __str__(self) -> str:
        return self.full

    def as_str(self) -> str:
        return self.full

    def root(self) -> str:
        """The registrable domain this record name belongs to."""
        return self.root_name.as_str()

    def prefix(self) -> Optional[str]:
        """Record labels left of the root, or None."""
        if self.root_start == 0:
            return None
        return self.full[:self.root_start - 1]

    def is_fully_qualified(self) -> bool:
        return self.full.endswith(".")


def parse(
    name: str,
    db: Optional[RuleDatabase] = None,
    policy: Optional[RelaxedLabelPolicy] = None,
) -> Name:
    """Parse a DNS record name; shorthand for Name.parse()."""
    return Name.parse(name, db, policy)


def _match_form(label: str) -> str:
    # Labels that cannot be encoded are matched as written and rejected by
    # validation afterwards
    try:
        return to_ascii(label)
    except LabelError:
        return label
