"""
Name tokenizer.

Splits a raw name on the label separator, detects the fully-qualified form
(a single trailing dot), and enforces the overall name limits.
"""

import ipaddress
from dataclasses import dataclass

from domain_addr.enums import TokenizeErrorCode
from domain_addr.exceptions import TokenizeError


SEPARATOR = "."
MAX_NAME_LENGTH = 253
MAX_LABELS = 127


@dataclass(frozen=True)
class Label:
    """A single label and its character offset in the input."""

    text: str
    position: int


@dataclass(frozen=True)
class TokenizedName:
    """Labels of a name, left to right, without the trailing separator."""

    labels: tuple[Label, ...]
    fully_qualified: bool

    @property
    def texts(self) -> list[str]:
        return [label.text for label in self.labels]

    def __len__(self) -> int:
        return len(self.labels)


def is_ip_address(name: str) -> bool:
    """Return True if the name is an IPv4 or IPv6 literal."""
    candidate = name[:-1] if name.endswith(SEPARATOR) else name
    try:
        ipaddress.ip_address(candidate)
    except ValueError:
        return False
    return True


def tokenize(name: str) -> TokenizedName:
    """
    Split a name into labels.

    Args:
        name: Raw name, e.g. 'www.example.com.'

    Returns:
        TokenizedName with the labels and the fully-qualified flag

    Raises:
        TokenizeError: If the name is empty, has empty labels, exceeds the
            length or label limits, or is an IP address literal
    """
    if not name:
        raise TokenizeError(
            code=TokenizeErrorCode.EMPTY_INPUT.value,
            message="Name is empty",
        )

    if is_ip_address(name):
        raise TokenizeError(
            code=TokenizeErrorCode.IP_ADDRESS.value,
            message="Name is an IP address, not a domain name",
            details={"name": name},
        )

    if name.endswith(SEPARATOR + SEPARATOR):
        raise TokenizeError(
            code=TokenizeErrorCode.MULTIPLE_TRAILING_DOTS.value,
            message="Name has more than one trailing dot",
            details={"name": name},
        )

    fully_qualified = name.endswith(SEPARATOR)
    body = name[:-1] if fully_qualified else name

    labels = []
    position = 0
    for text in body.split(SEPARATOR):
        if not text:
            raise TokenizeError(
                code=TokenizeErrorCode.EMPTY_LABEL.value,
                message="Name contains an empty label",
                details={"name": name, "position": position},
            )
        labels.append(Label(text=text, position=position))
        position += len(text) + 1

    if len(labels) > MAX_LABELS:
        raise TokenizeError(
            code=TokenizeErrorCode.TOO_MANY_LABELS.value,
            message=f"Name has more than {MAX_LABELS} labels",
            details={"name": name, "label_count": len(labels)},
        )

    if len(name) > MAX_NAME_LENGTH:
        raise TokenizeError(
            code=TokenizeErrorCode.TOO_LONG.value,
            message=f"Name is longer than {MAX_NAME_LENGTH} characters",
            details={"name": name, "length": len(name)},
        )

    return TokenizedName(labels=tuple(labels), fully_qualified=fully_qualified)
