"""
Label validation module.

Validates a single domain label under one of two profiles:

- STRICT: labels of a registrable domain (letters, digits, inner hyphens)
- RELAXED: DNS record prefix labels, which additionally accept service
  labels (``_tcp``), the wildcard owner ``*`` and the negation label ``!``

Non-ASCII labels are converted to their ASCII-compatible (punycode) form with
the ``idna`` library before the length and charset checks.
"""

import re
from typing import Optional

import idna

from domain_addr.config import RelaxedLabelPolicy
from domain_addr.enums import LabelErrorCode, Profile
from domain_addr.exceptions import LabelError


MAX_LABEL_LENGTH = 63

# Characters never allowed in a label, checked before IDNA encoding so that
# "exa mple" is reported as an invalid character rather than an IDNA failure
FORBIDDEN_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f\s/]")

# Letters, digits and hyphen; hyphen placement is checked separately
LDH_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
LDH_UNDERSCORE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

ACE_PREFIX = "xn--"

DEFAULT_POLICY = RelaxedLabelPolicy()


def to_ascii(label: str) -> str:
    """
    Convert a label to its ASCII-compatible encoding.

    Args:
        label: A single label, possibly containing non-ASCII characters

    Returns:
        The label unchanged if it is ASCII, otherwise its ``xn--`` form

    Raises:
        LabelError: If IDNA encoding fails or an ``xn--`` label does not decode
    """
    if label.isascii():
        if label[:4].lower() == ACE_PREFIX:
            _check_a_label(label)
        return label

    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        code = LabelErrorCode.IDNA_ERROR
        if "too long" in str(e).lower():
            code = LabelErrorCode.TOO_LONG
        raise LabelError(
            code=code.value,
            message=f"IDNA encoding failed: {e}",
            details={"label": label, "idna_error": str(e)},
        ) from e


def validate_label(
    label: str,
    profile: Profile = Profile.STRICT,
    policy: Optional[RelaxedLabelPolicy] = None,
) -> str:
    """
    Validate a single label.

    Args:
        label: The label text as written in the name
        profile: STRICT for registrable domain labels, RELAXED for DNS prefixes
        policy: Special characters accepted by the RELAXED profile

    Returns:
        The ASCII form of the label

    Raises:
        LabelError: If the label is invalid under the given profile
    """
    if profile is Profile.RELAXED:
        return _validate_relaxed(label, policy or DEFAULT_POLICY)
    return _validate_strict(label)


def is_valid_label(
    label: str,
    profile: Profile = Profile.STRICT,
    policy: Optional[RelaxedLabelPolicy] = None,
) -> bool:
    """Return True if the label is valid under the given profile."""
    try:
        validate_label(label, profile, policy)
    except LabelError:
        return False
    return True


def _validate_strict(label: str, allow_underscore: bool = False) -> str:
    if not label:
        raise LabelError(
            code=LabelErrorCode.EMPTY.value,
            message="Label is empty",
        )

    forbidden = FORBIDDEN_CHARS_PATTERN.findall(label)
    if forbidden:
        raise LabelError(
            code=LabelErrorCode.INVALID_CHAR.value,
            message="Label contains forbidden characters",
            details={"label": label, "forbidden_chars": forbidden},
        )

    ascii_label = to_ascii(label)

    if len(ascii_label) > MAX_LABEL_LENGTH:
        raise LabelError(
            code=LabelErrorCode.TOO_LONG.value,
            message=f"Label is longer than {MAX_LABEL_LENGTH} characters",
            details={"label": label, "length": len(ascii_label)},
        )

    pattern = LDH_UNDERSCORE_PATTERN if allow_underscore else LDH_PATTERN
    if not pattern.match(ascii_label):
        raise LabelError(
            code=LabelErrorCode.INVALID_CHAR.value,
            message="Label may only contain letters, digits and hyphens",
            details={"label": label},
        )

    if ascii_label.startswith("-") or ascii_label.endswith("-"):
        raise LabelError(
            code=LabelErrorCode.LEADING_OR_TRAILING_HYPHEN.value,
            message="Label must not start or end with a hyphen",
            details={"label": label},
        )

    return ascii_label


def _validate_relaxed(label: str, policy: RelaxedLabelPolicy) -> str:
    if label in policy.whole_label_specials:
        return label

    if label and label[0] in policy.prefix_specials:
        remainder = label[1:]
        if not remainder:
            raise LabelError(
                code=LabelErrorCode.INVALID_CHAR.value,
                message=f"Label {label!r} needs a name after its prefix character",
                details={"label": label},
            )
        ascii_remainder = _validate_strict(
            remainder, allow_underscore=policy.allow_inner_underscore
        )
        # Length applies to the whole label, prefix character included
        if len(ascii_remainder) + 1 > MAX_LABEL_LENGTH:
            raise LabelError(
                code=LabelErrorCode.TOO_LONG.value,
                message=f"Label is longer than {MAX_LABEL_LENGTH} characters",
                details={"label": label, "length": len(ascii_remainder) + 1},
            )
        return label[0] + ascii_remainder

    return _validate_strict(label)


def _check_a_label(label: str) -> None:
    # An xn-- label must decode to a valid U-label
    try:
        idna.decode(label)
    except idna.IDNAError as e:
        raise LabelError(
            code=LabelErrorCode.IDNA_ERROR.value,
            message=f"Invalid A-label: {e}",
            details={"label": label, "idna_error": str(e)},
        ) from e
