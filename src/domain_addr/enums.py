"""
Enumeration types for the domain-addr package.

These enums provide type-safe constants for label profiles, rule kinds,
error codes and configuration options throughout the system.
"""

from enum import Enum


class Profile(Enum):
    """Label validation profile."""

    STRICT = "strict"  # Labels of a registrable domain
    RELAXED = "relaxed"  # DNS record prefix labels (_srv, *, !)


class RuleKind(Enum):
    """Kind of a Public Suffix List rule."""

    PLAIN = "plain"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


class RuleSection(Enum):
    """Section of the Public Suffix List a rule was read from."""

    ICANN = "icann"
    PRIVATE = "private"


class NameKind(Enum):
    """Kind of name a caller asks to validate."""

    DOMAIN = "domain"
    DNS = "dns"


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class TokenizeErrorCode(Enum):
    """Error codes for splitting a name into labels."""

    EMPTY_INPUT = "empty_input"
    EMPTY_LABEL = "empty_label"
    MULTIPLE_TRAILING_DOTS = "multiple_trailing_dots"
    TOO_MANY_LABELS = "too_many_labels"
    TOO_LONG = "too_long"
    IP_ADDRESS = "ip_address"


class LabelErrorCode(Enum):
    """Error codes for single label validation."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    INVALID_CHAR = "invalid_char"
    LEADING_OR_TRAILING_HYPHEN = "leading_or_trailing_hyphen"
    IDNA_ERROR = "idna_error"


class DomainErrorCode(Enum):
    """Error codes for domain name parsing."""

    INVALID_SYNTAX = "invalid_syntax"
    INVALID_LABEL = "invalid_label"
    NOT_A_REGISTRABLE_DOMAIN = "not_a_registrable_domain"
    NUMERIC_TLD = "numeric_tld"
    IS_IP_ADDRESS = "is_ip_address"


class DnsErrorCode(Enum):
    """Error codes for DNS record name parsing."""

    INVALID_SYNTAX = "invalid_syntax"
    INVALID_LABEL = "invalid_label"
    NO_VALID_ROOT = "no_valid_root"
    IS_IP_ADDRESS = "is_ip_address"


class RuleListErrorCode(Enum):
    """Error codes for rule list ingestion and download."""

    INVALID_RULE = "invalid_rule"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"
    DOWNLOAD_ERROR = "download_error"
