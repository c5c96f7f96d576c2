"""
domain-addr - Domain and DNS name validation against the Public Suffix List.

This package parses domain names and DNS record names, determines their public
suffix and registrable root from the Public Suffix List, and rejects anything
that is not a syntactically valid name.
"""

__version__ = "0.1.0"
__author__ = "domain-addr contributors"

from domain_addr.exceptions import (
    AddrError,
    TokenizeError,
    LabelError,
    DomainError,
    DnsError,
    RuleListError,
)
from domain_addr.enums import (
    Profile,
    RuleKind,
    RuleSection,
    NameKind,
    LogLevel,
    TokenizeErrorCode,
    LabelErrorCode,
    DomainErrorCode,
    DnsErrorCode,
    RuleListErrorCode,
)
from domain_addr.config import (
    RuleListConfig,
    RelaxedLabelPolicy,
    LoggingConfig,
    SystemConfig,
    create_default_config,
    load_config_from_file,
    save_config_to_file,
)
from domain_addr.labels import (
    to_ascii,
    validate_label,
    is_valid_label,
)
from domain_addr.tokenizer import (
    Label,
    TokenizedName,
    tokenize,
)
from domain_addr.rules import (
    Rule,
    RuleDatabase,
    MatchResult,
)
from domain_addr.psl_loader import (
    parse_rule,
    parse_rule_list,
    load_rule_database,
    default_rule_database,
)
from domain_addr.matcher import (
    SuffixMatch,
    match_suffix,
)
from domain_addr.domain import Name as DomainName
from domain_addr.dns import Name as DnsName
from domain_addr.name_validator import (
    NameValidator,
    NameValidationResult,
    NameValidationError,
)
from domain_addr.event_logger import (
    EventLogger,
    LogEntry,
)
from domain_addr.updater import (
    RuleListUpdater,
    UpdateResult,
)
from domain_addr.i18n import (
    get_message,
    get_all_message_keys,
    has_translation,
    get_missing_translations,
    validate_translations,
    TRANSLATIONS,
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
)
from domain_addr.self_test import (
    SelfTest,
    SelfTestResult,
    CheckResult,
    ConfigValidationResult,
    run_self_test,
)
from domain_addr.cli import (
    main as cli_main,
    create_parser,
)

__all__ = [
    # Exceptions
    "AddrError",
    "TokenizeError",
    "LabelError",
    "DomainError",
    "DnsError",
    "RuleListError",
    # Enums
    "Profile",
    "RuleKind",
    "RuleSection",
    "NameKind",
    "LogLevel",
    "TokenizeErrorCode",
    "LabelErrorCode",
    "DomainErrorCode",
    "DnsErrorCode",
    "RuleListErrorCode",
    # Configuration
    "RuleListConfig",
    "RelaxedLabelPolicy",
    "LoggingConfig",
    "SystemConfig",
    "create_default_config",
    "load_config_from_file",
    "save_config_to_file",
    # Labels and tokenizer
    "to_ascii",
    "validate_label",
    "is_valid_label",
    "Label",
    "TokenizedName",
    "tokenize",
    # Rules
    "Rule",
    "RuleDatabase",
    "MatchResult",
    "parse_rule",
    "parse_rule_list",
    "load_rule_database",
    "default_rule_database",
    "SuffixMatch",
    "match_suffix",
    # Names
    "DomainName",
    "DnsName",
    # Name Validator
    "NameValidator",
    "NameValidationResult",
    "NameValidationError",
    # Event Logger
    "EventLogger",
    "LogEntry",
    # Updater
    "RuleListUpdater",
    "UpdateResult",
    # I18n
    "get_message",
    "get_all_message_keys",
    "has_translation",
    "get_missing_translations",
    "validate_translations",
    "TRANSLATIONS",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    # Self-Test
    "SelfTest",
    "SelfTestResult",
    "CheckResult",
    "ConfigValidationResult",
    "run_self_test",
    # CLI
    "cli_main",
    "create_parser",
]
