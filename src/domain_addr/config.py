"""
Configuration dataclasses for the domain-addr package.

This module defines the configuration structures used throughout the system,
including the rule list source, the relaxed DNS label policy, and logging
configuration, together with JSON load/save helpers.
"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


# Canonical download location of the Public Suffix List
PSL_URL = "https://publicsuffix.org/list/public_suffix_list.dat"

DEFAULT_CONFIG_PATH = Path.home() / ".domain_addr" / "config.json"


@dataclass
class RuleListConfig:
    """Where the public suffix rules come from."""

    path: Optional[Path] = None  # None means the bundled snapshot
    include_private: bool = True
    source_url: str = PSL_URL


@dataclass(frozen=True)
class RelaxedLabelPolicy:
    """
    Special characters accepted in DNS record prefix labels.

    A label equal to one of ``whole_label_specials`` is accepted as is
    (``*`` wildcard owner, ``!`` negation). A label starting with one of
    ``prefix_specials`` (``_service``) is accepted when its remainder is a
    non-empty valid strict label, so a bare ``_`` is rejected.
    """

    whole_label_specials: frozenset[str] = frozenset({"*", "!"})
    prefix_specials: frozenset[str] = frozenset({"_"})
    allow_inner_underscore: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "info"
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class SystemConfig:
    """Main configuration combining all sub-configurations."""

    rules: RuleListConfig = field(default_factory=RuleListConfig)
    relaxed_labels: RelaxedLabelPolicy = field(default_factory=RelaxedLabelPolicy)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    language: str = "en"  # 'de' or 'en'


def create_default_config(language: str = "en") -> SystemConfig:
    """
    Create a default configuration.

    Args:
        language: Output language ('de' or 'en')

    Returns:
        SystemConfig with default settings
    """
    return SystemConfig(language=language)


def load_config_from_file(config_path: Path) -> Optional[SystemConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        SystemConfig if successful, None otherwise
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        # Parse rule list config
        rules_data = data.get("rules", {})
        rules_path = rules_data.get("path")
        rules = RuleListConfig(
            path=Path(rules_path) if rules_path else None,
            include_private=rules_data.get("include_private", True),
            source_url=rules_data.get("source_url", PSL_URL),
        )

        # Parse relaxed label policy
        policy_data = data.get("relaxed_labels", {})
        default_policy = RelaxedLabelPolicy()
        relaxed_labels = RelaxedLabelPolicy(
            whole_label_specials=frozenset(
                policy_data.get("whole_label_specials", default_policy.whole_label_specials)
            ),
            prefix_specials=frozenset(
                policy_data.get("prefix_specials", default_policy.prefix_specials)
            ),
            allow_inner_underscore=policy_data.get("allow_inner_underscore", False),
        )

        # Parse logging config
        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=logging_data.get("level", "info"),
            output_format=logging_data.get("output_format", "text"),
        )

        return SystemConfig(
            rules=rules,
            relaxed_labels=relaxed_labels,
            logging=logging_config,
            language=data.get("language", "en"),
        )

    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None
    except FileNotFoundError:
        return None


def config_to_dict(config: SystemConfig) -> dict:
    """Convert SystemConfig to a JSON-serializable dictionary."""
    return {
        "rules": {
            "path": str(config.rules.path) if config.rules.path else None,
            "include_private": config.rules.include_private,
            "source_url": config.rules.source_url,
        },
        "relaxed_labels": {
            "whole_label_specials": sorted(config.relaxed_labels.whole_label_specials),
            "prefix_specials": sorted(config.relaxed_labels.prefix_specials),
            "allow_inner_underscore": config.relaxed_labels.allow_inner_underscore,
        },
        "logging": {
            "level": config.logging.level,
            "output_format": config.logging.output_format,
        },
        "language": config.language,
    }


def save_config_to_file(config: SystemConfig, config_path: Path) -> bool:
    """
    Save configuration to a JSON file.

    Args:
        config: SystemConfig to save
        config_path: Path to save the configuration

    Returns:
        True if successful, False otherwise
    """
    try:
        # Ensure parent directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config_to_dict(config), f, indent=2, ensure_ascii=False)

        return True

    except (OSError, TypeError) as e:
        print(f"Error saving config: {e}", file=sys.stderr)
        return False
