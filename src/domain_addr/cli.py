"""
Command-line interface for the domain-addr package.

This module provides the main CLI entry point with commands for:
- domain: Validate a domain name and show its root and suffix
- dns: Validate a DNS record name and show its root
- check-list: Validate many names from a file
- update-rules: Download a fresh Public Suffix List
- config: Configuration management
- self-test: Validate configuration and rules
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from domain_addr import __version__
from domain_addr.config import (
    DEFAULT_CONFIG_PATH,
    SystemConfig,
    config_to_dict,
    create_default_config,
    load_config_from_file,
    save_config_to_file,
)
from domain_addr.enums import NameKind
from domain_addr.event_logger import EventLogger
from domain_addr.exceptions import AddrError
from domain_addr.i18n import SUPPORTED_LANGUAGES, get_error_message, get_message
from domain_addr.name_validator import NameValidationResult, NameValidator
from domain_addr.psl_loader import default_rule_database, load_rule_database
from domain_addr.rules import RuleDatabase
from domain_addr.self_test import SelfTest
from domain_addr.updater import RuleListUpdater


# Where update-rules writes when neither --output nor a configured path is given
DEFAULT_RULES_OUTPUT = DEFAULT_CONFIG_PATH.parent / "public_suffix_list.dat"


def resolve_config(args: argparse.Namespace) -> Optional[SystemConfig]:
    """
    Load the configuration named on the command line, or the defaults.

    Args:
        args: Parsed arguments with optional 'config' and 'language'

    Returns:
        SystemConfig, or None if an explicitly named file could not be loaded
    """
    config = None
    if getattr(args, "config", None):
        config = load_config_from_file(Path(args.config))
        if config is None:
            print(get_message("cli.config_not_found", args.language, path=args.config), file=sys.stderr)
            return None

    if config is None:
        config = create_default_config()

    # Command line language wins over the configured one
    if getattr(args, "language", None):
        config.language = args.language

    return config


def create_logger(config: SystemConfig, verbose: bool) -> Optional[EventLogger]:
    """Create an event logger in verbose mode, None otherwise."""
    if not verbose:
        return None
    return EventLogger.from_config(config.logging.level, config.logging.output_format)


def load_database(config: SystemConfig, logger: Optional[EventLogger] = None) -> RuleDatabase:
    """
    Load the rule database described by the configuration.

    The shared bundled database is used unless a custom file is configured
    or private rules are excluded.
    """
    if config.rules.path is None and config.rules.include_private:
        return default_rule_database()
    return load_rule_database(config.rules.path, config.rules.include_private, logger)


def print_result(result: NameValidationResult, language: str, verbose: bool = False) -> None:
    """Print a single validation result in human-readable form."""
    if not result.valid:
        print(f"✗ {result.raw}: {get_message('check.invalid', language)}")
        print(f"  {get_error_message(result.error.code, language)}")
        if verbose:
            print(f"  {result.error.message}")
        return

    print(f"✓ {result.raw}: {get_message('check.valid', language)}")
    print(f"  {get_message('check.root_label', language)}: {result.root}")
    print(f"  {get_message('check.suffix_label', language)}: {result.suffix}")

    if result.kind is NameKind.DOMAIN:
        prefix = result.name.subdomain()
    else:
        prefix = result.name.prefix()
    if prefix:
        print(f"  {get_message('check.prefix_label', language)}: {prefix}")

    if verbose:
        root_name = result.name if result.kind is NameKind.DOMAIN else result.name.root_name
        if not root_name.is_known_suffix():
            section = get_message("check.unknown_suffix", language)
        elif root_name.is_private():
            section = "PRIVATE"
        else:
            section = "ICANN"
        print(f"  {get_message('check.section_label', language)}: {section}")


def check_names(
    raw_names: list[str],
    kind: NameKind,
    config: SystemConfig,
    as_json: bool = False,
    verbose: bool = False,
) -> tuple[int, list[NameValidationResult]]:
    """
    Validate names and print the results.

    Args:
        raw_names: Names to validate
        kind: Domain or DNS record names
        config: System configuration
        as_json: Print results as JSON instead of text
        verbose: Enable verbose output

    Returns:
        Tuple of (exit code, results); exit code is 0 only if all names are valid
    """
    language = config.language
    logger = create_logger(config, verbose)

    try:
        db = load_database(config, logger)
    except AddrError as e:
        print(f"Error: {get_error_message(e.code, language)}: {e.message}", file=sys.stderr)
        return 1, []

    validator = NameValidator(db=db, policy=config.relaxed_labels, logger=logger)
    results = validator.validate_many(raw_names, kind)

    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            print_result(result, language, verbose)

    exit_code = 0 if all(r.valid for r in results) else 1
    return exit_code, results


def cmd_domain(args: argparse.Namespace) -> int:
    """Handle the 'domain' command."""
    config = resolve_config(args)
    if config is None:
        return 1

    exit_code, _ = check_names([args.name], NameKind.DOMAIN, config, args.json, args.verbose)
    return exit_code


def cmd_dns(args: argparse.Namespace) -> int:
    """Handle the 'dns' command."""
    config = resolve_config(args)
    if config is None:
        return 1

    exit_code, _ = check_names([args.name], NameKind.DNS, config, args.json, args.verbose)
    return exit_code


def cmd_check_list(args: argparse.Namespace) -> int:
    """Handle the 'check-list' command."""
    config = resolve_config(args)
    if config is None:
        return 1
    language = config.language

    # One name per line; blank lines and comments are ignored
    try:
        with open(args.file, "r", encoding="utf-8") as f:
            raw_names = [line.strip() for line in f if line.strip() and not line.startswith("#")]
    except FileNotFoundError:
        print(get_message("cli.input_not_found", language, path=args.file), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    if not raw_names:
        print(get_message("cli.input_empty", language, path=args.file), file=sys.stderr)
        return 1

    kind = NameKind.DNS if args.dns else NameKind.DOMAIN
    exit_code, results = check_names(raw_names, kind, config, args.json, args.verbose)
    if not results:
        return exit_code

    valid_count = sum(1 for r in results if r.valid)
    if not args.json:
        print(f"\n{get_message('check.summary', language, valid=valid_count, total=len(results))}")

    if args.output:
        output_file = Path(args.output)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, "w", encoding="utf-8") as f:
                json.dump([r.to_dict() for r in results], f, indent=2, ensure_ascii=False)
        except OSError as e:
            print(f"Error writing results: {e}", file=sys.stderr)
            return 1
        print(get_message("cli.output_written", language, path=output_file), file=sys.stderr)

    return exit_code


def cmd_update_rules(args: argparse.Namespace) -> int:
    """Handle the 'update-rules' command."""
    config = resolve_config(args)
    if config is None:
        return 1
    language = config.language
    logger = create_logger(config, args.verbose)

    url = args.url or config.rules.source_url
    destination = Path(args.output) if args.output else (config.rules.path or DEFAULT_RULES_OUTPUT)

    try:
        updater = RuleListUpdater(url=url, logger=logger)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(get_message("cli.update_started", language, url=url))

    try:
        result = updater.update(destination)
    except AddrError as e:
        print(f"{get_message('cli.update_failed', language)}: {e.message}", file=sys.stderr)
        return 1

    print(get_message("cli.update_completed", language, path=result.path, count=result.rule_count))
    return 0


def cmd_self_test(args: argparse.Namespace) -> int:
    """Handle the 'self-test' command."""
    config = resolve_config(args)
    if config is None:
        return 1

    self_test = SelfTest(config, logger=create_logger(config, args.verbose))
    result = self_test.run()
    self_test.print_results(result, config.language)

    return 0 if result.success else 1


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH
    language = args.language

    if args.action == "show":
        config = load_config_from_file(config_path)
        if config is None:
            print(get_message("cli.config_not_found", language, path=config_path))
            print("Use 'config init' to create a default configuration.")
            return 1

        print(get_message("cli.config_loaded", config.language, path=config_path))
        print(json.dumps(config_to_dict(config), indent=2, ensure_ascii=False))
        return 0

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(get_message("cli.config_exists", language, path=config_path))
            return 1

        config = create_default_config(language=language or "en")
        if save_config_to_file(config, config_path):
            print(get_message("cli.config_created", language, path=config_path))
            return 0
        print(get_message("cli.config_save_failed", language, path=config_path), file=sys.stderr)
        return 1

    elif args.action == "validate":
        config = load_config_from_file(config_path)
        if config is None:
            print(get_message("cli.config_not_found", language, path=config_path), file=sys.stderr)
            return 1

        validation = SelfTest(config).validate_config()
        language = language or config.language
        if not validation.valid:
            print(get_message("cli.config_invalid", language))
            for error in validation.errors:
                print(f"  - {error}")
            return 1

        print(get_message("cli.config_valid", language))
        for warning in validation.warnings:
            print(f"  - {warning}")
        return 0

    return 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--language", "-l",
        choices=sorted(SUPPORTED_LANGUAGES),
        help="Output language (default: from configuration, else en)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="domain-addr",
        description="Domain and DNS name validation against the Public Suffix List",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'domain' command
    domain_parser = subparsers.add_parser(
        "domain",
        help="Validate a domain name",
    )
    domain_parser.add_argument(
        "name",
        help="Domain name to validate (e.g., www.example.co.uk)",
    )
    domain_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    _add_common_arguments(domain_parser)
    domain_parser.set_defaults(func=cmd_domain)

    # 'dns' command
    dns_parser = subparsers.add_parser(
        "dns",
        help="Validate a DNS record name",
    )
    dns_parser.add_argument(
        "name",
        help="DNS name to validate (e.g., _sip._tcp.example.com.)",
    )
    dns_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    _add_common_arguments(dns_parser)
    dns_parser.set_defaults(func=cmd_dns)

    # 'check-list' command
    check_list_parser = subparsers.add_parser(
        "check-list",
        help="Validate multiple names from a file",
    )
    check_list_parser.add_argument(
        "file",
        help="Path to file containing names (one per line)",
    )
    check_list_parser.add_argument(
        "--dns",
        action="store_true",
        help="Validate as DNS record names instead of domain names",
    )
    check_list_parser.add_argument(
        "--output", "-o",
        help="Path to write results as JSON",
    )
    check_list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    _add_common_arguments(check_list_parser)
    check_list_parser.set_defaults(func=cmd_check_list)

    # 'update-rules' command
    update_parser = subparsers.add_parser(
        "update-rules",
        help="Download the current Public Suffix List",
    )
    update_parser.add_argument(
        "--output", "-o",
        help="Where to store the list (default: configured path)",
    )
    update_parser.add_argument(
        "--url",
        help="HTTPS URL to download from",
    )
    _add_common_arguments(update_parser)
    update_parser.set_defaults(func=cmd_update_rules)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.add_argument(
        "--language", "-l",
        choices=sorted(SUPPORTED_LANGUAGES),
        help="Default language for new configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    # 'self-test' command
    self_test_parser = subparsers.add_parser(
        "self-test",
        help="Validate configuration and run known-answer checks",
    )
    _add_common_arguments(self_test_parser)
    self_test_parser.set_defaults(func=cmd_self_test)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print(get_message("cli.interrupted", getattr(args, "language", None)), file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
