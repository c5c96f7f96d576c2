"""
Public Suffix List loader.

Parses PSL-format text into a RuleDatabase. Each significant line is one of:

- a plain rule (``co.uk``)
- a wildcard rule (``*.ck``)
- an exception rule (``!www.ck``)

Comments (``//``) and blank lines are skipped; the ``===BEGIN PRIVATE
DOMAINS===`` marker switches subsequent rules to the PRIVATE section. Rule
labels are lowercased and IDNA-encoded so that they compare equal to the
ASCII form of parsed names.

A snapshot of the list ships with the package; default_rule_database()
builds it once and hands out the same frozen instance afterwards.
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

from domain_addr.enums import RuleKind, RuleListErrorCode, RuleSection
from domain_addr.event_logger import EventLogger
from domain_addr.exceptions import LabelError, RuleListError
from domain_addr.labels import to_ascii
from domain_addr.rules import Rule, RuleDatabase


BUNDLED_RULES_FILE = "public_suffix_list.dat"

BEGIN_PRIVATE_MARKER = "===BEGIN PRIVATE DOMAINS==="
END_PRIVATE_MARKER = "===END PRIVATE DOMAINS==="

COMPONENT = "psl_loader"


def parse_rule(line: str, section: RuleSection = RuleSection.ICANN) -> Rule:
    """
    Parse a single rule line.

    Args:
        line: Rule text; only the first whitespace-delimited token counts
        section: Section the rule belongs to

    Returns:
        The parsed Rule

    Raises:
        RuleListError: If the line is not a valid rule
    """
    tokens = line.split()
    token = tokens[0] if tokens else ""

    kind = RuleKind.PLAIN
    if token.startswith("!"):
        kind = RuleKind.EXCEPTION
        token = token[1:]
    elif token.startswith("*."):
        kind = RuleKind.WILDCARD
        token = token[2:]

    labels = token.split(".")
    if not token or any(not label for label in labels):
        raise RuleListError(
            code=RuleListErrorCode.INVALID_RULE.value,
            message="Rule has an empty label",
            details={"rule": line},
        )
    if "*" in labels or any(label.startswith("!") for label in labels):
        raise RuleListError(
            code=RuleListErrorCode.INVALID_RULE.value,
            message="Wildcard or exception marker in an unsupported position",
            details={"rule": line},
        )
    if kind is RuleKind.EXCEPTION and len(labels) < 2:
        raise RuleListError(
            code=RuleListErrorCode.INVALID_RULE.value,
            message="Exception rule needs at least two labels",
            details={"rule": line},
        )

    try:
        encoded = tuple(to_ascii(label).lower() for label in labels)
    except LabelError as e:
        raise RuleListError(
            code=RuleListErrorCode.INVALID_RULE.value,
            message=f"Rule cannot be IDNA-encoded: {e.message}",
            details={"rule": line},
        ) from e

    return Rule(labels=encoded, kind=kind, section=section)


def parse_rule_list(
    lines: Iterable[str],
    include_private: bool = True,
    logger: Optional[EventLogger] = None,
) -> RuleDatabase:
    """
    Build a frozen RuleDatabase from PSL-format lines.

    Invalid rules are skipped and reported through the logger.

    Args:
        lines: Lines of PSL text
        include_private: Load rules from the PRIVATE section too
        logger: Optional event logger

    Returns:
        Frozen RuleDatabase
    """
    database = RuleDatabase()
    section = RuleSection.ICANN
    skipped = 0
    private_skipped = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        # Section markers live inside comments
        if line.startswith("//"):
            if BEGIN_PRIVATE_MARKER in line:
                section = RuleSection.PRIVATE
            elif END_PRIVATE_MARKER in line:
                section = RuleSection.ICANN
            continue

        if not line:
            continue

        if section is RuleSection.PRIVATE and not include_private:
            private_skipped += 1
            continue

        try:
            rule = parse_rule(line, section)
        except RuleListError as e:
            skipped += 1
            if logger:
                logger.warn(
                    COMPONENT,
                    "Skipping invalid rule",
                    {"line": line_number, "rule": line, "reason": e.message},
                )
            continue

        database.add_rule(rule)

    database.freeze()

    if logger:
        logger.info(
            COMPONENT,
            "Loaded public suffix rules",
            {
                "rules": len(database),
                "wildcards": database.count(RuleKind.WILDCARD),
                "exceptions": database.count(RuleKind.EXCEPTION),
                "skipped": skipped,
                "private_skipped": private_skipped,
            },
        )

    return database


def load_rule_database(
    path: Optional[Path] = None,
    include_private: bool = True,
    logger: Optional[EventLogger] = None,
) -> RuleDatabase:
    """
    Load a rule database from a PSL file.

    Args:
        path: PSL file to read; None reads the bundled snapshot
        include_private: Load rules from the PRIVATE section too
        logger: Optional event logger

    Returns:
        Frozen RuleDatabase

    Raises:
        RuleListError: If the file cannot be read or holds no rules
    """
    try:
        if path is None:
            text = (
                resources.files("domain_addr")
                .joinpath("data", BUNDLED_RULES_FILE)
                .read_text(encoding="utf-8")
            )
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuleListError(
            code=RuleListErrorCode.READ_ERROR.value,
            message=f"Could not read rule list: {e}",
            details={"path": str(path) if path else BUNDLED_RULES_FILE},
        ) from e

    database = parse_rule_list(text.splitlines(), include_private=include_private, logger=logger)

    if not len(database):
        raise RuleListError(
            code=RuleListErrorCode.READ_ERROR.value,
            message="Rule list contains no rules",
            details={"path": str(path) if path else BUNDLED_RULES_FILE},
        )

    return database


@lru_cache(maxsize=1)
def default_rule_database() -> RuleDatabase:
    """
    Return the process-wide rule database built from the bundled list.

    Built on first use and shared afterwards; the database is frozen, so
    concurrent readers need no locking.
    """
    return load_rule_database()


def clear_cache() -> None:
    """Drop the cached default database so that the next call rebuilds it."""
    default_rule_database.cache_clear()
