"""
Suffix matcher.

Determines how many trailing labels of a name form its public suffix.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from domain_addr.enums import RuleKind, RuleSection
from domain_addr.psl_loader import default_rule_database
from domain_addr.rules import DEFAULT_MATCH, RuleDatabase


@dataclass(frozen=True)
class SuffixMatch:
    """Public suffix of a name, counted in trailing labels."""

    label_count: int
    kind: RuleKind = RuleKind.PLAIN
    section: RuleSection = RuleSection.ICANN
    is_default: bool = False

    @property
    def is_private(self) -> bool:
        return self.section is RuleSection.PRIVATE


def match_suffix(labels: Sequence[str], db: Optional[RuleDatabase] = None) -> SuffixMatch:
    """
    Match the public suffix of a name.

    Args:
        labels: ASCII labels of the name, left to right
        db: Rule database; the bundled default database when omitted

    Returns:
        SuffixMatch; falls back to the single-label default rule when no
        explicit rule applies
    """
    if db is None:
        db = default_rule_database()

    result = db.find_longest_match(list(reversed(labels))) or DEFAULT_MATCH

    return SuffixMatch(
        label_count=result.suffix_label_count,
        kind=result.kind,
        section=result.section,
        is_default=result.is_default,
    )
