"""
Public Suffix List rule database.

Rules are stored in a trie keyed by their labels in reverse order, so that a
name is matched by walking its labels right to left. Each trie node records
which rule kinds end there:

- PLAIN ``co.uk`` ends at node ``uk -> co``
- WILDCARD ``*.ck`` is recorded on node ``ck`` and consumes one more label
- EXCEPTION ``!www.ck`` ends at node ``ck -> www``

The database is built once, frozen, and afterwards only read, so a single
instance can be shared between threads without locking.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from domain_addr.enums import RuleKind, RuleSection


# Precedence between rules matching the same number of labels
KIND_PRECEDENCE = {
    RuleKind.PLAIN: 0,
    RuleKind.WILDCARD: 1,
    RuleKind.EXCEPTION: 2,
}


@dataclass(frozen=True)
class Rule:
    """A single rule; labels are left to right without '*.' or '!' markers."""

    labels: tuple[str, ...]
    kind: RuleKind = RuleKind.PLAIN
    section: RuleSection = RuleSection.ICANN

    def __str__(self) -> str:
        pattern = ".".join(self.labels)
        if self.kind is RuleKind.WILDCARD:
            return f"*.{pattern}"
        if self.kind is RuleKind.EXCEPTION:
            return f"!{pattern}"
        return pattern


@dataclass(frozen=True)
class MatchResult:
    """Best rule matching the end of a name."""

    matched_label_count: int
    kind: RuleKind
    section: RuleSection
    is_default: bool = False

    @property
    def suffix_label_count(self) -> int:
        """Number of trailing labels forming the public suffix."""
        if self.kind is RuleKind.EXCEPTION:
            return self.matched_label_count - 1
        return self.matched_label_count


# Implicit "*" rule: the last label alone is a public suffix
DEFAULT_MATCH = MatchResult(
    matched_label_count=1,
    kind=RuleKind.PLAIN,
    section=RuleSection.ICANN,
    is_default=True,
)


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    kinds: dict[RuleKind, RuleSection] = field(default_factory=dict)


class RuleDatabase:
    """
    Immutable collection of suffix rules indexed by reversed labels.

    Rules are added with add_rule() and the database is then frozen; any
    further add_rule() call raises RuntimeError.
    """

    def __init__(self, rules: Optional[Sequence[Rule]] = None) -> None:
        """
        Initialize the database.

        Args:
            rules: Optional rules to add; the database is frozen afterwards
                when they are given
        """
        self._root = _Node()
        self._rules: list[Rule] = []
        self._frozen = False

        if rules is not None:
            for rule in rules:
                self.add_rule(rule)
            self.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_rule(self, rule: Rule) -> None:
        """Append a rule's labels to the trie."""
        if self._frozen:
            raise RuntimeError("Rule database is frozen")
        if not rule.labels:
            raise ValueError("Rule has no labels")
        if rule.kind is RuleKind.EXCEPTION and len(rule.labels) < 2:
            raise ValueError("Exception rule needs at least two labels")

        node = self._root
        for label in reversed(rule.labels):
            label = label.lower()
            if label not in node.children:
                node.children[label] = _Node()
            node = node.children[label]

        if rule.kind not in node.kinds:
            self._rules.append(rule)
        node.kinds[rule.kind] = rule.section

    def freeze(self) -> None:
        """Stop accepting rules."""
        self._frozen = True

    def count(self, kind: Optional[RuleKind] = None) -> int:
        """Number of rules, optionally of a single kind."""
        if kind is None:
            return len(self._rules)
        return sum(1 for rule in self._rules if rule.kind is kind)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule: object) -> bool:
        if not isinstance(rule, Rule):
            return False
        node: Optional[_Node] = self._root
        for label in reversed(rule.labels):
            node = node.children.get(label.lower())
            if node is None:
                return False
        return rule.kind in node.kinds

    def find_longest_match(self, labels_reversed: Sequence[str]) -> Optional[MatchResult]:
        """
        Find the best rule matching the given labels.

        Args:
            labels_reversed: ASCII labels of a name, rightmost label first

        Returns:
            An exception match when one applies, otherwise the explicit
            match with the most matched labels (Wildcard > Plain on equal
            counts), the default single-label match when no explicit rule
            applies, or None for no labels
        """
        if not labels_reversed:
            return None

        best: Optional[MatchResult] = None
        node = self._root
        depth = 0

        for label in labels_reversed:
            # A wildcard on this node covers the current label
            section = node.kinds.get(RuleKind.WILDCARD)
            if section is not None:
                best = _better(best, MatchResult(depth + 1, RuleKind.WILDCARD, section))

            child = node.children.get(label.lower())
            if child is None:
                break
            node = child
            depth += 1

            for kind in (RuleKind.PLAIN, RuleKind.EXCEPTION):
                section = node.kinds.get(kind)
                if section is not None:
                    best = _better(best, MatchResult(depth, kind, section))

        return best or DEFAULT_MATCH


def _better(current: Optional[MatchResult], candidate: MatchResult) -> MatchResult:
    if current is None:
        return candidate
    current_key = _rank(current)
    candidate_key = _rank(candidate)
    return candidate if candidate_key > current_key else current


def _rank(match: MatchResult) -> tuple[bool, int, int]:
    # An exception prevails over any other matching rule
    return (
        match.kind is RuleKind.EXCEPTION,
        match.matched_label_count,
        KIND_PRECEDENCE[match.kind],
    )
