from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

from models.rule import Rule, RuleConfigurationError

RuleDefinition = Tuple[str, str, Any]

# Order is priority: a line is assigned to the first rule that matches it.
# "SELinux Denials" sits behind "Permission Issues", whose avc:.*denied
# alternative already covers it, so it never matches.
DEFAULT_RULE_DEFINITIONS: Sequence[RuleDefinition] = (
    ("Permission Issues", r"permission denied|avc:.*denied", "rgb(220,20,60)"),
    ("Security Exceptions", r"security exception|invalid credential", "rgb(255,140,0)"),
    ("Root Access", r"root access|su command", "rgb(50,205,50)"),
    ("Malware/Trojans", r"malware|trojan|virus|backdoor", "rgb(138,43,226)"),
    ("Unauthorized Access", r"unauthorized (access|attempt)|bruteforce", "rgb(0,191,255)"),
    ("Kernel Issues", r"kernel panic|segfault|Oops\[#\d+\]|Call Trace:", "rgb(255,215,0)"),
    ("SELinux Denials", r"avc: denied", "rgb(255,105,180)"),
    ("Debugging Issues", r"debuggerd.*signal 11", "rgb(64,224,208)"),
    ("Package Issues", r"package .* does not belong to|invalid package", "rgb(147,112,219)"),
)


class RuleTable:
    """Ordered, read-only collection of classification rules."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] = ()):
        rules = tuple(rules)
        seen: set[str] = set()
        for rule in rules:
            if rule.label in seen:
                raise RuleConfigurationError(f"Duplicate rule label: {rule.label}")
            seen.add(rule.label)
        self._rules = rules

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(rule.label for rule in self._rules)

    def get(self, label: str) -> Optional[Rule]:
        for rule in self._rules:
            if rule.label == label:
                return rule
        return None

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({list(self.labels)!r})"


def build_rule_table(definitions: Iterable[RuleDefinition]) -> RuleTable:
    """Compile ``(label, expression, color)`` triples into a table, keeping their order."""

    return RuleTable(Rule.compile(label, expression, color) for label, expression, color in definitions)


DEFAULT_RULE_TABLE = build_rule_table(DEFAULT_RULE_DEFINITIONS)


def get_rules(table: RuleTable = DEFAULT_RULE_TABLE) -> Tuple[Rule, ...]:
    return table.rules
