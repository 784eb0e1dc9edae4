"""Regex rule engine for anchor texts, configured through YAML."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

from .classification import ClassifierContext
from .errors import RuleConfigError

DEFAULT_RULES_RESOURCE = "common_rules.yaml"


@dataclass(frozen=True)
class AnchorTextRule:
    """Categorize anchor text matching any of ``patterns``.

    When ``periodicals`` is non-empty the rule only applies to anchors of
    the named periodicals.
    """

    name: str
    category: str
    patterns: Tuple[re.Pattern[str], ...]
    periodicals: Tuple[str, ...] = field(default_factory=tuple)

    def matches(self, context: ClassifierContext) -> bool:
        if self.periodicals and not any(context.periodical_name(name) for name in self.periodicals):
            return False
        return any(pattern.search(context.anchor_text) for pattern in self.patterns)


class TypicalAnchorTextRuleEngine:
    """Ordered collection of anchor text rules."""

    def __init__(self, rules: Sequence[AnchorTextRule]) -> None:
        self._rules: Tuple[AnchorTextRule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[AnchorTextRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"TypicalAnchorTextRuleEngine({[rule.name for rule in self._rules]!r})"


def load_rules(path: str | Path | None = None) -> TypicalAnchorTextRuleEngine:
    """Load the packaged rules, merging rules from ``path`` when it exists.

    Rules from ``path`` replace packaged rules of the same name; rules with
    new names are appended after the packaged ones.
    """

    defaults = resources.files("periodicals").joinpath("data").joinpath(DEFAULT_RULES_RESOURCE)
    text = defaults.read_text(encoding="utf-8")
    entries = _rule_entries(yaml.safe_load(text), DEFAULT_RULES_RESOURCE)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        merge_rules(entries, _rule_entries(user, str(path)))

    return TypicalAnchorTextRuleEngine([build_rule(entry) for entry in entries])


def merge_rules(base: List[Dict[str, Any]], override: List[Dict[str, Any]]) -> None:
    """Merge ``override`` rule entries into ``base`` by rule name."""

    positions = {entry["name"]: index for index, entry in enumerate(base)}
    for entry in override:
        index = positions.get(entry["name"])
        if index is None:
            positions[entry["name"]] = len(base)
            base.append(entry)
        else:
            base[index] = entry


def build_rule(entry: Dict[str, Any]) -> AnchorTextRule:
    """Compile a rule entry mapping into an :class:`AnchorTextRule`."""

    name = entry.get("name")
    category = entry.get("category")
    patterns = entry.get("patterns")
    if not name or not category:
        raise RuleConfigError(f"Rule {entry!r} needs both a name and a category")
    if not isinstance(patterns, list) or not patterns:
        raise RuleConfigError(f"Rule {name!r} needs a non-empty list of patterns")
    try:
        compiled = tuple(re.compile(str(pattern), re.IGNORECASE) for pattern in patterns)
    except re.error as exc:
        raise RuleConfigError(f"Rule {name!r} has an invalid pattern: {exc}") from exc
    periodicals = entry.get("periodicals") or []
    if isinstance(periodicals, str):
        periodicals = [periodicals]
    return AnchorTextRule(
        name=str(name),
        category=str(category),
        patterns=compiled,
        periodicals=tuple(str(item) for item in periodicals),
    )


def _rule_entries(document: Any, source: str) -> List[Dict[str, Any]]:
    if not isinstance(document, dict):
        raise RuleConfigError(f"{source}: expected a mapping with a 'rules' list")
    rules = document.get("rules", [])
    if not isinstance(rules, list) or not all(isinstance(item, dict) for item in rules):
        raise RuleConfigError(f"{source}: 'rules' must be a list of mappings")
    for item in rules:
        if "name" not in item:
            raise RuleConfigError(f"{source}: every rule needs a name")
    return [dict(item) for item in rules]
