"""Anchor text classification results and classifier interfaces.

A classification is a tagged union of :class:`ClassifiedAnchorText` and
:class:`UnclassifiedAnchorText`. Classifiers receive a
:class:`ClassifierContext` carrying the text, the rule engine and a matcher
for the name of the periodical the text was found in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, Union


@dataclass(frozen=True)
class ClassifiedAnchorText:
    """Anchor text that a rule assigned to a semantic category."""

    anchor_text: str
    category: str
    rule: str


@dataclass(frozen=True)
class UnclassifiedAnchorText:
    """Explicit marker for anchor text no rule matched."""

    anchor_text: str


Classification = Union[ClassifiedAnchorText, UnclassifiedAnchorText]

NameMatcher = Callable[[str], bool]


def is_classified(classification: Classification) -> bool:
    """Return True when ``classification`` carries a category."""

    return isinstance(classification, ClassifiedAnchorText)


def unclassified_anchor_text(anchor_text: str) -> UnclassifiedAnchorText:
    return UnclassifiedAnchorText(anchor_text=anchor_text)


def exact_match(name: str) -> NameMatcher:
    """Return a matcher accepting only ``name`` itself."""

    def _matches(candidate: str) -> bool:
        return candidate == name

    return _matches


class AnchorTextRule(Protocol):
    name: str
    category: str

    def matches(self, context: "ClassifierContext") -> bool:
        ...


class AnchorTextRuleEngine(Protocol):
    @property
    def rules(self) -> Sequence[AnchorTextRule]:
        ...


@dataclass(frozen=True)
class ClassifierContext:
    """Everything a classifier may consult for a single anchor text."""

    anchor_text: str
    engine: AnchorTextRuleEngine
    periodical_name: NameMatcher


class AnchorTextClassifier(Protocol):
    def classify(self, context: ClassifierContext) -> Classification:
        ...


class TypicalAnchorTextClassifier:
    """First-match classifier over the engine's ordered rules."""

    def classify(self, context: ClassifierContext) -> Classification:
        if not context.anchor_text:
            return unclassified_anchor_text(context.anchor_text)
        for rule in context.engine.rules:
            if rule.matches(context):
                return ClassifiedAnchorText(
                    anchor_text=context.anchor_text,
                    category=rule.category,
                    rule=rule.name,
                )
        return unclassified_anchor_text(context.anchor_text)


TYPICAL_CLASSIFIER = TypicalAnchorTextClassifier()
