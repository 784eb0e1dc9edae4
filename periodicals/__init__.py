"""Per-periodical anchor catalogs built from successive editions."""

from .classification import (
    TYPICAL_CLASSIFIER,
    ClassifiedAnchorText,
    ClassifierContext,
    TypicalAnchorTextClassifier,
    UnclassifiedAnchorText,
    exact_match,
    is_classified,
)
from .errors import IngestError, PeriodicalsError, RuleConfigError
from .periodical import TypicalPeriodical
from .rules import AnchorTextRule, TypicalAnchorTextRuleEngine, load_rules
from .supplier import TypicalPeriodicalSupplier
from .types import (
    ClassifiedAnchor,
    ClassifiedPeriodicalAnchor,
    EmailPeriodicalEdition,
    HtmlAnchor,
    PeriodicalAnchor,
    PeriodicalEdition,
    UniformResourceLocation,
)

__all__ = [
    "TYPICAL_CLASSIFIER",
    "AnchorTextRule",
    "ClassifiedAnchor",
    "ClassifiedAnchorText",
    "ClassifiedPeriodicalAnchor",
    "ClassifierContext",
    "EmailPeriodicalEdition",
    "HtmlAnchor",
    "IngestError",
    "PeriodicalAnchor",
    "PeriodicalEdition",
    "PeriodicalsError",
    "RuleConfigError",
    "TypicalAnchorTextClassifier",
    "TypicalAnchorTextRuleEngine",
    "TypicalPeriodical",
    "TypicalPeriodicalSupplier",
    "UnclassifiedAnchorText",
    "UniformResourceLocation",
    "exact_match",
    "is_classified",
    "load_rules",
]
