"""Registry of the periodicals delivered by one content supplier."""

from __future__ import annotations

import logging
from typing import Dict, Iterator

from .classification import AnchorTextClassifier, AnchorTextRuleEngine
from .periodical import TypicalPeriodical

logger = logging.getLogger(__name__)


class TypicalPeriodicalSupplier:
    """Maps periodical names to :class:`TypicalPeriodical` instances.

    All periodicals of a supplier share its rule engine and classifier.
    """

    def __init__(
        self,
        name: str,
        rules_engine: AnchorTextRuleEngine,
        classifier: AnchorTextClassifier,
    ) -> None:
        self.name = name
        self.rules_engine = rules_engine
        self.classifier = classifier
        self.periodicals: Dict[str, TypicalPeriodical] = {}

    def __len__(self) -> int:
        return len(self.periodicals)

    def __contains__(self, name: object) -> bool:
        return name in self.periodicals

    def __iter__(self) -> Iterator[TypicalPeriodical]:
        return iter(self.periodicals.values())

    def register_periodical(self, name: str) -> TypicalPeriodical:
        """Return the periodical called ``name``, creating it on first use."""

        periodical = self.periodicals.get(name)
        if periodical is None:
            periodical = TypicalPeriodical(name, self.rules_engine, self.classifier)
            self.periodicals[name] = periodical
        return periodical

    def classify_anchors(self) -> None:
        for periodical in self.periodicals.values():
            periodical.classify_anchors()
        logger.info("Classified anchors of %d periodicals from %s", len(self.periodicals), self.name)
