"""A single periodical: its editions and the running tally of anchor texts."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List

from .classification import (
    AnchorTextClassifier,
    AnchorTextRuleEngine,
    Classification,
    ClassifierContext,
    NameMatcher,
    exact_match,
    is_classified,
    unclassified_anchor_text,
)
from .text import classifier_text
from .types import (
    ClassifiedAnchor,
    ClassifiedPeriodicalAnchor,
    HtmlAnchor,
    PeriodicalAnchor,
    PeriodicalEdition,
)

logger = logging.getLogger(__name__)


class TypicalPeriodical:
    """Collects the editions of one periodical and classifies their anchors.

    Ingestion (:meth:`register_anchor`, :meth:`register_edition`) only does
    bookkeeping. :meth:`classify_anchors` runs once everything is loaded:
    it classifies every distinct anchor text at periodical level, then
    refines the anchors of every edition, preferring the periodical-level
    result whenever it is a successful classification.
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
        self.name_matcher: NameMatcher = exact_match(name)
        self.editions: List[PeriodicalEdition] = []
        self.classified_anchors: Dict[str, ClassifiedPeriodicalAnchor] = {}
        self._unclassified_anchors: Dict[str, PeriodicalAnchor] = {}

    def __repr__(self) -> str:
        return f"TypicalPeriodical(name={self.name!r}, editions={len(self.editions)})"

    @property
    def anchor_tally(self) -> Dict[str, PeriodicalAnchor]:
        """Copy of the anchor text tally accumulated during ingestion."""

        return {text: replace(anchor) for text, anchor in self._unclassified_anchors.items()}

    def common_anchors(self) -> List[ClassifiedPeriodicalAnchor]:
        return [anchor for anchor in self.classified_anchors.values() if anchor.is_common]

    def classify_anchor_text(self, anchor_text: str) -> Classification:
        context = ClassifierContext(
            anchor_text=anchor_text,
            engine=self.rules_engine,
            periodical_name=self.name_matcher,
        )
        return self.classifier.classify(context)

    def register_edition(self, edition: PeriodicalEdition) -> PeriodicalEdition:
        self.editions.append(edition)
        return edition

    def register_anchor(self, anchor: HtmlAnchor) -> ClassifiedAnchor:
        """Count ``anchor`` in the tally and return its provisional record.

        Anchors without usable label text are returned but never counted.
        """

        text = classifier_text(anchor.label)
        if text:
            tallied = self._unclassified_anchors.get(text)
            if tallied is None:
                self._unclassified_anchors[text] = PeriodicalAnchor(anchor_text=text, count=1)
            else:
                tallied.count += 1
        return ClassifiedAnchor(
            href=anchor.href,
            label=anchor.label,
            classifier_text=text,
            classification=unclassified_anchor_text(text),
        )

    def classify_anchors(self) -> None:
        edition_count = len(self.editions)
        for tallied in self._unclassified_anchors.values():
            self.classified_anchors[tallied.anchor_text] = ClassifiedPeriodicalAnchor(
                anchor_text=tallied.anchor_text,
                count=tallied.count,
                classification=self.classify_anchor_text(tallied.anchor_text),
                is_common=tallied.count > 1 and tallied.count == edition_count,
            )
        logger.debug(
            "Classified %d anchor texts for %s (%d common, %d editions)",
            len(self.classified_anchors),
            self.name,
            len(self.common_anchors()),
            edition_count,
        )

        for edition in self.editions:
            edition.anchors[:] = [self._refine(anchor) for anchor in edition.anchors]

    def _refine(self, anchor: ClassifiedAnchor) -> ClassifiedAnchor:
        periodical_anchor = self.classified_anchors.get(anchor.classifier_text)
        if periodical_anchor is not None and is_classified(periodical_anchor.classification):
            return replace(
                anchor,
                classification=periodical_anchor.classification,
                classified_by=periodical_anchor,
            )
        return replace(
            anchor,
            classification=self.classify_anchor_text(anchor.classifier_text),
            classified_by=None,
        )
