"""Typed data structures for periodicals, editions and their anchors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .classification import Classification, UnclassifiedAnchorText


@dataclass(frozen=True)
class UniformResourceLocation:
    """A link target found in the content of a periodical."""

    href: str


@dataclass(frozen=True)
class HtmlAnchor(UniformResourceLocation):
    """Hyperlink as extracted from HTML, with its optional display label."""

    label: Optional[str] = None


@dataclass
class PeriodicalAnchor:
    """Running tally entry for one normalized anchor text."""

    anchor_text: str
    count: int = 1


@dataclass(frozen=True)
class ClassifiedPeriodicalAnchor:
    """Periodical-level anchor text after the classification pass.

    ``is_common`` marks text seen more than once and in every edition
    registered when the pass ran.
    """

    anchor_text: str
    count: int
    classification: Classification
    is_common: bool = False


@dataclass(frozen=True)
class ClassifiedAnchor(HtmlAnchor):
    """Anchor as it appears in a single edition.

    Without an explicit ``classification`` the anchor carries the
    unclassified marker for its own ``classifier_text``.
    """

    classifier_text: str = ""
    classification: Classification = field(default_factory=lambda: UnclassifiedAnchorText(anchor_text=""))
    classified_by: Optional[ClassifiedPeriodicalAnchor] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.classification, UnclassifiedAnchorText) and (
            self.classification.anchor_text != self.classifier_text
        ):
            object.__setattr__(self, "classification", UnclassifiedAnchorText(anchor_text=self.classifier_text))


@dataclass(frozen=True)
class PeriodicalEdition:
    """One issue of a periodical.

    The edition itself is immutable; only the classifications of the
    anchors in ``anchors`` are refined by the classification pass.
    """

    supplier_content_id: str
    from_address: str
    from_name: str
    date: datetime
    anchors: List[ClassifiedAnchor] = field(default_factory=list)


@dataclass(frozen=True)
class EmailPeriodicalEdition(PeriodicalEdition):
    """Edition delivered as an email newsletter."""

    subject: str = ""
