"""Shared fixtures for periodicals tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List

import pytest

from periodicals.classification import TYPICAL_CLASSIFIER
from periodicals.periodical import TypicalPeriodical
from periodicals.rules import load_rules
from periodicals.supplier import TypicalPeriodicalSupplier
from periodicals.types import HtmlAnchor, PeriodicalEdition


@pytest.fixture()
def rules_engine():
    """Provide the packaged anchor text rules."""

    return load_rules(None)


@pytest.fixture()
def supplier(rules_engine):
    return TypicalPeriodicalSupplier("email://test", rules_engine, TYPICAL_CLASSIFIER)


def make_edition(
    periodical: TypicalPeriodical,
    labels: Iterable[str | None],
    *,
    content_id: str | None = None,
    date: datetime | None = None,
) -> PeriodicalEdition:
    """Register anchors for ``labels`` and the edition that holds them."""

    number = len(periodical.editions) + 1
    anchors = [
        periodical.register_anchor(HtmlAnchor(href=f"https://example.com/{number}/{index}", label=label))
        for index, label in enumerate(labels)
    ]
    edition = PeriodicalEdition(
        supplier_content_id=content_id or f"{periodical.name}-{number}",
        from_address="news@example.com",
        from_name=periodical.name,
        date=date or datetime(2024, 1, number, tzinfo=timezone.utc),
        anchors=anchors,
    )
    return periodical.register_edition(edition)


def labels_of(edition: PeriodicalEdition) -> List[str]:
    return [anchor.classifier_text for anchor in edition.anchors]
