"""Ingest email newsletters into a periodical supplier.

Each email becomes an edition of the periodical identified by its sender.
Once every email is registered the supplier's classification pass runs so
the returned supplier is fully classified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Dict, Iterable, List, Set

from .errors import IngestError
from .html import extract_anchors
from .supplier import TypicalPeriodicalSupplier
from .types import ClassifiedAnchor, EmailPeriodicalEdition, HtmlAnchor

logger = logging.getLogger(__name__)

AnchorExtractor = Callable[[str], List[HtmlAnchor]]


@dataclass(frozen=True)
class EmailSupplierContent:
    """One exported email message."""

    message_id: str
    from_address: str
    from_name: str
    date: str
    subject: str
    html_content: str

    @property
    def periodical_name(self) -> str:
        return f"{self.from_name} <{self.from_address}>"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmailSupplierContent":
        # Exported records use camelCase keys.
        return cls(
            message_id=data.get("messageId", data.get("message_id", "")),
            from_address=data.get("fromAddress", data.get("from_address", "")),
            from_name=data.get("fromName", data.get("from_name", "")),
            date=data.get("date", ""),
            subject=data.get("subject", ""),
            html_content=data.get("htmlContent", data.get("html_content", "")),
        )


@dataclass
class IngestStats:
    editions_encountered: int = 0
    periodicals_encountered: int = 0
    edition_anchors_encountered: int = 0


def parse_date(value: str) -> datetime:
    """Parse an ISO 8601 or RFC 2822 date string."""

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise IngestError(f"Unparseable email date: {value!r}") from exc


def ingest_emails(
    supplier: TypicalPeriodicalSupplier,
    emails: Iterable[EmailSupplierContent],
    extract: AnchorExtractor = extract_anchors,
) -> IngestStats:
    """Register every email as an edition, then classify all anchors."""

    stats = IngestStats()
    seen: Set[str] = set()
    for email in emails:
        date = parse_date(email.date)
        periodical = supplier.register_periodical(email.periodical_name)
        seen.add(periodical.name)
        anchors: List[ClassifiedAnchor] = [
            periodical.register_anchor(anchor) for anchor in extract(email.html_content)
        ]
        stats.edition_anchors_encountered += len(anchors)
        periodical.register_edition(
            EmailPeriodicalEdition(
                supplier_content_id=email.message_id,
                from_address=email.from_address,
                from_name=email.from_name,
                date=date,
                anchors=anchors,
                subject=email.subject,
            )
        )
        stats.editions_encountered += 1

    supplier.classify_anchors()
    stats.periodicals_encountered = len(seen)
    logger.info(
        "Ingested %d editions of %d periodicals (%d anchors) into %s",
        stats.editions_encountered,
        stats.periodicals_encountered,
        stats.edition_anchors_encountered,
        supplier.name,
    )
    return stats
