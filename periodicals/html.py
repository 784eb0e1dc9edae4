"""Extract anchors from edition HTML."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup  # type: ignore

from .types import HtmlAnchor


def extract_anchors(html: str) -> List[HtmlAnchor]:
    """Return every ``<a href>`` in ``html`` in document order.

    The label is the element's visible text; blank text yields ``None``.
    """

    if not html:
        return []

    try:
        soup = BeautifulSoup(html, 'lxml')
    except Exception:
        soup = BeautifulSoup(html, 'html.parser')

    anchors: List[HtmlAnchor] = []
    for element in soup.find_all('a'):
        href = element.get('href')
        if not href:
            continue
        label = element.get_text()
        anchors.append(HtmlAnchor(href=str(href).strip(), label=label if label.strip() else None))
    return anchors
