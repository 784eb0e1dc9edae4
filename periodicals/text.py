"""Anchor label normalization."""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def classifier_text(label: Optional[str]) -> str:
    """Return the lower-cased, single-spaced, trimmed form of ``label``.

    Missing or blank labels yield an empty string, which callers treat as
    "no usable text".
    """

    if not label:
        return ""
    return _WHITESPACE_RE.sub(" ", label).strip().lower()
