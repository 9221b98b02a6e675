"""Fuzzy matching exports.

Combines the default label scorer and the entry-level filter adapter in one
import surface.
"""

from __future__ import annotations

from .adapter import FuzzyFilterAdapter, Matcher
from .fuzzy import fuzzy_match_labels, match_labels

__all__ = [
    "FuzzyFilterAdapter",
    "Matcher",
    "fuzzy_match_labels",
    "match_labels",
]
