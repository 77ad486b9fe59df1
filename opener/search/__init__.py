"""Search and selection functionality for project-opener.

This package contains:
- matching.py: Substring and fuzzy matching
- select.py: Zero/one/many disambiguation
"""

from .matching import (
    MatchResult,
    filter_by_company,
    fuzzy_match,
    fuzzy_rank,
    fuzzy_score,
    fuzzy_search,
    substring_search,
)
from .select import MultipleMatches, NoMatch, Outcome, SingleMatch, select

__all__ = [
    "MatchResult",
    "filter_by_company",
    "fuzzy_match",
    "fuzzy_rank",
    "fuzzy_score",
    "fuzzy_search",
    "substring_search",
    "MultipleMatches",
    "NoMatch",
    "Outcome",
    "SingleMatch",
    "select",
]
