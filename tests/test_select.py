"""Tests for the zero/one/many selection outcome."""

import pytest

from opener.core.registry import Project
from opener.search import MultipleMatches, NoMatch, SingleMatch, select

P = [Project(f"p{i}", f"/p{i}") for i in range(4)]


@pytest.mark.parametrize("count", [0, 1, 2, 4])
def test_outcome_matches_length(count):
    outcome = select(P[:count])
    if count == 0:
        assert outcome == NoMatch()
    elif count == 1:
        assert outcome == SingleMatch(P[0])
    else:
        assert isinstance(outcome, MultipleMatches)
        assert outcome.projects == tuple(P[:count])


def test_no_match_is_not_abandoned_by_default():
    assert select([]).abandoned is False
    assert NoMatch(abandoned=True) != NoMatch()


def test_multiple_requires_explicit_choice():
    outcome = select(P)
    assert outcome.choose(2) == P[2]
    with pytest.raises(IndexError):
        outcome.choose(4)
    with pytest.raises(IndexError):
        outcome.choose(-1)
