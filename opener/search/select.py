"""Disambiguation of a match list into a single outcome.

``select`` never picks among several candidates on its own: a
``MultipleMatches`` outcome always needs an explicit choice from the user.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from ..core.registry import Project


@dataclass(frozen=True)
class NoMatch:
    """Nothing matched, or the user abandoned the selection."""

    abandoned: bool = False


@dataclass(frozen=True)
class SingleMatch:
    project: Project


@dataclass(frozen=True)
class MultipleMatches:
    projects: tuple[Project, ...]

    def choose(self, index: int) -> Project:
        """Pick by zero-based index; raises IndexError when out of range."""
        if not 0 <= index < len(self.projects):
            raise IndexError(f"Choice {index + 1} is out of range 1-{len(self.projects)}")
        return self.projects[index]


Outcome = Union[NoMatch, SingleMatch, MultipleMatches]


def select(matches: Sequence[Project]) -> Outcome:
    if not matches:
        return NoMatch()
    if len(matches) == 1:
        return SingleMatch(matches[0])
    return MultipleMatches(tuple(matches))
