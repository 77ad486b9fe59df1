"""Matching of free-text queries against project records.

Two modes:

- substring: boolean gate over name, path and company; keeps registry order.
- fuzzy: query characters as a subsequence of the name; ranked.

Both are pure functions of (query, candidates) so they can be re-run on every
keystroke of an interactive search.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.registry import Project


@dataclass(frozen=True)
class MatchResult:
    """A fuzzy hit with the numbers used to rank it."""

    project: Project
    longest_run: int
    start: int

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (-self.longest_run, self.start, len(self.project.name))


def filter_by_company(projects: Iterable[Project], company: Optional[str]) -> list[Project]:
    """Restrict the pool to one company; no filter when company is falsy."""
    if not company:
        return list(projects)
    return [p for p in projects if p.company == company]


def substring_match(query: str, project: Project) -> bool:
    query = query.lower()
    if query in project.name.lower() or query in project.path.lower():
        return True
    return bool(project.company) and query in project.company.lower()


def substring_search(
    query: str, projects: Iterable[Project], company: Optional[str] = None
) -> list[Project]:
    """Projects containing the query in name, path or company, in registry order."""
    return [p for p in filter_by_company(projects, company) if substring_match(query, p)]


def _is_subsequence(query: str, text: str) -> bool:
    chars = iter(text)
    return all(ch in chars for ch in query)


def fuzzy_score(query: str, project: Project) -> Optional[MatchResult]:
    """Score a project name against a query, or None when it does not match.

    ``longest_run`` is the longest slice of the query that can sit contiguously
    in the name while the rest of the query still matches around it. ``start``
    is the earliest position of the first query character in such an
    alignment.
    """
    if not query:
        return MatchResult(project=project, longest_run=0, start=0)

    query = query.lower()
    name = project.name.lower()
    if not _is_subsequence(query, name):
        return None

    first = name.find(query[0])
    for length in range(len(query), 0, -1):
        starts = []
        for i in range(len(query) - length + 1):
            piece = query[i:i + length]
            pos = name.find(piece)
            while pos >= 0:
                if _is_subsequence(query[:i], name[:pos]) and _is_subsequence(
                    query[i + length:], name[pos + length:]
                ):
                    # with a prefix before the run, the leftmost alignment starts at `first`
                    starts.append(pos if i == 0 else first)
                    break
                pos = name.find(piece, pos + 1)
        if starts:
            return MatchResult(project=project, longest_run=length, start=min(starts))
    return None


def fuzzy_rank(
    query: str, projects: Iterable[Project], company: Optional[str] = None
) -> list[MatchResult]:
    pool = filter_by_company(projects, company)
    if not query:
        return [MatchResult(project=p, longest_run=0, start=0) for p in pool]

    results = []
    for project in pool:
        result = fuzzy_score(query, project)
        if result is not None:
            results.append(result)
    # sorted() is stable, so equal scores keep registry order.
    return sorted(results, key=lambda r: r.sort_key)


def fuzzy_search(
    query: str, projects: Iterable[Project], company: Optional[str] = None
) -> list[Project]:
    """Projects whose name contains the query as a subsequence, best first."""
    return [r.project for r in fuzzy_rank(query, projects, company)]


def fuzzy_match(query: str, candidates: Iterable[str]) -> list[str]:
    """Rank plain strings, for shell completion."""
    projects = [Project(name=c, path="") for c in candidates]
    return [p.name for p in fuzzy_search(query, projects)]
