# country_votes/aggregation.py
# Leaderboard pipeline: count votes -> join with country metadata -> top N
from typing import Dict, Iterable, List

from .config import TOP_N
from .models.country_model import Country, LeaderboardEntry
from .models.vote_model import Vote


def count_by_country(votes: Iterable[Vote]) -> Dict[str, int]:
    """
    Count votes per country string.
    Exact, case-sensitive match: "Chile" and "chile" are counted separately.
    """
    counts: Dict[str, int] = {}
    for vote in votes:
        counts[vote.country] = counts.get(vote.country, 0) + 1
    return counts


def enrich(counts: Dict[str, int], countries: List[Country]) -> List[LeaderboardEntry]:
    """
    Attach metadata to each counted country, matching on name.common.
    Names with no match keep their count with country=None.
    """
    by_name = {}
    for c in countries:
        # first occurrence wins if upstream ever repeats a name
        by_name.setdefault(c.name.common, c)

    return [
        LeaderboardEntry(country=by_name.get(name), votes=votes, country_name=name)
        for name, votes in counts.items()
    ]


def select_top(entries: List[LeaderboardEntry], n: int = TOP_N) -> List[LeaderboardEntry]:
    """Most votes first, ties by country name; at most n entries."""
    if n <= 0:
        return []
    ranked = sorted(entries, key=lambda e: (-e.votes, e.country_name))
    return ranked[:n]
