"""Tests for the leaderboard pipeline."""

from country_votes.aggregation import count_by_country, enrich, select_top
from country_votes.models.country_model import Country, LeaderboardEntry
from country_votes.models.vote_model import Vote


def _vote(country, i=0):
    return Vote(name=f"U{i}", email=f"u{i}@x.com", country=country)


def _country(common):
    return Country(name={"common": common}, capital=["X"], region="R", subregion="S")


def _entry(name, votes):
    return LeaderboardEntry(country=None, votes=votes, country_name=name)


class TestCountByCountry:
    def test_counts_each_country(self):
        votes = [_vote("Chile", 0), _vote("Chile", 1), _vote("Peru", 2)]
        assert count_by_country(votes) == {"Chile": 2, "Peru": 1}

    def test_no_votes(self):
        assert count_by_country([]) == {}

    def test_case_sensitive(self):
        votes = [_vote("Chile", 0), _vote("chile", 1), _vote(" Chile", 2)]
        assert count_by_country(votes) == {"Chile": 1, "chile": 1, " Chile": 1}


class TestEnrich:
    def test_attaches_metadata(self):
        result = enrich({"Chile": 2}, [_country("Chile"), _country("Peru")])

        assert len(result) == 1
        assert result[0].country.name.common == "Chile"
        assert result[0].votes == 2

    def test_unknown_country_kept_with_null_metadata(self):
        result = enrich({"Atlantis": 3}, [_country("Chile")])

        assert len(result) == 1
        assert result[0].country is None
        assert result[0].votes == 3

    def test_unmatched_entry_serializes_as_null(self):
        result = enrich({"Atlantis": 3}, [])
        assert result[0].model_dump() == {"country": None, "votes": 3}

    def test_no_upstream_countries(self):
        result = enrich({"Chile": 1, "Peru": 1}, [])
        assert [e.country for e in result] == [None, None]


class TestSelectTop:
    def test_truncates_to_ten(self):
        entries = [_entry(f"Country{i:02d}", i + 1) for i in range(15)]

        top = select_top(entries, 10)

        assert len(top) == 10
        votes = [e.votes for e in top]
        assert votes == sorted(votes, reverse=True)
        assert votes[0] == 15

    def test_default_limit_is_ten(self):
        entries = [_entry(f"Country{i:02d}", 1) for i in range(12)]
        assert len(select_top(entries)) == 10

    def test_short_input(self):
        entries = [_entry("Chile", 1), _entry("Peru", 4)]
        assert [e.country_name for e in select_top(entries, 10)] == ["Peru", "Chile"]

    def test_empty_input(self):
        assert select_top([], 10) == []

    def test_ties_ordered_by_name(self):
        entries = [_entry("Peru", 2), _entry("Chile", 2), _entry("Japan", 5), _entry("Brazil", 2)]
        assert [e.country_name for e in select_top(entries)] == ["Japan", "Brazil", "Chile", "Peru"]

    def test_zero_limit(self):
        assert select_top([_entry("Chile", 1)], 0) == []
