"""End-to-end tests for the recommendation pipeline."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from songrecs.models import Document, Theme, UserPreferences
from songrecs.recommender import SongRecommender, recommend


def _make_catalogue(documents: list[Document]) -> MagicMock:
    catalogue = MagicMock()
    catalogue.get_all_documents.return_value = tuple(documents)
    return catalogue


# ---------------------------------------------------------------------------
# recommend()
# ---------------------------------------------------------------------------


class TestRecommend:
    def test_two_song_scenario(self, song_home_america, song_love, home_america_prefs) -> None:
        results = recommend([song_home_america, song_love], home_america_prefs, 1)
        assert [d.rule_id for d in results] == ["A"]
        assert results[0].themes == {"Home": "x", "America": "y"}
        assert home_america_prefs.recommendations == {"A": 38}

    def test_results_in_score_order_and_redacted(self, sample_catalogue, home_america_prefs) -> None:
        results = recommend(sample_catalogue, home_america_prefs, 3)
        assert [d.rule_id for d in results] == ["A", "D"]
        assert results[1].themes["home"] == "porch"
        assert results[1].themes["grit"] == ""

    def test_focused_song_beats_catalogue_order(self) -> None:
        loose = Document("loose", themes={t.value: "x" for t in Theme})
        focused = Document("focused", themes={"Love": "x", "Home": "y"})
        prefs = UserPreferences.from_themes({Theme.LOVE})
        results = recommend([loose, focused], prefs, 2)
        # focused: 10 - (2 - 10) = 18; loose: 10 - (10 - 10) = 10
        assert [d.rule_id for d in results] == ["focused", "loose"]

    def test_no_selection_returns_nothing(self, sample_catalogue, no_prefs) -> None:
        assert recommend(sample_catalogue, no_prefs, 3) == []

    def test_empty_catalogue(self, home_america_prefs) -> None:
        assert recommend([], home_america_prefs, 3) == []
        assert home_america_prefs.recommendations == {}

    def test_song_without_themes_never_scored(self, sample_catalogue, home_america_prefs) -> None:
        recommend(sample_catalogue, home_america_prefs, 10)
        assert "C" not in home_america_prefs.recommendations

    def test_missing_metadata_passes_through(self, home_america_prefs) -> None:
        doc = Document("bare", themes={"Home": "porch"})
        (result,) = recommend([doc], home_america_prefs, 1)
        assert result.artist == ""
        assert result.title == ""

    def test_catalogue_not_mutated(self, sample_catalogue, home_america_prefs) -> None:
        before = [dict(d.themes) for d in sample_catalogue]
        recommend(sample_catalogue, home_america_prefs, 3)
        assert [dict(d.themes) for d in sample_catalogue] == before


# ---------------------------------------------------------------------------
# SongRecommender
# ---------------------------------------------------------------------------


class TestSongRecommender:
    def test_uses_catalogue_snapshot(self, sample_catalogue, home_america_prefs) -> None:
        recommender = SongRecommender(_make_catalogue(sample_catalogue), n=1)
        results = recommender.get_recommendations(home_america_prefs)
        assert [d.rule_id for d in results] == ["A"]

    def test_repeated_requests_are_independent(self, sample_catalogue) -> None:
        recommender = SongRecommender(_make_catalogue(sample_catalogue), n=3)
        first = recommender.get_recommendations(UserPreferences.from_themes({Theme.LOVE}))
        second = recommender.get_recommendations(UserPreferences.from_themes({Theme.LOVE}))
        assert [d.rule_id for d in first] == [d.rule_id for d in second] == ["B"]

    def test_negative_n_rejected(self) -> None:
        with pytest.raises(ValueError):
            SongRecommender(_make_catalogue([]), n=-1)

    def test_zero_n_returns_nothing(self, sample_catalogue, home_america_prefs) -> None:
        recommender = SongRecommender(_make_catalogue(sample_catalogue), n=0)
        assert recommender.get_recommendations(home_america_prefs) == []
