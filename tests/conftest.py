"""Shared pytest fixtures for all songrecs tests."""

from __future__ import annotations

import pytest

from songrecs.models import Document, Theme, UserPreferences


# ---------------------------------------------------------------------------
# Song fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def song_home_america() -> Document:
    return Document(
        rule_id="A",
        artist="Lee Greenwood",
        title="God Bless the USA",
        lyric_quote="I'm proud to be an American",
        video_link="https://example.com/a",
        themes={"Home": "x", "America": "y"},
    )


@pytest.fixture
def song_love() -> Document:
    return Document(rule_id="B", artist="Tim McGraw", title="Just to See You Smile",
                    themes={"Love": "z"})


@pytest.fixture
def song_no_themes() -> Document:
    return Document(rule_id="C", title="Instrumental", themes={"Home": "", "Grit": ""})


@pytest.fixture
def song_many_themes() -> Document:
    """A song carrying five themes, stored with lower-case keys."""
    return Document(
        rule_id="D",
        title="Everything",
        themes={
            "home": "porch",
            "adventure": "road trip",
            "grit": "long days",
            "lessons": "daddy said",
            "carsTrucksTractors": "old ford",
        },
    )


@pytest.fixture
def sample_catalogue(song_home_america, song_love, song_no_themes, song_many_themes) -> list[Document]:
    return [song_home_america, song_love, song_no_themes, song_many_themes]


# ---------------------------------------------------------------------------
# Preference fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def home_america_prefs() -> UserPreferences:
    return UserPreferences.from_themes({Theme.HOME, Theme.AMERICA})


@pytest.fixture
def no_prefs() -> UserPreferences:
    """A user who selected nothing."""
    return UserPreferences()
