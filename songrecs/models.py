"""Core domain types shared across all songrecs modules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    """The closed vocabulary of song themes.

    Theme names are matched case-insensitively everywhere, so ``"home"``,
    ``"Home"`` and ``"HOME"`` all refer to :attr:`HOME`.
    """

    ADVENTURE = "Adventure"
    AMERICA = "America"
    CARS_TRUCKS_TRACTORS = "CarsTrucksTractors"
    GOODTIMES = "Goodtimes"
    GRIT = "Grit"
    HOME = "Home"
    LOVE = "Love"
    HEARTBREAK = "HeartBreak"
    LESSONS = "Lessons"
    REBELLION = "Rebellion"

    @classmethod
    def lookup(cls, name: str) -> Theme | None:
        """Return the theme called *name* (any case), or ``None`` if unknown."""
        return _THEMES_BY_LOWER_NAME.get(name.lower())


_THEMES_BY_LOWER_NAME: dict[str, Theme] = {t.value.lower(): t for t in Theme}


@dataclass
class UserPreferences:
    """The fact base for one recommendation request.

    Holds one boolean per :class:`Theme` and the score map filled in by
    fired rules. A fresh instance is built for every request and is never
    shared between requests.

    Attributes:
        selections: Selected flag for every theme in the vocabulary.
        recommendations: Map from document ``rule_id`` to its score. Only
            documents whose rule fired appear here.
    """

    selections: dict[Theme, bool] = field(
        default_factory=lambda: {t: False for t in Theme}
    )
    recommendations: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_themes(cls, themes: Iterable[Theme]) -> UserPreferences:
        """Build preferences with exactly *themes* selected."""
        chosen = set(themes)
        return cls(selections={t: t in chosen for t in Theme})

    @classmethod
    def from_flags(cls, flags: Mapping[str, bool]) -> UserPreferences:
        """Build preferences from a theme-name to flag mapping.

        Names are case-insensitive. Names outside the vocabulary are ignored.
        """
        prefs = cls()
        for name, selected in flags.items():
            theme = Theme.lookup(name)
            if theme is None:
                logger.debug("Ignoring unknown theme %r in preferences.", name)
                continue
            prefs.selections[theme] = bool(selected)
        return prefs

    def is_selected(self, name: str) -> bool:
        """Return whether the theme called *name* is selected.

        Unknown names are never selected.
        """
        theme = Theme.lookup(name)
        if theme is None:
            return False
        return self.selections.get(theme, False)

    def selected_themes(self) -> set[Theme]:
        return {t for t, selected in self.selections.items() if selected}


@dataclass(frozen=True)
class Document:
    """A single song in the catalogue.

    Documents are shared read-only between concurrent requests, so the theme
    map is copied into a read-only view on construction.

    Attributes:
        rule_id: Unique identifier for the song.
        artist: Performing artist.
        title: Song title.
        lyric_quote: A representative lyric.
        video_link: URL of a video for the song.
        themes: Theme name to description. A theme is carried only when its
            description is non-empty.
    """

    rule_id: str
    artist: str = ""
    title: str = ""
    lyric_quote: str = ""
    video_link: str = ""
    themes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "themes", MappingProxyType(dict(self.themes)))

    def __hash__(self) -> int:
        return hash((
            self.rule_id,
            self.artist,
            self.title,
            self.lyric_quote,
            self.video_link,
            tuple(self.themes.items()),
        ))

    def present_themes(self) -> tuple[str, ...]:
        """Return the names of the themes this song carries, in map order."""
        return tuple(name for name, desc in self.themes.items() if desc)
