"""Redaction of song theme maps down to the user's selected themes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from songrecs.models import Document, UserPreferences


def redact(document: Document, preferences: UserPreferences) -> Document:
    """Return a copy of *document* showing only the user's selected themes.

    Every theme key is kept.  Values of selected themes (matched
    case-insensitively) are unchanged; all other values become ``""``.
    """
    themes = {
        name: (value if preferences.is_selected(name) else "")
        for name, value in document.themes.items()
    }
    return replace(document, themes=themes)


def redact_all(documents: Iterable[Document], preferences: UserPreferences) -> list[Document]:
    return [redact(doc, preferences) for doc in documents]
