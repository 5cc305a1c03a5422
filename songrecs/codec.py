"""JSON codec for recommendation requests and responses."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from songrecs.models import Document, UserPreferences

logger = logging.getLogger(__name__)


def decode_request(raw: bytes | str) -> UserPreferences:
    """Decode a request body into a fresh :class:`UserPreferences`.

    The body looks like ``{"themes": {"home": true, "america": false}}``.
    Theme names are case-insensitive and unknown names are ignored.  A body
    without ``themes`` selects nothing.

    Args:
        raw: The JSON request body.

    Returns:
        Preferences with an empty score map.

    Raises:
        ValueError: If the body is not valid JSON, is not an object, or its
            ``themes`` value is not an object of booleans.
    """
    try:
        payload = json.loads(raw)
    except (TypeError, RecursionError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"request body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")

    themes = payload.get("themes", {})
    if not isinstance(themes, dict):
        raise ValueError("'themes' must be a JSON object")
    for name, flag in themes.items():
        if not isinstance(flag, bool):
            raise ValueError(f"theme {name!r} must be true or false")

    preferences = UserPreferences.from_flags(themes)
    logger.debug(
        "Decoded request selecting %s",
        sorted(t.value for t in preferences.selected_themes()),
    )
    return preferences


def document_to_dict(document: Document) -> dict[str, Any]:
    return {
        "RuleID": document.rule_id,
        "Artist": document.artist,
        "Title": document.title,
        "LyricQuote": document.lyric_quote,
        "VideoLink": document.video_link,
        "Themes": dict(document.themes),
    }


def encode_documents(documents: Iterable[Document]) -> bytes:
    """Encode songs as a JSON array, preserving their order."""
    return json.dumps([document_to_dict(d) for d in documents]).encode("utf-8")
