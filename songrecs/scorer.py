"""Per-song scoring policy applied when a song's rule fires."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from songrecs.models import UserPreferences

logger = logging.getLogger(__name__)

MATCH_WEIGHT = 10


def score(preferences: UserPreferences, document_id: str, themes: Sequence[str]) -> int:
    """Score a song against the user's selections and record the result.

    Each selected theme is worth :data:`MATCH_WEIGHT`.  A penalty based on
    the song's theme count is then applied, so a song with a few well-matched
    themes outranks one with many loosely-related themes::

        raw   = match_count * 10
        score = raw - (len(themes) - raw)

    Themes outside the vocabulary count as unselected.

    Args:
        preferences: The request's fact base. The score is written to
            ``preferences.recommendations[document_id]``.
        document_id: The song's ``rule_id``.
        themes: The themes the song carries.

    Returns:
        The computed score.
    """
    match_count = 0
    for theme in themes:
        if preferences.is_selected(theme):
            match_count += 1
            logger.debug("%s: theme %r matched (%d).", document_id, theme, match_count)

    raw = match_count * MATCH_WEIGHT
    # Slightly penalize unselected themes
    result = raw - (len(themes) - raw)

    logger.debug("Score for song %r: %d", document_id, result)
    preferences.recommendations[document_id] = result
    return result
