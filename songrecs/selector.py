"""Top-N selection over a completed score map."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def top_n(scores: Mapping[str, int], catalogue_order: Sequence[str], n: int) -> list[str]:
    """Return the IDs of the *n* highest-scoring songs, best first.

    Ties are broken by catalogue order: the song that appears earlier in
    *catalogue_order* ranks first.  Songs absent from *scores* (no rule
    fired) are never returned.

    Args:
        scores: Map from song ID to score.
        catalogue_order: All song IDs in catalogue order.
        n: Maximum number of IDs to return.  Clamped to the number of
            scored songs; ``n <= 0`` returns an empty list.

    Returns:
        Up to ``min(n, len(scores))`` song IDs.
    """
    if n <= 0 or not scores:
        return []

    candidates: list[str] = []
    seen: set[str] = set()
    for song_id in catalogue_order:
        if song_id in scores and song_id not in seen:
            candidates.append(song_id)
            seen.add(song_id)
    # Scored IDs missing from the catalogue rank after catalogue songs on ties
    candidates.extend(sid for sid in scores if sid not in seen)

    values = np.array([scores[sid] for sid in candidates], dtype=np.int64)
    order = np.argsort(-values, kind="stable")[:n]
    selected = [candidates[i] for i in order]

    logger.debug("Top %d of %d scored songs: %s", n, len(candidates), selected)
    return selected
