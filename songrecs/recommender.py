"""Song recommender: runs the compile, evaluate, select and redact pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from songrecs.catalogue import SongCatalogue
from songrecs.engine import RuleEngine
from songrecs.models import Document, UserPreferences
from songrecs.redactor import redact
from songrecs.rules import compile_rules
from songrecs.selector import top_n

logger = logging.getLogger(__name__)


def recommend(
    documents: Sequence[Document],
    preferences: UserPreferences,
    n: int,
    engine: RuleEngine | None = None,
) -> list[Document]:
    """Return the top *n* songs for *preferences*, redacted to their selections.

    Rules are compiled fresh from *documents* on every call, since evaluation
    retracts them.

    Args:
        documents: Catalogue snapshot, in catalogue order.
        preferences: A fresh fact base for this request.  Its
            ``recommendations`` map is filled in as a side effect.
        n: Maximum number of songs to return.
        engine: Rule engine to use; a new :class:`RuleEngine` by default.

    Returns:
        Up to *n* redacted songs, best first.
    """
    engine = engine or RuleEngine()

    rules = compile_rules(documents)
    engine.evaluate(preferences, rules)

    top_ids = top_n(preferences.recommendations, [d.rule_id for d in documents], n)

    by_id: dict[str, Document] = {}
    for document in documents:
        by_id.setdefault(document.rule_id, document)

    results = [redact(by_id[rule_id], preferences) for rule_id in top_ids]
    logger.debug(
        "Selected themes %s matched %d of %d songs; returning %s",
        sorted(t.value for t in preferences.selected_themes()),
        len(preferences.recommendations),
        len(documents),
        top_ids,
    )
    return results


class SongRecommender:
    """Produces recommendations against the current catalogue snapshot.

    Safe to share between threads: each call works on its own rules and fact
    base, and only reads the immutable catalogue snapshot.

    Args:
        catalogue: The :class:`~songrecs.catalogue.SongCatalogue`.
        n: Number of songs returned per request.

    Raises:
        ValueError: If *n* is negative.
    """

    def __init__(self, catalogue: SongCatalogue, n: int = 3) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._catalogue = catalogue
        self._n = n

    def get_recommendations(self, preferences: UserPreferences) -> list[Document]:
        documents = self._catalogue.get_all_documents()
        return recommend(documents, preferences, self._n)
