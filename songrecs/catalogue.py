"""Song catalogue: loads and holds an immutable snapshot of catalogue songs."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from songrecs.models import Document

logger = logging.getLogger(__name__)


class SongCatalogue:
    """Loads the song catalogue from a JSON export and serves snapshots.

    The file is either a list of items or an object with an ``Items`` list
    (the shape written by a DynamoDB ``scan``).  Items may use DynamoDB typed
    attribute values (``{"S": "..."}``, ``{"M": {...}}``) or plain JSON
    values.

    The snapshot is replaced atomically on :meth:`refresh`, so concurrent
    requests always see a complete catalogue.  All public methods are
    thread-safe.

    Args:
        path: Location of the catalogue JSON file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._documents: tuple[Document, ...] = ()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Read the catalogue file and replace the current snapshot.

        On failure, logs an error and preserves the existing snapshot so the
        service can continue running.
        """
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            items = raw.get("Items", []) if isinstance(raw, dict) else raw
            if not isinstance(items, list):
                raise ValueError("catalogue items must be a JSON list")
            documents = tuple(document_from_item(item) for item in items)
            with self._lock:
                self._documents = documents
            logger.info("Song catalogue refreshed: %d songs loaded.", len(documents))
        except Exception:
            logger.exception(
                "Failed to load song catalogue from %s; keeping existing %d songs.",
                self._path,
                len(self._documents),
            )

    def get_all_documents(self) -> tuple[Document, ...]:
        """Return the current snapshot in catalogue order.

        Returns:
            Tuple of :class:`~songrecs.models.Document` objects. Empty if the
            catalogue has never been loaded.
        """
        with self._lock:
            return self._documents


# ---------------------------------------------------------------------------
# Item decoding
# ---------------------------------------------------------------------------


def document_from_item(item: dict[str, Any]) -> Document:
    """Decode one catalogue item into a :class:`~songrecs.models.Document`.

    Metadata is not validated: missing or non-string fields decode as ``""``.

    Raises:
        ValueError: If *item* is not a JSON object.
    """
    if not isinstance(item, dict):
        raise ValueError(f"catalogue item must be an object, got {type(item).__name__}")
    return Document(
        rule_id=_string_value(item.get("RuleID")),
        artist=_string_value(item.get("artist")),
        title=_string_value(item.get("title")),
        lyric_quote=_string_value(item.get("lyricQuote")),
        video_link=_string_value(item.get("videoLink")),
        themes=_themes_value(item.get("themes")),
    )


def _string_value(attr: Any) -> str:
    if isinstance(attr, str):
        return attr
    if isinstance(attr, dict) and isinstance(attr.get("S"), str):
        return attr["S"]
    return ""


def _themes_value(attr: Any) -> dict[str, str]:
    if not isinstance(attr, dict):
        return {}
    mapping = attr["M"] if isinstance(attr.get("M"), dict) else attr
    return {str(name): _string_value(value) for name, value in mapping.items()}
