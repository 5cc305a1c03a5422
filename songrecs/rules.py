"""Rule compiler: turns catalogue songs into single-fire scoring rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from songrecs.models import Document, Theme, UserPreferences
from songrecs.scorer import score

logger = logging.getLogger(__name__)

DEFAULT_SALIENCE = 10


@dataclass
class Rule:
    """A compiled condition/action pair for one song.

    The condition holds when the user selected at least one of the song's
    themes.  The action scores the song and retracts the rule, so a rule
    fires at most once per evaluation.

    Attributes:
        rule_id: The song's identifier.
        title: The song's title, used in log output.
        themes: The themes the song carries (never empty).
        salience: Firing priority; higher fires first.
        active: ``False`` once the rule has fired.
    """

    rule_id: str
    title: str
    themes: tuple[str, ...]
    salience: int = DEFAULT_SALIENCE
    active: bool = True

    def when(self, facts: UserPreferences) -> bool:
        return any(facts.is_selected(theme) for theme in self.themes)

    def then(self, facts: UserPreferences) -> None:
        score(facts, self.rule_id, self.themes)
        self.retract()

    def retract(self) -> None:
        self.active = False

    def describe(self) -> str:
        """Return a one-line, human-readable rendering of the rule."""
        themes = ", ".join(self.themes)
        return (
            f"rule Check{self.rule_id} {self.title!r} salience {self.salience}: "
            f"when any selected of ({themes}) then score {self.rule_id!r}"
        )


def compile_rules(documents: Iterable[Document]) -> list[Rule]:
    """Compile one :class:`Rule` per song that carries at least one theme.

    Songs with no non-empty theme can never match and are skipped.  Theme
    names outside the vocabulary are kept (they still count towards the
    song's theme total) but are logged, as they never evaluate as selected.

    Args:
        documents: The catalogue, in catalogue order.

    Returns:
        Rules in catalogue order.
    """
    rules: list[Rule] = []
    for document in documents:
        themes = document.present_themes()
        if not themes:
            logger.debug("Song %r carries no themes; no rule compiled.", document.rule_id)
            continue

        unknown = [t for t in themes if Theme.lookup(t) is None]
        if unknown:
            logger.warning(
                "Song %r references unknown themes %s; treating them as unselected.",
                document.rule_id,
                unknown,
            )

        rule = Rule(rule_id=document.rule_id, title=document.title, themes=themes)
        logger.debug("Compiled %s", rule.describe())
        rules.append(rule)
    return rules
