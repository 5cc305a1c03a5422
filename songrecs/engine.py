"""Forward-chaining rule engine that fires song rules against a fact base."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from songrecs.models import UserPreferences
from songrecs.rules import Rule

logger = logging.getLogger(__name__)


class RuleEngine:
    """Minimal forward-chaining evaluator.

    Each cycle scans the active rules in salience order (higher first, ties
    in compilation order).  Every rule whose condition holds against the fact
    base fires its action.  The action retracts the rule before returning, so
    it can never fire again in the same evaluation.  Evaluation stops after the first cycle in
    which nothing fires.

    Song conditions only read the user's selections, which actions never
    change, so the second cycle never fires anything.  The loop is kept so
    that rules whose actions do change the facts are still run to a fixed
    point.
    """

    def evaluate(self, facts: UserPreferences, rules: Sequence[Rule]) -> None:
        """Fire every eligible rule once against *facts*.

        Args:
            facts: The request's fact base.  Actions record scores in
                ``facts.recommendations``.
            rules: Freshly compiled rules.  Rules are mutated (retracted) and
                must not be shared with another evaluation.
        """
        agenda = sorted(rules, key=lambda r: r.salience, reverse=True)
        cycles = 0
        fired = 0

        while True:
            cycles += 1
            fired_this_cycle = 0
            for rule in agenda:
                if not rule.active:
                    continue
                if rule.when(facts):
                    logger.debug("Firing rule for song %r.", rule.rule_id)
                    rule.then(facts)
                    fired_this_cycle += 1
            fired += fired_this_cycle
            if fired_this_cycle == 0:
                break

        logger.debug(
            "Rule evaluation finished: %d/%d rules fired in %d cycles.",
            fired,
            len(agenda),
            cycles,
        )
