"""
Primary Selector

Runs once, after every provider is registered, and marks the
provider that callers get when they do not ask for one by name.
"""

import logging
from typing import List, Optional

from primacy.core.decision import (
    RULE_AMBIGUOUS_POPULATION,
    RULE_PRESET_UPSTREAM,
    SelectionDecision,
)
from primacy.core.errors import AlreadyDefaultedError
from primacy.observability.hooks import SelectionObserver
from primacy.policy.rules import SELECTION_RULES
from primacy.providers.contracts import BUILTIN_IDENTIFIERS
from primacy.providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class PrimarySelector:
    def __init__(self, rules=None):
        self.rules = list(rules if rules is not None else SELECTION_RULES)
        self.decision: Optional[SelectionDecision] = None
        self._observers: List[SelectionObserver] = []

    def register_observer(self, observer: SelectionObserver) -> None:
        self._observers.append(observer)

    def select(self, registry: CapabilityRegistry) -> SelectionDecision:
        if self.decision is not None:
            logger.warning(
                "Primary selection already ran (selected=%s); ignoring rerun",
                self.decision.selected,
            )
            return self.decision

        identifiers = registry.list_identifiers()
        current_default = registry.default_identifier()

        rule_name = RULE_AMBIGUOUS_POPULATION
        for rule in self.rules:
            result = rule(identifiers, current_default)
            if not result:
                continue

            rule_name = result["rule"]
            candidates = result["candidates"]
            if not candidates:
                # the only extra was already defaulted upstream
                rule_name = RULE_PRESET_UPSTREAM
                break

            try:
                registry.set_default(candidates[0])
            except AlreadyDefaultedError as exc:
                logger.info("Keeping upstream default %s over %s",
                            exc.current, exc.identifier)
                rule_name = RULE_PRESET_UPSTREAM
            break

        if rule_name == RULE_AMBIGUOUS_POPULATION and current_default:
            logger.info("Using upstream default %s", current_default)
            rule_name = RULE_PRESET_UPSTREAM
        elif rule_name == RULE_AMBIGUOUS_POPULATION:
            logger.warning(
                "Cannot choose a default among %d providers (%s); "
                "leaving it unresolved",
                len(identifiers),
                ", ".join(sorted(identifiers)) or "none",
            )

        self.decision = SelectionDecision(
            population=len(identifiers),
            identifiers=sorted(identifiers),
            extras=sorted(identifiers - BUILTIN_IDENTIFIERS),
            selected=registry.default_identifier(),
            rule=rule_name,
        )

        for observer in self._observers:
            observer.record(self.decision)

        return self.decision


def select_primary(registry: CapabilityRegistry) -> SelectionDecision:
    """One-shot convenience wrapper around PrimarySelector."""
    return PrimarySelector().select(registry)
