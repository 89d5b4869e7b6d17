from dataclasses import dataclass, field
from typing import List, Optional
from datetime import datetime, timezone


# Rule names recorded on every decision
RULE_BUILTIN_ONLY = "builtin_only"
RULE_SINGLE_OVERRIDE = "single_override"
RULE_PRESET_UPSTREAM = "preset_upstream"
RULE_AMBIGUOUS_POPULATION = "ambiguous_population"


@dataclass
class SelectionDecision:
    population: int
    identifiers: List[str]
    extras: List[str]

    selected: Optional[str]
    rule: str

    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def resolved(self) -> bool:
        return self.selected is not None
