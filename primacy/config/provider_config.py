from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ProviderConfig:
    """
    Which providers the startup phase registers on top of the built-ins,
    and whether any of them is defaulted before selection.
    """
    user_defined: bool = True
    extra_modules: List[str] = field(default_factory=list)
    preset: Optional[str] = None
    trace_calls: bool = True
