from dataclasses import dataclass

from primacy.providers.base import CalculatorService


# =====================================================
# WELL-KNOWN IDENTIFIERS
# =====================================================

BASE_IDENTIFIER = "simple_core_calculator"
DECORATED_IDENTIFIER = "not_so_simple_core_calculator"
USER_DEFINED_IDENTIFIER = "user_defined_calculator"

# Always registered, exactly once each
BUILTIN_IDENTIFIERS = frozenset({BASE_IDENTIFIER, DECORATED_IDENTIFIER})

# Preferred default when only the built-ins exist
PRIMARY_BUILTIN_IDENTIFIER = DECORATED_IDENTIFIER


@dataclass
class ProviderEntry:
    """
    One registered provider.

    Only is_default ever changes after registration,
    and only from False to True.
    """

    identifier: str
    implementation: CalculatorService
    is_default: bool = False
