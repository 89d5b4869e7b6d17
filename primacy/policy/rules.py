from primacy.core.decision import RULE_BUILTIN_ONLY, RULE_SINGLE_OVERRIDE
from primacy.providers.contracts import BUILTIN_IDENTIFIERS, PRIMARY_BUILTIN_IDENTIFIER


def prefer_decorated_builtin(identifiers, current_default):
    if len(identifiers) == len(BUILTIN_IDENTIFIERS):
        return {
            "rule": RULE_BUILTIN_ONLY,
            "candidates": [PRIMARY_BUILTIN_IDENTIFIER],
        }
    return None


def promote_single_extra(identifiers, current_default):
    if len(identifiers) == len(BUILTIN_IDENTIFIERS) + 1:
        extras = set(identifiers) - BUILTIN_IDENTIFIERS
        return {
            "rule": RULE_SINGLE_OVERRIDE,
            # lexicographic order keeps the pick deterministic
            "candidates": sorted(extras - {current_default}),
        }
    return None


# Evaluated in order; first match wins
SELECTION_RULES = [
    prefer_decorated_builtin,
    promote_single_extra,
]
