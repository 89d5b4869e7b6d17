"""
Primacy Framework – Providers Package

This module:
- Exposes the calculator capability contract
- Exposes the built-in providers and the bundled user-defined one
- Exposes the Capability Registry
"""

from primacy.providers.base import CalculatorService, DelegatingCalculatorService
from primacy.providers.contracts import (
    BASE_IDENTIFIER,
    DECORATED_IDENTIFIER,
    USER_DEFINED_IDENTIFIER,
    BUILTIN_IDENTIFIERS,
    PRIMARY_BUILTIN_IDENTIFIER,
    ProviderEntry,
)
from primacy.providers.simple import SimpleCoreCalculatorService
from primacy.providers.not_so_simple import NotSoSimpleCoreCalculatorService
from primacy.providers.user_defined import UserDefinedCalculatorService
from primacy.providers.registry import CapabilityRegistry

__all__ = [
    # contracts
    "CalculatorService",
    "DelegatingCalculatorService",
    "ProviderEntry",
    "BASE_IDENTIFIER",
    "DECORATED_IDENTIFIER",
    "USER_DEFINED_IDENTIFIER",
    "BUILTIN_IDENTIFIERS",
    "PRIMARY_BUILTIN_IDENTIFIER",

    # providers
    "SimpleCoreCalculatorService",
    "NotSoSimpleCoreCalculatorService",
    "UserDefinedCalculatorService",

    # registry
    "CapabilityRegistry",
]
