"""
Primacy Framework v1.0

Primary-provider selection for a registry of
interchangeable calculator implementations.
"""

from .__version__ import __version__

# Keep package init lightweight and safe
# CLI and bootstrap should be imported explicitly by users

from .core.errors import (
    PrimacyError,
    DuplicateIdentifierError,
    ProviderNotFoundError,
    AlreadyDefaultedError,
    NoDefaultSelectedError,
)
from .providers import (
    CalculatorService,
    CapabilityRegistry,
    SimpleCoreCalculatorService,
    NotSoSimpleCoreCalculatorService,
    UserDefinedCalculatorService,
    BASE_IDENTIFIER,
    DECORATED_IDENTIFIER,
    USER_DEFINED_IDENTIFIER,
)
from .policy import PrimarySelector, select_primary

__all__ = [
    "__version__",
    "PrimacyError",
    "DuplicateIdentifierError",
    "ProviderNotFoundError",
    "AlreadyDefaultedError",
    "NoDefaultSelectedError",
    "CalculatorService",
    "CapabilityRegistry",
    "SimpleCoreCalculatorService",
    "NotSoSimpleCoreCalculatorService",
    "UserDefinedCalculatorService",
    "BASE_IDENTIFIER",
    "DECORATED_IDENTIFIER",
    "USER_DEFINED_IDENTIFIER",
    "PrimarySelector",
    "select_primary",
]
