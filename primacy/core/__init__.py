from .errors import (
    PrimacyError,
    DuplicateIdentifierError,
    ProviderNotFoundError,
    AlreadyDefaultedError,
    NoDefaultSelectedError,
)
from .decision import SelectionDecision

__all__ = [
    "PrimacyError",
    "DuplicateIdentifierError",
    "ProviderNotFoundError",
    "AlreadyDefaultedError",
    "NoDefaultSelectedError",
    "SelectionDecision",
]
