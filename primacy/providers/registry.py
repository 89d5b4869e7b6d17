"""
Capability Registry

Holds every calculator provider under a unique identifier
and remembers which one (if any) is the default.
"""

import logging
import threading
from typing import Dict, List, Optional, Set

from primacy.core.errors import (
    AlreadyDefaultedError,
    DuplicateIdentifierError,
    NoDefaultSelectedError,
    ProviderNotFoundError,
)
from primacy.providers.base import CalculatorService
from primacy.providers.contracts import ProviderEntry

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    def __init__(self):
        self._entries: Dict[str, ProviderEntry] = {}
        # registration and defaulting share one lock
        self._lock = threading.RLock()

    def register(self, identifier: str, implementation: CalculatorService) -> None:
        with self._lock:
            if identifier in self._entries:
                raise DuplicateIdentifierError(identifier)
            self._entries[identifier] = ProviderEntry(identifier, implementation)
        logger.debug("Registered provider %s (%s)",
                     identifier, type(implementation).__name__)

    def list_identifiers(self) -> Set[str]:
        with self._lock:
            return set(self._entries)

    def lookup(self, identifier: str) -> CalculatorService:
        with self._lock:
            entry = self._entries.get(identifier)
        if entry is None:
            raise ProviderNotFoundError(identifier)
        return entry.implementation

    def set_default(self, identifier: str) -> None:
        with self._lock:
            entry = self._entries.get(identifier)
            if entry is None:
                raise ProviderNotFoundError(identifier)

            current = self.default_identifier()
            if current is not None:
                raise AlreadyDefaultedError(identifier, current)

            entry.is_default = True
        logger.info("Default calculator provider: %s", identifier)

    def get_default(self) -> CalculatorService:
        with self._lock:
            for entry in self._entries.values():
                if entry.is_default:
                    return entry.implementation
            raise NoDefaultSelectedError(self._entries.keys())

    # --------------------------------------------------
    # INSPECTION
    # --------------------------------------------------

    def default_identifier(self) -> Optional[str]:
        with self._lock:
            for entry in self._entries.values():
                if entry.is_default:
                    return entry.identifier
            return None

    def entries(self) -> List[ProviderEntry]:
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, identifier) -> bool:
        with self._lock:
            return identifier in self._entries
