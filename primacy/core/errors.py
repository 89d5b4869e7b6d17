"""
Registry & selection errors.

All of these are configuration errors, never transient ones.
Nothing here is retried.
"""


class PrimacyError(Exception):
    """Base class for every registry / selection failure."""


class DuplicateIdentifierError(PrimacyError):
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Provider already registered: {identifier}")


class ProviderNotFoundError(PrimacyError, LookupError):
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown provider: {identifier}")


class AlreadyDefaultedError(PrimacyError):
    def __init__(self, identifier: str, current: str):
        self.identifier = identifier
        self.current = current
        super().__init__(
            f"Cannot make '{identifier}' the default: "
            f"'{current}' is already the default provider"
        )


class NoDefaultSelectedError(PrimacyError):
    def __init__(self, identifiers=None):
        self.identifiers = sorted(identifiers or [])
        super().__init__(
            "No default calculator provider has been selected "
            f"(registered: {', '.join(self.identifiers) or 'none'}). "
            "Register exactly one extra provider, or none, "
            "on top of the two built-in providers."
        )
