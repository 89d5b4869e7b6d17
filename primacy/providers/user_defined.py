"""
Bundled user-defined provider.

Wraps the decorating built-in (never the base one directly)
and exposes the same register() hook as any extra provider module.
"""

from primacy.providers.base import DelegatingCalculatorService
from primacy.providers.contracts import USER_DEFINED_IDENTIFIER


class UserDefinedCalculatorService(DelegatingCalculatorService):
    """Extra provider layered on the decorating built-in."""


def register(registry, decorated, tracer=None):
    registry.register(
        USER_DEFINED_IDENTIFIER,
        UserDefinedCalculatorService(decorated, tracer=tracer),
    )
