"""
Startup phase.

Builds the provider chain, registers every provider,
then runs primary selection exactly once.
Registration failures are fatal: nothing here is skipped.
"""

import logging
from importlib import import_module
from typing import Iterable, Optional, Tuple

from primacy.config.loader import load_provider_config
from primacy.config.provider_config import ProviderConfig
from primacy.core.decision import SelectionDecision
from primacy.observability.factory import build_observers
from primacy.observability.tracing import CallTracer
from primacy.policy.engine import PrimarySelector
from primacy.providers import user_defined
from primacy.providers.contracts import BASE_IDENTIFIER, DECORATED_IDENTIFIER
from primacy.providers.not_so_simple import NotSoSimpleCoreCalculatorService
from primacy.providers.registry import CapabilityRegistry
from primacy.providers.simple import SimpleCoreCalculatorService

logger = logging.getLogger(__name__)


def bootstrap_selector(config: dict) -> PrimarySelector:
    selector = PrimarySelector()
    observers = build_observers(config.get("selection", {}))

    for observer in observers:
        selector.register_observer(observer)

    return selector


def register_extra_modules(
    registry: CapabilityRegistry,
    decorated,
    modules: Iterable[str],
    tracer: Optional[CallTracer] = None,
) -> None:
    """
    Import extra provider modules and call their
    register(registry, decorated, tracer) hook.
    """

    for module_path in modules:
        module = import_module(module_path)

        register_fn = getattr(module, "register", None)
        if not callable(register_fn):
            raise TypeError(
                f"Provider module {module_path} has no register() hook"
            )

        register_fn(registry, decorated, tracer)
        logger.debug("Provider module registered: %s", module_path)


def bootstrap_registry(
    provider_config: ProviderConfig,
    tracer: Optional[CallTracer] = None,
) -> CapabilityRegistry:
    registry = CapabilityRegistry()

    base = SimpleCoreCalculatorService(tracer=tracer)
    decorated = NotSoSimpleCoreCalculatorService(base, tracer=tracer)

    registry.register(BASE_IDENTIFIER, base)
    registry.register(DECORATED_IDENTIFIER, decorated)

    if provider_config.user_defined:
        user_defined.register(registry, decorated, tracer)

    register_extra_modules(
        registry, decorated, provider_config.extra_modules, tracer
    )

    if provider_config.preset:
        registry.set_default(provider_config.preset)

    logger.info(
        "Registered %d calculator providers: %s",
        len(registry),
        ", ".join(sorted(registry.list_identifiers())),
    )
    return registry


def bootstrap(
    config: dict,
    tracer: Optional[CallTracer] = None,
) -> Tuple[CapabilityRegistry, SelectionDecision]:
    """Full startup: registration, then one selection pass."""
    provider_config = config.get("provider_engine") or load_provider_config(config)
    if tracer is None:
        tracer = CallTracer(log_calls=provider_config.trace_calls)

    registry = bootstrap_registry(provider_config, tracer)
    decision = bootstrap_selector(config).select(registry)

    return registry, decision
