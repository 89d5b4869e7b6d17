import logging

import pytest

from primacy.observability.tracing import CallTracer
from primacy.providers import (
    BASE_IDENTIFIER,
    DECORATED_IDENTIFIER,
    USER_DEFINED_IDENTIFIER,
    CapabilityRegistry,
    NotSoSimpleCoreCalculatorService,
    SimpleCoreCalculatorService,
    UserDefinedCalculatorService,
)


@pytest.fixture
def trace_events():
    return []


@pytest.fixture
def tracer(trace_events):
    """
    Tracer recording every span into trace_events.
    Log lines are off to keep test output quiet.
    """
    return CallTracer(sink=trace_events, log_calls=False)


@pytest.fixture
def chain(tracer):
    base = SimpleCoreCalculatorService(tracer=tracer)
    decorated = NotSoSimpleCoreCalculatorService(base, tracer=tracer)
    user_defined = UserDefinedCalculatorService(decorated, tracer=tracer)
    return {
        "base": base,
        "decorated": decorated,
        "user_defined": user_defined,
    }


@pytest.fixture
def builtin_registry(chain):
    registry = CapabilityRegistry()
    registry.register(BASE_IDENTIFIER, chain["base"])
    registry.register(DECORATED_IDENTIFIER, chain["decorated"])
    return registry


@pytest.fixture
def override_registry(builtin_registry, chain):
    builtin_registry.register(USER_DEFINED_IDENTIFIER, chain["user_defined"])
    return builtin_registry


@pytest.fixture(autouse=True)
def reset_package_logger():
    """
    The CLI installs a stream handler on the package logger;
    drop it so it never outlives a captured stream.
    """
    yield
    package_logger = logging.getLogger("primacy")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
