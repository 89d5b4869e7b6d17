from concurrent.futures import ThreadPoolExecutor

import pytest

from primacy.core.errors import (
    AlreadyDefaultedError,
    DuplicateIdentifierError,
    NoDefaultSelectedError,
    ProviderNotFoundError,
)
from primacy.providers import (
    BASE_IDENTIFIER,
    DECORATED_IDENTIFIER,
    USER_DEFINED_IDENTIFIER,
    CapabilityRegistry,
    SimpleCoreCalculatorService,
)


def test_list_identifiers(override_registry):
    assert override_registry.list_identifiers() == {
        BASE_IDENTIFIER,
        DECORATED_IDENTIFIER,
        USER_DEFINED_IDENTIFIER,
    }
    assert len(override_registry) == 3
    assert USER_DEFINED_IDENTIFIER in override_registry


def test_lookup_returns_registered_implementation(builtin_registry, chain):
    assert builtin_registry.lookup(BASE_IDENTIFIER) is chain["base"]
    assert builtin_registry.lookup(DECORATED_IDENTIFIER) is chain["decorated"]


def test_lookup_unknown_identifier():
    with pytest.raises(ProviderNotFoundError) as excinfo:
        CapabilityRegistry().lookup("missing")

    assert excinfo.value.identifier == "missing"
    assert isinstance(excinfo.value, LookupError)


def test_duplicate_identifier_rejected(builtin_registry):
    original = builtin_registry.lookup(BASE_IDENTIFIER)

    with pytest.raises(DuplicateIdentifierError):
        builtin_registry.register(BASE_IDENTIFIER, SimpleCoreCalculatorService())

    # first registration is untouched
    assert builtin_registry.lookup(BASE_IDENTIFIER) is original
    assert len(builtin_registry) == 2


def test_entries_start_without_default(builtin_registry):
    assert all(not entry.is_default for entry in builtin_registry.entries())
    assert builtin_registry.default_identifier() is None


def test_get_default_before_selection(builtin_registry):
    with pytest.raises(NoDefaultSelectedError) as excinfo:
        builtin_registry.get_default()

    assert excinfo.value.identifiers == sorted([BASE_IDENTIFIER, DECORATED_IDENTIFIER])


def test_set_default_unknown_identifier(builtin_registry):
    with pytest.raises(ProviderNotFoundError):
        builtin_registry.set_default("missing")

    assert builtin_registry.default_identifier() is None


def test_set_default(builtin_registry, chain):
    builtin_registry.set_default(BASE_IDENTIFIER)

    assert builtin_registry.get_default() is chain["base"]
    assert builtin_registry.default_identifier() == BASE_IDENTIFIER


def test_only_one_default_ever(override_registry):
    override_registry.set_default(DECORATED_IDENTIFIER)

    for identifier in (BASE_IDENTIFIER, DECORATED_IDENTIFIER, USER_DEFINED_IDENTIFIER):
        with pytest.raises(AlreadyDefaultedError) as excinfo:
            override_registry.set_default(identifier)
        assert excinfo.value.current == DECORATED_IDENTIFIER

    defaults = [e for e in override_registry.entries() if e.is_default]
    assert [e.identifier for e in defaults] == [DECORATED_IDENTIFIER]


def test_parallel_registration_and_defaulting():
    count = 16
    registry = CapabilityRegistry()
    identifiers = [f"calculator_{i}" for i in range(count)]

    def register_then_default(identifier):
        registry.register(identifier, SimpleCoreCalculatorService())
        try:
            registry.set_default(identifier)
        except AlreadyDefaultedError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(register_then_default, identifiers))

    assert registry.list_identifiers() == set(identifiers)
    assert len(registry) == count
    assert outcomes.count(True) == 1
    assert outcomes.count(False) == count - 1

    defaults = [e.identifier for e in registry.entries() if e.is_default]
    assert defaults == [identifiers[outcomes.index(True)]]
