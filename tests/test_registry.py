from __future__ import annotations

import threading
import uuid

import pytest

from hash_validator import (
    Base,
    ConfigurationError,
    ValidatorRegistry,
    append_validator,
    build_validator,
    default_registry,
    register_validator,
    validate,
)


def _unique(prefix: str) -> str:
    return f'{prefix}_{uuid.uuid4().hex}'


class EvenValidator:
    """Conforms structurally without inheriting from Base."""

    name = 'even'
    error_message = 'even number required'

    def is_valid(self, value) -> bool:
        return isinstance(value, int) and value % 2 == 0


def test_builtins_are_installed(registry: ValidatorRegistry) -> None:
    assert registry.names() == ['array', 'hash', 'numeric', 'required', 'string', 'time']
    assert len(registry) == 6
    assert 'hash' in registry


def test_default_registry_is_shared() -> None:
    assert default_registry() is default_registry()
    for name in ('hash', 'required', 'string', 'numeric', 'array', 'time'):
        assert name in default_registry()


def test_allows_validators_with_unique_names(registry: ValidatorRegistry) -> None:
    registry.register(build_validator('my_type1', lambda v: True))
    assert 'my_type1' in registry


def test_rejects_conflicting_names(registry: ValidatorRegistry) -> None:
    registry.register(build_validator('my_type2', lambda v: True))

    with pytest.raises(ConfigurationError, match='validators need to have unique names'):
        registry.register(build_validator('my_type2', lambda v: True))


def test_rejects_builtin_names(registry: ValidatorRegistry) -> None:
    with pytest.raises(ConfigurationError, match='validators need to have unique names'):
        registry.register(build_validator('string', lambda v: True))


@pytest.mark.parametrize(
    'candidate',
    ['Not a validator', None, 42, object(), EvenValidator, lambda v: True],
)
def test_rejects_non_validators(registry: ValidatorRegistry, candidate) -> None:
    with pytest.raises(ConfigurationError, match='validators need to inherit from Base'):
        registry.register(candidate)


def test_accepts_structurally_conforming_objects(registry: ValidatorRegistry) -> None:
    registry.register(EvenValidator())

    assert validate({'n': 4}, {'n': 'even'}, registry=registry).valid
    assert validate({'n': 3}, {'n': 'even'}, registry=registry).errors == {'n': 'even number required'}


def test_accepts_base_subclasses(registry: ValidatorRegistry) -> None:
    class UppercaseValidator(Base):
        name = 'uppercase'
        error_message = 'uppercase required'

        def is_valid(self, value) -> bool:
            return isinstance(value, str) and value.isupper()

    registry.register(UppercaseValidator())
    assert registry.lookup('uppercase').error_message == 'uppercase required'


def test_lookup_unknown_name(registry: ValidatorRegistry) -> None:
    with pytest.raises(ConfigurationError, match="unknown validator 'nope'"):
        registry.lookup('nope')


def test_register_validator_with_name_and_predicate(registry: ValidatorRegistry) -> None:
    validator = register_validator('short', lambda v: len(v) < 3, 'too long', registry=registry)

    assert registry.lookup('short') is validator
    assert validate({'s': 'abcd'}, {'s': 'short'}, registry=registry).errors == {'s': 'too long'}


def test_register_validator_rejects_message_without_predicate(registry: ValidatorRegistry) -> None:
    with pytest.raises(ConfigurationError):
        register_validator(EvenValidator(), error_message='ignored', registry=registry)


def test_register_into_default_registry() -> None:
    name = _unique('positive')
    register_validator(name, lambda v: isinstance(v, int) and v > 0)

    assert validate({'n': 1}, {'n': name}).valid
    assert validate({'n': -1}, {'n': name}).errors == {'n': f'{name} required'}

    with pytest.raises(ConfigurationError, match='validators need to have unique names'):
        append_validator(build_validator(name, lambda v: True))


def test_names_are_a_snapshot(registry: ValidatorRegistry) -> None:
    before = registry.names()
    registry.register(build_validator('later', lambda v: True))

    assert 'later' not in before
    assert registry.names() == sorted(before + ['later'])
    assert registry.lookup('later').name == 'later'


def test_concurrent_registration_of_distinct_names(registry: ValidatorRegistry) -> None:
    names = [f'rule_{i}' for i in range(50)]
    barrier = threading.Barrier(len(names))

    def worker(name: str) -> None:
        barrier.wait()
        registry.register(build_validator(name, lambda v: True))

    threads = [threading.Thread(target=worker, args=(name,)) for name in names]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == 6 + len(names)
    for name in names:
        assert name in registry


def test_concurrent_registration_of_same_name(registry: ValidatorRegistry) -> None:
    attempts = 20
    barrier = threading.Barrier(attempts)
    outcomes = []
    outcomes_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        try:
            registry.register(build_validator('contested', lambda v: True))
            outcome = 'ok'
        except ConfigurationError:
            outcome = 'duplicate'
        with outcomes_lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(attempts)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count('ok') == 1
    assert outcomes.count('duplicate') == attempts - 1
