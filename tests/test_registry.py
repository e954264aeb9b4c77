"""Tests for the service registry."""

import pytest

from yba_ctl.exceptions import UnknownServiceError
from yba_ctl.services import (
    SERVICE_ORDER,
    ServiceController,
    ServiceName,
    ServiceRegistry,
    valid_service_names,
)

from .conftest import FakeService


def _controllers(names=SERVICE_ORDER):
    return {name: FakeService(str(name), []) for name in names}


def test_canonical_order():
    """Services are ordered postgres, prometheus, yb-platform."""
    assert [name.value for name in SERVICE_ORDER] == ["postgres", "prometheus", "yb-platform"]
    assert valid_service_names() == "postgres, prometheus, yb-platform"


def test_iterates_in_canonical_order():
    """Iteration follows the service order, not insertion order."""
    controllers = {name: FakeService(str(name), []) for name in reversed(SERVICE_ORDER)}
    registry = ServiceRegistry(controllers)

    assert list(registry) == list(SERVICE_ORDER)
    assert registry.order == SERVICE_ORDER
    assert len(registry) == 3


def test_lookup_by_string_and_enum():
    """Controllers can be looked up by name or enum member."""
    controllers = _controllers()
    registry = ServiceRegistry(controllers)

    assert registry["postgres"] is controllers[ServiceName.POSTGRES]
    assert registry[ServiceName.YB_PLATFORM] is controllers[ServiceName.YB_PLATFORM]
    assert "prometheus" in registry
    assert "foo" not in registry


def test_lookup_miss_is_defensive_failure():
    """Looking up an unregistered name raises."""
    registry = ServiceRegistry(_controllers())

    with pytest.raises(UnknownServiceError, match="Unknown service: foo"):
        registry["foo"]
    assert registry.get("foo") is None


def test_string_keys_are_normalised():
    """String keys are converted to service names."""
    registry = ServiceRegistry({name.value: FakeService(name.value, []) for name in SERVICE_ORDER})

    assert list(registry) == list(SERVICE_ORDER)


def test_missing_controller_rejected():
    """Every service needs a controller."""
    with pytest.raises(ValueError, match="Missing controllers for: yb-platform"):
        ServiceRegistry(_controllers(SERVICE_ORDER[:2]))


def test_unknown_controller_rejected():
    """Controllers for unknown services are rejected."""
    controllers = {**_controllers(), "foo": FakeService("foo", [])}

    with pytest.raises(ValueError, match="No such service: foo"):
        ServiceRegistry(controllers)


def test_controller_outside_order_rejected():
    """Controllers must belong to the service order."""
    with pytest.raises(ValueError, match="outside service order: yb-platform"):
        ServiceRegistry(_controllers(), order=SERVICE_ORDER[:2])


def test_registry_is_read_only():
    """The registry cannot be modified after construction."""
    registry = ServiceRegistry(_controllers())

    with pytest.raises(TypeError):
        registry["postgres"] = FakeService("postgres", [])  # type: ignore[index]


def test_fake_satisfies_controller_protocol():
    """Test fakes satisfy the controller protocol."""
    assert isinstance(FakeService("postgres", []), ServiceController)
