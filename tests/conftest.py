"""Pytest configuration and fixtures for neo-permissions tests."""

import pytest
from datetime import datetime, timedelta, timezone

from neo_permissions.config import reset_settings
from neo_permissions.core.value_objects import TenantId
from neo_permissions.platform.permissions.core.aggregates import PermissionAggregate
from neo_permissions.platform.permissions.core.entities import PermissionEntity
from neo_permissions.platform.permissions.core.value_objects import (
    Action,
    PermissionCondition,
    PermissionId,
    PermissionScope,
    PermissionSettings,
    PermissionType,
    Resource,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment overrides apply per test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_now():
    """A fixed point in time for clock-dependent tests."""
    return datetime(2030, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def future():
    """A time safely in the future for expiry settings."""
    return datetime.now(timezone.utc) + timedelta(days=30)


@pytest.fixture
def sample_tenant_id():
    """Sample tenant ID for testing."""
    return TenantId("t1")


@pytest.fixture
def tenant_scope():
    """Tenant scope for tenant t1."""
    return PermissionScope.tenant("t1")


@pytest.fixture
def department_scope():
    """Department scope inside tenant t1."""
    return PermissionScope.department("t1", "o1", "d1")


@pytest.fixture
def age_condition():
    """Condition requiring an adult requester."""
    return PermissionCondition(field="age", operator="greater_than", value=18)


@pytest.fixture
def region_condition():
    """Condition restricting the request region."""
    return PermissionCondition(field="region", operator="in", value=["eu", "us"])


@pytest.fixture
def sample_permission(sample_tenant_id, tenant_scope):
    """Active tenant permission to read users."""
    return PermissionEntity(
        id=PermissionId.generate(),
        resource=Resource("user"),
        action=Action("read"),
        scope=tenant_scope,
        type=PermissionType.TENANT,
        tenant_id=sample_tenant_id,
    )


@pytest.fixture
def sample_aggregate(sample_tenant_id, tenant_scope):
    """Aggregate holding a freshly created, committed tenant permission."""
    aggregate = PermissionAggregate()
    aggregate.create_permission(
        resource=Resource("user"),
        action=Action("read"),
        conditions=[],
        scope=tenant_scope,
        permission_type=PermissionType.TENANT,
        settings=PermissionSettings.default(),
        tenant_id=sample_tenant_id,
        created_by="alice",
    )
    aggregate.mark_events_as_committed()
    return aggregate
