"""Tests for PermissionScope containment and validation."""

import pytest

from neo_permissions.platform.permissions.core.exceptions import InvalidPermissionScopeError
from neo_permissions.platform.permissions.core.value_objects import (
    PermissionScope,
    ScopeLevel,
)
from neo_permissions.platform.permissions.core.value_objects.permission_scope import (
    LEVEL_PRIORITIES,
    REQUIRED_IDS,
)


def _all_scopes():
    """One scope per level plus neighbours that differ by a single id."""
    return [
        PermissionScope.platform(),
        PermissionScope.tenant("t1"),
        PermissionScope.tenant("t2"),
        PermissionScope.organization("t1", "o1"),
        PermissionScope.organization("t1", "o2"),
        PermissionScope.department("t1", "o1", "d1"),
        PermissionScope.department("t1", "o1", "d2"),
        PermissionScope.user("t1", "u1", "o1", "d1"),
        PermissionScope.user("t1", "u2", "o1", "d1"),
        PermissionScope.user("t2", "u1"),
    ]


class TestScopeValidation:
    """Construction rules for scopes."""
    
    def test_level_parsing(self):
        """Levels are accepted as strings in any case."""
        assert PermissionScope(level="Tenant", tenant_id="t1").level is ScopeLevel.TENANT
        
        with pytest.raises(InvalidPermissionScopeError, match="Invalid permission scope level"):
            PermissionScope(level="galaxy")
    
    def test_required_ids(self):
        """Each level requires its ancestor identifiers."""
        with pytest.raises(InvalidPermissionScopeError, match="requires tenant_id"):
            PermissionScope(level="tenant")
        with pytest.raises(InvalidPermissionScopeError, match="missing: organization_id"):
            PermissionScope(level="organization", tenant_id="t1")
        with pytest.raises(InvalidPermissionScopeError, match="missing: department_id"):
            PermissionScope(level="department", tenant_id="t1", organization_id="o1")
        with pytest.raises(InvalidPermissionScopeError, match="missing: user_id"):
            PermissionScope(level="user", tenant_id="t1")
        with pytest.raises(InvalidPermissionScopeError, match="missing: tenant_id"):
            PermissionScope(level="user", user_id="u1")
    
    def test_blank_ids_are_missing(self):
        """Whitespace identifiers count as absent."""
        with pytest.raises(InvalidPermissionScopeError):
            PermissionScope(level="tenant", tenant_id="   ")
    
    def test_every_level_has_tables(self):
        """Lookup tables cover every level."""
        for level in ScopeLevel:
            assert level in LEVEL_PRIORITIES
            assert level in REQUIRED_IDS
    
    def test_level_priority(self):
        """Priorities run 5 for platform down to 1 for user."""
        assert PermissionScope.platform().level_priority == 5
        assert PermissionScope.tenant("t1").level_priority == 4
        assert PermissionScope.organization("t1", "o1").level_priority == 3
        assert PermissionScope.department("t1", "o1", "d1").level_priority == 2
        assert PermissionScope.user("t1", "u1").level_priority == 1


class TestScopeContainment:
    """includes() and intersects()."""
    
    def test_reflexive(self):
        """Every scope includes itself."""
        for scope in _all_scopes():
            assert scope.includes(scope)
            assert scope.includes(PermissionScope.from_json(scope.to_json()))
    
    def test_platform_includes_everything(self):
        """The platform scope contains every other scope."""
        platform = PermissionScope.platform()
        for scope in _all_scopes():
            assert platform.includes(scope)
    
    def test_nothing_else_includes_platform(self):
        """Only the platform scope contains the platform."""
        platform = PermissionScope.platform()
        for scope in _all_scopes()[1:]:
            assert not scope.includes(platform)
    
    def test_tenant_includes_same_tenant(self):
        """A tenant contains the organizations, departments and users of that tenant."""
        tenant = PermissionScope.tenant("t1")
        assert tenant.includes(PermissionScope.organization("t1", "o1"))
        assert tenant.includes(PermissionScope.department("t1", "o1", "d1"))
        assert tenant.includes(PermissionScope.user("t1", "u1"))
        
        assert not tenant.includes(PermissionScope.tenant("t2"))
        assert not tenant.includes(PermissionScope.organization("t2", "o1"))
        assert not tenant.includes(PermissionScope.user("t2", "u1"))
    
    def test_organization_containment(self):
        """Organizations contain their departments and users only."""
        organization = PermissionScope.organization("t1", "o1")
        assert organization.includes(PermissionScope.department("t1", "o1", "d1"))
        assert organization.includes(PermissionScope.user("t1", "u1", "o1"))
        
        assert not organization.includes(PermissionScope.tenant("t1"))
        assert not organization.includes(PermissionScope.organization("t1", "o2"))
        assert not organization.includes(PermissionScope.department("t1", "o2", "d1"))
        assert not organization.includes(PermissionScope.user("t1", "u1"))
    
    def test_department_containment(self):
        """Departments contain only users placed in them."""
        department = PermissionScope.department("t1", "o1", "d1")
        assert department.includes(PermissionScope.user("t1", "u1", "o1", "d1"))
        
        assert not department.includes(PermissionScope.user("t1", "u1", "o1", "d2"))
        assert not department.includes(PermissionScope.department("t1", "o1", "d2"))
        assert not department.includes(PermissionScope.organization("t1", "o1"))
    
    def test_user_includes_only_same_user(self):
        """Two user scopes contain each other only when the ids match."""
        user = PermissionScope.user("t1", "u1")
        assert user.includes(PermissionScope.user("t1", "u1"))
        assert not user.includes(PermissionScope.user("t1", "u2"))
        assert not user.includes(PermissionScope.user("t2", "u1"))
        assert not user.includes(PermissionScope.department("t1", "o1", "d1"))
    
    def test_containment_is_one_directional(self):
        """A narrower scope never contains its parent."""
        tenant = PermissionScope.tenant("t1")
        department = PermissionScope.department("t1", "o1", "d1")
        assert tenant.includes(department)
        assert not department.includes(tenant)
    
    def test_intersects(self):
        """Scopes intersect when either contains the other."""
        tenant = PermissionScope.tenant("t1")
        department = PermissionScope.department("t1", "o1", "d1")
        other_tenant = PermissionScope.tenant("t2")
        
        assert tenant.intersects(department)
        assert department.intersects(tenant)
        assert not tenant.intersects(other_tenant)


class TestScopeSerialization:
    """to_json, from_json and display."""
    
    def test_to_json_omits_absent_ids(self):
        """Only present identifiers are serialized, camelCased."""
        assert PermissionScope.platform().to_json() == {"level": "platform"}
        assert PermissionScope.department("t1", "o1", "d1").to_json() == {
            "level": "department",
            "tenantId": "t1",
            "organizationId": "o1",
            "departmentId": "d1",
        }
    
    def test_from_json_accepts_both_key_styles(self):
        """camelCase and snake_case keys are both understood."""
        camel = PermissionScope.from_json({"level": "user", "tenantId": "t1", "userId": "u1"})
        snake = PermissionScope.from_json({"level": "user", "tenant_id": "t1", "user_id": "u1"})
        assert camel == snake == PermissionScope.user("t1", "u1")
    
    def test_from_json_rejects_non_mapping(self):
        with pytest.raises(InvalidPermissionScopeError):
            PermissionScope.from_json(None)
    
    def test_str(self):
        assert str(PermissionScope.tenant("t1")) == "tenant:tenant:t1"
        assert str(PermissionScope.platform()) == "platform"
