"""Tests for PermissionType and its helpers."""

from neo_permissions.platform.permissions.core.value_objects import (
    PermissionType,
    ScopeLevel,
    can_inherit_from,
    can_manage,
    has_higher_level,
    has_lower_level,
    has_same_level,
    inheritance_chain,
    required_scope_level,
)
from neo_permissions.platform.permissions.core.value_objects.permission_type import (
    DESCRIPTIONS,
    DISPLAY_NAMES,
    REQUIRED_SCOPE_LEVELS,
    TYPE_LEVELS,
)


HIERARCHICAL = [
    PermissionType.PLATFORM,
    PermissionType.TENANT,
    PermissionType.ORGANIZATION,
    PermissionType.DEPARTMENT,
    PermissionType.USER,
]


class TestPermissionTypeTables:
    """Fixed tables behind the type helpers."""
    
    def test_tables_cover_every_type(self):
        """Every lookup table has an entry for every member."""
        for permission_type in PermissionType:
            assert permission_type in TYPE_LEVELS
            assert permission_type in REQUIRED_SCOPE_LEVELS
            assert permission_type in DISPLAY_NAMES
            assert permission_type in DESCRIPTIONS
    
    def test_levels(self):
        """SYSTEM is highest and CUSTOM lowest."""
        ordered = sorted(PermissionType, key=lambda t: t.level, reverse=True)
        assert ordered == [
            PermissionType.SYSTEM,
            PermissionType.PLATFORM,
            PermissionType.TENANT,
            PermissionType.ORGANIZATION,
            PermissionType.DEPARTMENT,
            PermissionType.USER,
            PermissionType.CUSTOM,
        ]
        assert PermissionType.SYSTEM.level == 6
        assert PermissionType.CUSTOM.level == 0
    
    def test_required_scope_level(self):
        """Each type maps to exactly one scope level."""
        assert required_scope_level(PermissionType.PLATFORM) is ScopeLevel.PLATFORM
        assert required_scope_level(PermissionType.SYSTEM) is ScopeLevel.PLATFORM
        assert required_scope_level(PermissionType.TENANT) is ScopeLevel.TENANT
        assert required_scope_level(PermissionType.CUSTOM) is ScopeLevel.TENANT
        assert required_scope_level(PermissionType.ORGANIZATION) is ScopeLevel.ORGANIZATION
        assert required_scope_level(PermissionType.DEPARTMENT) is ScopeLevel.DEPARTMENT
        assert required_scope_level(PermissionType.USER) is ScopeLevel.USER
        assert required_scope_level("USER") is ScopeLevel.USER
    
    def test_display(self):
        assert PermissionType.ORGANIZATION.display_name == "Organization"
        assert PermissionType.SYSTEM.description == "Reserved for internal system use"
        assert str(PermissionType.TENANT) == "TENANT"


class TestCanManage:
    """Authority of one type over another."""
    
    def test_system_manages_everything(self):
        for target in PermissionType:
            assert can_manage(PermissionType.SYSTEM, target)
    
    def test_platform_manages_all_but_system(self):
        for target in PermissionType:
            expected = target is not PermissionType.SYSTEM
            assert can_manage(PermissionType.PLATFORM, target) is expected
    
    def test_hierarchical_types_manage_same_or_lower(self):
        """Between hierarchical types the manager needs an equal or higher level."""
        for manager in HIERARCHICAL[1:]:
            for target in HIERARCHICAL:
                expected = manager.level >= target.level
                assert can_manage(manager, target) is expected
    
    def test_custom_manages_only_custom(self):
        for target in PermissionType:
            expected = target is PermissionType.CUSTOM
            assert can_manage(PermissionType.CUSTOM, target) is expected
    
    def test_cross_combinations_refused(self):
        """Hierarchical types below platform cannot manage SYSTEM or CUSTOM."""
        for manager in HIERARCHICAL[1:]:
            assert not can_manage(manager, PermissionType.SYSTEM)
            assert not can_manage(manager, PermissionType.CUSTOM)


class TestInheritance:
    """Inheritance chains and level comparisons."""
    
    def test_inheritance_chain(self):
        """Chains list the type and every higher hierarchical type, highest first."""
        assert inheritance_chain(PermissionType.DEPARTMENT) == [
            PermissionType.PLATFORM,
            PermissionType.TENANT,
            PermissionType.ORGANIZATION,
            PermissionType.DEPARTMENT,
        ]
        assert inheritance_chain(PermissionType.PLATFORM) == [PermissionType.PLATFORM]
        assert inheritance_chain(PermissionType.USER) == HIERARCHICAL
    
    def test_non_hierarchical_chain(self):
        assert inheritance_chain(PermissionType.SYSTEM) == [PermissionType.SYSTEM]
        assert inheritance_chain(PermissionType.CUSTOM) == [PermissionType.CUSTOM]
    
    def test_is_hierarchical(self):
        for permission_type in HIERARCHICAL:
            assert permission_type.is_hierarchical
        assert not PermissionType.SYSTEM.is_hierarchical
        assert not PermissionType.CUSTOM.is_hierarchical
    
    def test_level_comparisons(self):
        assert has_higher_level(PermissionType.TENANT, PermissionType.USER)
        assert has_lower_level(PermissionType.USER, PermissionType.TENANT)
        assert has_same_level(PermissionType.USER, PermissionType.USER)
        assert not has_higher_level(PermissionType.CUSTOM, PermissionType.USER)
    
    def test_can_inherit_from(self):
        """Grants flow from a strictly higher hierarchical type."""
        assert can_inherit_from(PermissionType.USER, PermissionType.TENANT)
        assert not can_inherit_from(PermissionType.TENANT, PermissionType.USER)
        assert not can_inherit_from(PermissionType.TENANT, PermissionType.TENANT)
        assert not can_inherit_from(PermissionType.TENANT, PermissionType.SYSTEM)
        assert not can_inherit_from(PermissionType.CUSTOM, PermissionType.PLATFORM)
