"""Tests for the Resource and Action value objects."""

import pytest

from neo_permissions.platform.permissions.core.exceptions import (
    InvalidActionError,
    InvalidResourceError,
)
from neo_permissions.platform.permissions.core.value_objects import (
    Action,
    ActionCategory,
    Resource,
)
from neo_permissions.platform.permissions.core.value_objects.action import (
    ACTION_PRIORITIES,
    STANDARD_ACTIONS,
)


class TestResource:
    """Test cases for Resource."""
    
    def test_resource_is_normalized(self):
        """Input is trimmed and lowercased."""
        assert Resource("  User.Profile ").value == "user.profile"
        assert Resource("User") == Resource(" user ")
    
    def test_resource_rejects_empty(self):
        """Blank names are rejected after trimming."""
        with pytest.raises(InvalidResourceError, match="cannot be empty"):
            Resource("   ")
    
    def test_resource_length_limit(self):
        """Names longer than 100 characters are rejected."""
        assert Resource("a" * 100).value == "a" * 100
        with pytest.raises(InvalidResourceError, match="cannot exceed 100"):
            Resource("a" * 101)
    
    def test_resource_character_class(self):
        """Names must start with a letter and use the allowed characters."""
        for bad in ["1user", "user profile", "user/profile", "_user", "user:read"]:
            with pytest.raises(InvalidResourceError, match="must start with a letter"):
                Resource(bad)
        
        assert Resource("tenant.settings-v2_x").value == "tenant.settings-v2_x"
    
    def test_resource_reserved_words(self):
        """Reserved words are rejected in any case."""
        for word in ["system", "ADMIN", "root", "Api", "internal"]:
            with pytest.raises(InvalidResourceError, match="reserved word"):
                Resource(word)
        
        # Reserved words are fine as a namespace
        assert Resource("system.config").is_system_resource
    
    def test_resource_rejects_non_string(self):
        """Non-string input is rejected with the offending value recorded."""
        with pytest.raises(InvalidResourceError) as exc_info:
            Resource(42)
        assert exc_info.value.error_code == "INVALID_RESOURCE"
        assert exc_info.value.details["value"] == "42"
    
    def test_resource_classification(self):
        """Namespace queries look at the first dotted segment."""
        resource = Resource("tenant.settings")
        assert resource.resource_type == "tenant"
        assert resource.resource_sub_type == "settings"
        assert resource.is_tenant_resource
        assert not resource.is_user_resource
        
        plain = Resource("user")
        assert plain.resource_type == "user"
        assert plain.resource_sub_type is None
        assert not plain.is_user_resource
        
        assert Resource("platform.billing").is_platform_resource
        assert Resource("organization.members").is_organization_resource
        assert Resource("department.budget").is_department_resource
        assert Resource("user.profile").is_user_resource
    
    def test_resource_serialization(self):
        """Resources serialize to their normalized string."""
        resource = Resource("User.Profile")
        assert resource.to_json() == "user.profile"
        assert str(resource) == "user.profile"
    
    def test_resource_is_immutable(self):
        """Assigning to a resource fails."""
        resource = Resource("user")
        with pytest.raises(AttributeError):
            resource.value = "tenant"


class TestAction:
    """Test cases for Action."""
    
    def test_action_is_normalized(self):
        """Input is trimmed and lowercased."""
        assert Action(" READ ").value == "read"
    
    def test_action_validation(self):
        """Empty, too long and badly formed names are rejected."""
        with pytest.raises(InvalidActionError, match="cannot be empty"):
            Action("")
        with pytest.raises(InvalidActionError, match="cannot exceed 50"):
            Action("a" * 51)
        with pytest.raises(InvalidActionError, match="must start with a letter"):
            Action("9lives")
        with pytest.raises(InvalidActionError, match="must be a string"):
            Action(None)
    
    def test_action_categories(self):
        """Categories follow the read, write and admin tables."""
        assert Action("read").category is ActionCategory.READ
        assert Action("export").category is ActionCategory.READ
        assert Action("create").category is ActionCategory.WRITE
        assert Action("delete").category is ActionCategory.WRITE
        assert Action("approve").category is ActionCategory.ADMIN
        assert Action("frobnicate").category is ActionCategory.CUSTOM
        
        assert Action("list").is_read_action
        assert Action("update").is_write_action
        assert Action("revoke").is_admin_action
        assert not Action("frobnicate").is_standard_action
    
    def test_action_priority(self):
        """Every standard action has a priority; unknown actions rank 0."""
        for name in STANDARD_ACTIONS:
            assert name in ACTION_PRIORITIES
        
        assert Action("read").priority == 1
        assert Action("archive").priority == 10
        assert Action("frobnicate").priority == 0
        assert Action("delete").priority > Action("update").priority
    
    def test_destructive_actions(self):
        """Destructive actions require confirmation."""
        for name in ["delete", "revoke", "suspend", "archive"]:
            action = Action(name)
            assert action.is_destructive
            assert action.requires_confirmation
        
        assert not Action("read").is_destructive
        assert not Action("create").requires_confirmation
    
    def test_action_equality(self):
        """Actions compare by normalized value."""
        assert Action("Read") == Action("read")
        assert Action("read") != Action("list")
        assert hash(Action("Read")) == hash(Action("read"))
