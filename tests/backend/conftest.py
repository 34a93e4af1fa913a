"""
Shared fixtures for pagecms backend tests.
"""

import uuid

import pytest

from pagecms.models.user import User, UserRole
from pagecms.services.content_notifier import ContentUpdateManager
from pagecms.services.section_policy import SectionPolicy
from pagecms.services.section_registry import build_default_registry
from pagecms.services.section_validator import SectionContentValidator


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def validator(registry):
    return SectionContentValidator(registry)


@pytest.fixture
def policy(validator):
    return SectionPolicy(validator)


@pytest.fixture
def update_manager():
    return ContentUpdateManager()


@pytest.fixture
def editor_user():
    return User(
        id=uuid.uuid4(),
        email="editor@example.com",
        name="Editor",
        role=UserRole.AUTHOR.value,
        is_active=True,
    )
