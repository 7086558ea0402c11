"""
Tests the core data models.
"""

import pytest
from pydantic import ValidationError

from groupsio.config.settings import ClientSettings
from groupsio.core.error import Error, ErrorType
from groupsio.core.group import Group
from groupsio.core.member import Member
from groupsio.core.page import Page
from groupsio.core.permissions import Permissions


def test_update_fields_only_explicitly_set():
    group = Group(website="https://example.org")

    assert group.update_fields() == {"website": "https://example.org"}


def test_update_fields_excludes_id_and_none():
    group = Group(
        id=12, desc=None, moderated=True, privacy="group_privacy_archives_private"
    )

    assert group.update_fields() == {
        "privacy": "group_privacy_archives_private",
        "moderated": "true",
    }


def test_update_fields_from_fetched_group():
    # A parsed group has every field in the response marked as set.
    group = Group.model_validate({"id": 3, "name": "beta", "announce": False})

    assert group.update_fields() == {"name": "beta", "announce": "false"}


def test_blank_group_has_no_update_fields():
    assert Group().update_fields() == {}


def test_permissions_default_to_false():
    permissions = Permissions.model_validate({"object": "permissions"})

    assert not permissions.manage_group_settings
    assert not permissions.manage_members


def test_error_parsing():
    error = Error.model_validate_json(
        '{"object": "error", "type": "inadequate_permissions", "extra": "x"}'
    )

    assert error.type == ErrorType.INADEQUATE_PERMISSIONS
    assert error.extra == "x"


def test_error_unknown_type():
    error = Error.model_validate({"object": "error", "type": "brand_new_error"})

    assert error.type == ErrorType.UNKNOWN


def test_error_create():
    error = Error.create(ErrorType.INADEQUATE_PERMISSIONS)

    assert error.type == ErrorType.INADEQUATE_PERMISSIONS
    assert error.extra is None


def test_page_of_groups():
    page = Page[Group].model_validate(
        {
            "object": "list",
            "total_count": 3,
            "has_more": True,
            "next_page_token": 9981,
            "data": [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}],
        }
    )

    assert page.has_more
    assert page.next_page_token == 9981
    assert [group.id for group in page.data] == [1, 2]
    assert all(isinstance(group, Group) for group in page.data)


def test_page_rejects_wrong_item_shape():
    with pytest.raises(ValidationError):
        Page[Member].model_validate({"data": [{"name": "not a member"}]})


def test_settings_base_url_trailing_slash():
    settings = ClientSettings(api_key="k", base_url="https://groups.test/api/v1")

    assert settings.base_url == "https://groups.test/api/v1/"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GROUPSIO_API_KEY", "from-env")
    monkeypatch.setenv("GROUPSIO_MAX_PAGES", "5")

    settings = ClientSettings(_env_file=None)

    assert settings.api_key == "from-env"
    assert settings.max_pages == 5
    assert settings.max_results == 100
