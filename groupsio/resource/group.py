"""
Group resource: permissions, group details, subgroups and updates.
"""

import httpx
from structlog.typing import FilteringBoundLogger

from groupsio.config.settings import ClientSettings
from groupsio.core.group import Group
from groupsio.core.permissions import Permissions

from .base import BaseResource, PermissionsProvider, UnsupportedOperationError


class GroupResource(BaseResource):
    """
    Endpoints for a single group. The group resource is also the default
    permissions provider, as `getperms` is a group endpoint.
    """

    def __init__(
        self,
        http: httpx.Client,
        settings: ClientSettings,
        permissions: PermissionsProvider | None = None,
        log: FilteringBoundLogger | None = None,
    ):
        super().__init__(http=http, settings=settings, permissions=permissions, log=log)

        if self.permissions is None:
            self.permissions = self

    def get_permissions(self, group_id: int) -> Permissions:
        """
        Get the authenticated user's permissions for a group.

        Parameters
        ----------
        group_id: int
            The group to check.

        Raises
        ------
        GroupsIOApiError
            If the server rejects the request.
        """

        self.log.debug("group.get_permissions", group_id=group_id)

        return self.get("getperms", {"group_id": str(group_id)}, Permissions)

    def get_group(self, group_id: int) -> Group:
        """
        Get a group. Requires the `manage_group_settings` permission, which
        is checked before the group is requested.

        Raises
        ------
        GroupsIOApiError
            With type INADEQUATE_PERMISSIONS if the permission is missing, or
            whatever the server reports.
        """

        self.require_permission(group_id, "manage_group_settings")

        return self.get("getgroup", {"group_id": str(group_id)}, Group)

    def get_subgroups(self, group_id: int) -> list[Group]:
        """
        Get every subgroup of a parent group, following all pages.
        """

        subgroups = self.paginate("getsubgroups", {"group_id": str(group_id)}, Group)

        self.log.debug(
            "group.subgroups_listed", group_id=group_id, number_of_groups=len(subgroups)
        )

        return subgroups

    def create_subgroup(
        self, group_id: int, name: str, description: str, privacy: str
    ) -> Group:
        raise UnsupportedOperationError(
            "Creating subgroups is not supported by the API"
        )

    def update_group(self, group: Group) -> Group:
        """
        Update a group given a `Group` with only the id and the changed
        fields set:

        ```python
        update = Group(id=1234, website="https://github.com/groupsio")
        updated = client.group().update_group(update)
        ```

        Parameters
        ----------
        group: Group
            Must have `id` set. Only the other explicitly set fields are sent.

        Returns
        -------
        Group
            The full group after the update.

        Raises
        ------
        ValueError
            If the group has no id.
        GroupsIOApiError
            With type INADEQUATE_PERMISSIONS if `manage_group_settings` is
            missing, or whatever the server reports.
        """

        if group.id is None:
            raise ValueError("Group to update must have an id")

        log = self.log.bind(group_id=group.id)

        self.require_permission(group.id, "manage_group_settings")

        fields = group.update_fields()
        log.info("group.update", fields=sorted(fields))

        return self.post(
            "updategroup",
            data=fields,
            response_type=Group,
            params={"group_id": str(group.id)},
        )

    def delete_group(self, group_id: int) -> None:
        raise UnsupportedOperationError("Deleting groups is not supported by the API")
