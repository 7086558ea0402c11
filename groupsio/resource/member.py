"""
Member resource.
"""

import httpx
from structlog.typing import FilteringBoundLogger

from groupsio.config.settings import ClientSettings
from groupsio.core.member import Member

from .base import BaseResource, PermissionsProvider


class MemberResource(BaseResource):
    """
    Endpoints for group members. Listing members is gated on a permission
    held on the group, so a permissions provider (usually the client's
    `GroupResource`) is required.
    """

    permissions: PermissionsProvider

    def __init__(
        self,
        http: httpx.Client,
        settings: ClientSettings,
        permissions: PermissionsProvider,
        log: FilteringBoundLogger | None = None,
    ):
        if permissions is None:
            raise TypeError("MemberResource requires a permissions provider")

        super().__init__(
            http=http, settings=settings, permissions=permissions, log=log
        )

    def get_member(self, member_id: int) -> Member:
        return self.get("getmember", {"member_id": str(member_id)}, Member)

    def get_members(self, group_id: int) -> list[Member]:
        """
        Get every member of a group, following all pages. Requires the
        `manage_members` permission.
        """

        self.require_permission(group_id, "manage_members")

        members = self.paginate("getmembers", {"group_id": str(group_id)}, Member)

        self.log.debug(
            "member.listed", group_id=group_id, number_of_members=len(members)
        )

        return members
