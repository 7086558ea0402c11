"""
An API client for Groups.io, wraps around httpx.
"""

import httpx
import structlog
from structlog.typing import FilteringBoundLogger

from groupsio.config.settings import ClientSettings
from groupsio.resource.group import GroupResource
from groupsio.resource.member import MemberResource


class GroupsIOAuth(httpx.BasicAuth):
    """
    An authentication provider for httpx. Groups.io takes the API key as
    the basic auth username, with an empty password.
    """

    def __init__(self, api_key: str):
        super().__init__(username=api_key, password="")
        self.api_key = api_key


class GroupsIOApiClient:
    """
    A synchronous client for the Groups.io API, exposing one resource per
    family of endpoints:

    ```python
    from groupsio.toolkit.client import GroupsIOApiClient

    with GroupsIOApiClient(api_key="...") as client:
        subgroups = client.group().get_subgroups(1234)
    ```
    """

    settings: ClientSettings
    groups: GroupResource
    members: MemberResource

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        settings: ClientSettings | None = None,
        log: FilteringBoundLogger | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Create the client.

        Parameters
        ----------
        api_key: str | None, optional
            The API key. If not provided, we use `GROUPSIO_API_KEY` from the
            environment (or `.env`).
        base_url: str | None, optional
            Override the API base URL, e.g. for a staging server.
        settings: ClientSettings | None, optional
            Settings to use instead of reading them from the environment.
        log: FilteringBoundLogger | None, optional
            Logger to bind request context to.
        transport: httpx.BaseTransport | None, optional
            Custom httpx transport; mostly useful for testing.
        """

        settings = settings if settings is not None else ClientSettings()

        overrides = {}
        if api_key is not None:
            overrides["api_key"] = api_key
        if base_url is not None:
            overrides["base_url"] = base_url
        if overrides:
            settings = ClientSettings(**{**settings.model_dump(), **overrides})

        if settings.api_key is None:
            raise ValueError("No API key provided and GROUPSIO_API_KEY is not set")

        self.settings = settings
        self.log = (log if log is not None else structlog.get_logger()).bind(
            base_url=settings.base_url
        )

        self._client = httpx.Client(
            auth=GroupsIOAuth(settings.api_key),
            timeout=settings.timeout,
            transport=transport,
        )

        self.groups = GroupResource(
            http=self._client, settings=self.settings, log=self.log
        )
        self.members = MemberResource(
            http=self._client,
            settings=self.settings,
            permissions=self.groups,
            log=self.log,
        )

    def group(self) -> GroupResource:
        return self.groups

    def member(self) -> MemberResource:
        return self.members

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
