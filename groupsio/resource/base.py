"""
Shared plumbing for resources: sending requests, deserializing responses,
mapping API errors, and following paginated lists.
"""

from typing import Any, Protocol, TypeVar

import httpx
import structlog
from pydantic import BaseModel
from structlog.typing import FilteringBoundLogger

from groupsio.config.settings import ClientSettings
from groupsio.core.error import Error, ErrorType
from groupsio.core.page import Page
from groupsio.core.permissions import Permissions

T = TypeVar("T", bound=BaseModel)


class GroupsIOApiError(Exception):
    """
    The API refused the request, either because the server said so or
    because a local permission precheck failed.
    """

    error: Error
    status_code: int | None

    def __init__(self, error: Error, status_code: int | None = None):
        self.error = error
        self.status_code = status_code
        message = error.type.value
        if error.extra:
            message = f"{message}: {error.extra}"
        super().__init__(message)

    @property
    def type(self) -> ErrorType:
        return self.error.type


class UnsupportedOperationError(NotImplementedError):
    pass


class PaginationStalledError(Exception):
    pass


class PermissionsProvider(Protocol):
    """
    The only capability a resource needs from its siblings for prechecks.
    """

    def get_permissions(self, group_id: int) -> Permissions: ...


class BaseResource:
    """
    Base class for resources. Holds the HTTP client, the settings (for the
    base URL and page size) and a logger; resources must not keep any other
    state between calls.
    """

    http: httpx.Client
    settings: ClientSettings
    permissions: PermissionsProvider | None
    log: FilteringBoundLogger

    def __init__(
        self,
        http: httpx.Client,
        settings: ClientSettings,
        permissions: PermissionsProvider | None = None,
        log: FilteringBoundLogger | None = None,
    ):
        self.http = http
        self.settings = settings
        self.permissions = permissions
        self.log = log if log is not None else structlog.get_logger()

    def url(self, endpoint: str) -> str:
        return self.settings.base_url + endpoint

    def get(
        self, endpoint: str, params: dict[str, Any], response_type: type[T]
    ) -> T:
        request = self.http.build_request("GET", self.url(endpoint), params=params)
        return self.call_api(request, response_type)

    def post(
        self,
        endpoint: str,
        data: dict[str, str],
        response_type: type[T],
        params: dict[str, Any] | None = None,
    ) -> T:
        request = self.http.build_request(
            "POST", self.url(endpoint), params=params, data=data
        )
        return self.call_api(request, response_type)

    def call_api(self, request: httpx.Request, response_type: type[T]) -> T:
        """
        Send the request and validate the response body into `response_type`.

        Raises
        ------
        GroupsIOApiError
            If the response has an error status or is an error object.
        httpx.HTTPError
            If we could not talk to the server at all.
        pydantic.ValidationError
            If the response body is not JSON or does not have the expected
            shape.
        """

        log = self.log.bind(method=request.method, endpoint=request.url.path)

        response = self.http.send(request)

        if response.is_error:
            raise self._api_error(response=response, log=log)

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("object") == "error":
            raise self._api_error(response=response, log=log)

        log.debug("api.success", status_code=response.status_code)

        return response_type.model_validate_json(response.content)

    def _api_error(
        self, response: httpx.Response, log: FilteringBoundLogger
    ) -> GroupsIOApiError:
        try:
            error = Error.model_validate_json(response.content)
        except ValueError:
            error = Error.create(ErrorType.UNKNOWN, extra=response.text)

        log.info(
            "api.error",
            status_code=response.status_code,
            error_type=error.type.value,
            extra=error.extra,
        )

        return GroupsIOApiError(error=error, status_code=response.status_code)

    def require_permission(self, group_id: int, capability: str) -> Permissions:
        """
        Fetch the permissions for `group_id` and check that `capability` is
        granted, raising INADEQUATE_PERMISSIONS without any further request
        if it is not.
        """

        log = self.log.bind(group_id=group_id, capability=capability)

        permissions = self.permissions.get_permissions(group_id)

        if not getattr(permissions, capability):
            log.info("permissions.inadequate")
            raise GroupsIOApiError(
                error=Error.create(ErrorType.INADEQUATE_PERMISSIONS, extra=capability)
            )

        log.debug("permissions.checked")

        return permissions

    def paginate(
        self, endpoint: str, params: dict[str, Any], item_type: type[T]
    ) -> list[T]:
        """
        Fetch every page of a list endpoint, returning all items in the order
        the server sent them. A failure on any page propagates; no partial
        list is ever returned.

        Raises
        ------
        PaginationStalledError
            If the server claims there is more data but does not advance the
            page token, or `settings.max_pages` is exceeded.
        """

        page_type = Page[item_type]
        params = {**params, "limit": self.settings.max_results}
        log = self.log.bind(endpoint=endpoint)

        page = self.get(endpoint, params, page_type)
        items = list(page.data)
        pages = 1
        seen_tokens = set()

        while page.has_more:
            token = page.next_page_token

            if token is None or str(token) in seen_tokens:
                log.warning("pagination.stalled", token=token, pages=pages)
                raise PaginationStalledError(
                    f"{endpoint} reported more data without a new page token "
                    f"(token={token!r}, after {pages} pages)"
                )

            if self.settings.max_pages is not None and pages >= self.settings.max_pages:
                log.warning("pagination.max_pages", pages=pages)
                raise PaginationStalledError(
                    f"{endpoint} exceeded max_pages={self.settings.max_pages}"
                )

            seen_tokens.add(str(token))
            params["page_token"] = str(token)

            page = self.get(endpoint, params, page_type)
            items.extend(page.data)
            pages += 1

            log.debug("pagination.page_fetched", pages=pages, items=len(items))

        return items
