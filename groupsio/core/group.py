"""
Core group data model.
"""

from datetime import datetime

from pydantic import BaseModel


class Group(BaseModel):
    """
    A Groups.io group. All fields are optional so that a blank `Group` can be
    used to describe an update; only the fields explicitly set by the caller
    (`model_fields_set`) are sent to the server:

    ```python
    update = Group(id=1234, website="https://example.org")
    updated = client.group().update_group(update)
    ```
    """

    id: int | None = None
    object: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    parent_group_id: int | None = None
    org_id: int | None = None

    name: str | None = None
    title: str | None = None
    alias: str | None = None
    desc: str | None = None
    plain_desc: str | None = None
    subject_tag: str | None = None
    footer: str | None = None
    website: str | None = None
    color: str | None = None
    privacy: str | None = None
    announce: bool | None = None
    moderated: bool | None = None
    moderated_until: datetime | None = None
    restricted: bool | None = None
    allow_attachments: bool | None = None
    reply_to: str | None = None
    subs_count: int | None = None

    def update_fields(self) -> dict[str, str]:
        """
        The explicitly set, non-identifier fields as a flat form body.
        """

        fields = self.model_dump(mode="json", exclude={"id"})

        return {
            key: format_form_value(value)
            for key, value in fields.items()
            if key in self.model_fields_set and value is not None
        }


def format_form_value(value) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case _:
            return str(value)
