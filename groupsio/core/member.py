"""
A member of a group.
"""

from datetime import datetime

from pydantic import BaseModel


class Member(BaseModel):
    id: int
    object: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    user_id: int | None = None
    group_id: int | None = None
    group_name: str | None = None
    status: str | None = None
    post_status: str | None = None
    email: str | None = None
    full_name: str | None = None
    user_name: str | None = None
    mod_status: str | None = None
