"""
Permissions that the authenticated user holds on a single group.
"""

from pydantic import BaseModel


class Permissions(BaseModel):
    object: str = "permissions"

    archives_visible: bool = False
    polls_visible: bool = False
    members_visible: bool = False
    chat_visible: bool = False
    calendar_visible: bool = False
    files_visible: bool = False
    database_visible: bool = False
    wiki_visible: bool = False
    photos_visible: bool = False
    member_directory_visible: bool = False
    hashtags_visible: bool = False

    manage_subgroups: bool = False
    manage_database: bool = False
    manage_members: bool = False
    manage_group_settings: bool = False
    manage_pending_messages: bool = False
    manage_hashtags: bool = False
    manage_polls: bool = False
    manage_wiki: bool = False
    manage_files: bool = False
    manage_photos: bool = False
    manage_calendar: bool = False
    manage_member_subscription_options: bool = False
    manage_group_billing: bool = False
    manage_message_policies: bool = False

    download_archives: bool = False
    download_entire_group: bool = False
    download_members: bool = False
    view_activity: bool = False
    create_hashtags: bool = False
    edit_archives: bool = False
    delete_archives: bool = False
    invite_members: bool = False
    make_moderator: bool = False
    ban_members: bool = False
