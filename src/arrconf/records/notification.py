"""Superset record for the notification (connection) family."""

from typing import ClassVar, Dict, FrozenSet, Optional, Set
from pydantic import Field
from .base import GenericRecord


class NotificationRecord(GenericRecord):
    """Every attribute used by any notification variant."""
    PROPERTIES: ClassVar[FrozenSet[str]] = frozenset({
        "on_grab",
        "on_release_import",
        "on_upgrade",
        "on_rename",
        "on_artist_delete",
        "on_album_delete",
        "on_health_issue",
        "on_health_restored",
        "on_download_failure",
        "on_import_failure",
        "on_track_retag",
        "on_application_update",
        "include_health_warnings",
    })
    WIRE_NAMES: ClassVar[Dict[str, str]] = {
        "from_address": "from",
    }

    # Event flags
    on_grab: Optional[bool] = Field(None, description="On grab flag.")
    on_release_import: Optional[bool] = Field(None, description="On release import flag.")
    on_upgrade: Optional[bool] = Field(None, description="On upgrade flag.")
    on_rename: Optional[bool] = Field(None, description="On rename flag.")
    on_artist_delete: Optional[bool] = Field(None, description="On artist delete flag.")
    on_album_delete: Optional[bool] = Field(None, description="On album delete flag.")
    on_health_issue: Optional[bool] = Field(None, description="On health issue flag.")
    on_health_restored: Optional[bool] = Field(None, description="On health restored flag.")
    on_download_failure: Optional[bool] = Field(None, description="On download failure flag.")
    on_import_failure: Optional[bool] = Field(None, description="On import failure flag.")
    on_track_retag: Optional[bool] = Field(None, description="On track retag flag.")
    on_application_update: Optional[bool] = Field(None, description="On application update flag.")
    include_health_warnings: Optional[bool] = Field(None, description="Include health warnings.")

    # Field values
    always_update: Optional[bool] = Field(None, description="Always update flag.")
    clean_library: Optional[bool] = Field(None, description="Clean library flag.")
    notify: Optional[bool] = Field(None, description="Notify flag.")
    require_encryption: Optional[bool] = Field(None, description="Require encryption flag.")
    send_silently: Optional[bool] = Field(None, description="Send silently flag.")
    update_library: Optional[bool] = Field(None, description="Update library flag.")
    use_ssl: Optional[bool] = Field(None, description="Use SSL flag.")
    port: Optional[int] = Field(None, description="Port.")
    method: Optional[int] = Field(None, description="Method. `1` POST, `2` PUT.")
    priority: Optional[int] = Field(None, description="Priority.")
    retry: Optional[int] = Field(None, description="Retry.")
    expire: Optional[int] = Field(None, description="Expire.")
    grab_fields: Optional[Set[int]] = Field(None, description="Grab fields.")
    import_fields: Optional[Set[int]] = Field(None, description="Import fields.")
    api_key: Optional[str] = Field(None, description="API key.")
    app_token: Optional[str] = Field(None, description="App token.")
    arguments: Optional[str] = Field(None, description="Arguments.")
    author: Optional[str] = Field(None, description="Author.")
    avatar: Optional[str] = Field(None, description="Avatar.")
    bot_token: Optional[str] = Field(None, description="Bot token.")
    chat_id: Optional[str] = Field(None, description="Chat ID.")
    from_address: Optional[str] = Field(None, description="From.")
    host: Optional[str] = Field(None, description="Host.")
    password: Optional[str] = Field(None, description="Password.")
    path: Optional[str] = Field(None, description="Path.")
    server: Optional[str] = Field(None, description="Server.")
    sound: Optional[str] = Field(None, description="Sound.")
    url: Optional[str] = Field(None, description="URL.")
    url_base: Optional[str] = Field(None, description="URL base.")
    user_key: Optional[str] = Field(None, description="User key.")
    username: Optional[str] = Field(None, description="Username.")
    web_hook_url: Optional[str] = Field(None, description="Web hook URL.")
    to: Optional[Set[str]] = Field(None, description="To.")
    cc: Optional[Set[str]] = Field(None, description="Cc.")
    bcc: Optional[Set[str]] = Field(None, description="Bcc.")
    devices: Optional[Set[str]] = Field(None, description="Devices.")
