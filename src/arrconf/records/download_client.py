"""Superset record for the download client family."""

from typing import ClassVar, FrozenSet, Optional
from pydantic import Field
from .base import GenericRecord


class DownloadClientRecord(GenericRecord):
    """Every attribute used by any download client variant."""
    PROPERTIES: ClassVar[FrozenSet[str]] = frozenset({
        "enable",
        "priority",
        "remove_completed_downloads",
        "remove_failed_downloads",
        "protocol",
    })

    enable: Optional[bool] = Field(None, description="Enable flag.")
    priority: Optional[int] = Field(None, description="Priority.")
    remove_completed_downloads: Optional[bool] = Field(None, description="Remove completed downloads flag.")
    remove_failed_downloads: Optional[bool] = Field(None, description="Remove failed downloads flag.")
    protocol: Optional[str] = Field(None, description="Protocol. Valid values are 'usenet' and 'torrent'.")

    # Field values
    add_paused: Optional[bool] = Field(None, description="Add paused flag.")
    first_and_last: Optional[bool] = Field(None, description="First and last flag.")
    sequential_order: Optional[bool] = Field(None, description="Sequential order flag.")
    use_ssl: Optional[bool] = Field(None, description="Use SSL flag.")
    port: Optional[int] = Field(None, description="Port.")
    initial_state: Optional[int] = Field(None, description="Initial state. `0` Start, `1` ForceStart, `2` Pause.")
    recent_music_priority: Optional[int] = Field(None, description="Recent music priority.")
    older_music_priority: Optional[int] = Field(None, description="Older music priority.")
    host: Optional[str] = Field(None, description="Host.")
    url_base: Optional[str] = Field(None, description="Base URL.")
    username: Optional[str] = Field(None, description="Username.")
    password: Optional[str] = Field(None, description="Password.")
    api_key: Optional[str] = Field(None, description="API key.")
    music_category: Optional[str] = Field(None, description="Music category.")
    music_imported_category: Optional[str] = Field(None, description="Music imported category.")
    music_directory: Optional[str] = Field(None, description="Music directory.")
