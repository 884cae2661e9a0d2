"""Superset record for the indexer family."""

from typing import ClassVar, Dict, FrozenSet, Optional, Set
from pydantic import Field
from .base import GenericRecord


class IndexerRecord(GenericRecord):
    """Every attribute used by any indexer variant."""
    PROPERTIES: ClassVar[FrozenSet[str]] = frozenset({
        "enable_automatic_search",
        "enable_interactive_search",
        "enable_rss",
        "priority",
        "protocol",
        "download_client_id",
    })
    WIRE_NAMES: ClassVar[Dict[str, str]] = {
        "seed_ratio": "seedCriteria.seedRatio",
        "seed_time": "seedCriteria.seedTime",
        "discography_seed_time": "seedCriteria.discographySeedTime",
    }

    enable_automatic_search: Optional[bool] = Field(None, description="Enable automatic search flag.")
    enable_interactive_search: Optional[bool] = Field(None, description="Enable interactive search flag.")
    enable_rss: Optional[bool] = Field(None, description="Enable RSS flag.")
    priority: Optional[int] = Field(None, description="Priority.")
    protocol: Optional[str] = Field(None, description="Protocol. Valid values are 'usenet' and 'torrent'.")
    download_client_id: Optional[int] = Field(None, description="Download client ID.")

    # Field values
    allow_zero_size: Optional[bool] = Field(None, description="Allow zero size files.")
    ranked_only: Optional[bool] = Field(None, description="Allow ranked only.")
    use_freeleech_token: Optional[bool] = Field(None, description="Use freeleech token flag.")
    minimum_seeders: Optional[int] = Field(None, description="Minimum seeders.")
    early_release_limit: Optional[int] = Field(None, description="Early release limit.")
    seed_time: Optional[int] = Field(None, description="Seed time.")
    discography_seed_time: Optional[int] = Field(None, description="Discography seed time.")
    seed_ratio: Optional[float] = Field(None, description="Seed ratio.")
    additional_parameters: Optional[str] = Field(None, description="Additional parameters.")
    api_key: Optional[str] = Field(None, description="API key.")
    api_path: Optional[str] = Field(None, description="API path.")
    base_url: Optional[str] = Field(None, description="Base URL.")
    username: Optional[str] = Field(None, description="Username.")
    password: Optional[str] = Field(None, description="Password.")
    passkey: Optional[str] = Field(None, description="Passkey.")
    categories: Optional[Set[int]] = Field(None, description="Categories.")
