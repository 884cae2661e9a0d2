"""Indexer variants."""

from ..records import INDEXER
from .descriptor import VariantDescriptor, computed, optional, required

WIKI = "For more information refer to [Indexer](https://wiki.servarr.com/lidarr/settings#indexers)."

_COMMON = (
    optional("enable_automatic_search"),
    optional("enable_interactive_search"),
    optional("enable_rss"),
    optional("priority", ge=1, le=50),
    optional("download_client_id"),
    computed("protocol"),
)

_SEEDING = (
    optional("minimum_seeders"),
    optional("seed_ratio"),
    optional("seed_time"),
    optional("discography_seed_time"),
)

INDEXER_FILELIST = VariantDescriptor(
    resource_name="indexer_filelist",
    family=INDEXER,
    implementation="FileList",
    config_contract="FileListSettings",
    description=f"Indexer FileList resource. {WIKI}",
    attributes=_COMMON + _SEEDING + (
        optional("early_release_limit"),
        optional("base_url"),
        required("username"),
        required("passkey", sensitive=True),
        optional("categories"),
    ),
)

INDEXER_NEWZNAB = VariantDescriptor(
    resource_name="indexer_newznab",
    family=INDEXER,
    implementation="Newznab",
    config_contract="NewznabSettings",
    description=f"Indexer Newznab resource. {WIKI}",
    attributes=_COMMON + (
        optional("early_release_limit"),
        required("base_url"),
        optional("api_path"),
        optional("api_key", sensitive=True),
        optional("additional_parameters"),
        optional("categories"),
    ),
)

INDEXER_TORZNAB = VariantDescriptor(
    resource_name="indexer_torznab",
    family=INDEXER,
    implementation="Torznab",
    config_contract="TorznabSettings",
    description=f"Indexer Torznab resource. {WIKI}",
    attributes=_COMMON + _SEEDING + (
        optional("early_release_limit"),
        required("base_url"),
        optional("api_path"),
        optional("api_key", sensitive=True),
        optional("additional_parameters"),
        optional("categories"),
    ),
)

INDEXER_GAZELLE = VariantDescriptor(
    resource_name="indexer_gazelle",
    family=INDEXER,
    implementation="Gazelle",
    config_contract="GazelleSettings",
    description=f"Indexer Gazelle resource. {WIKI}",
    attributes=_COMMON + _SEEDING + (
        required("base_url"),
        required("username"),
        required("password", sensitive=True),
        optional("use_freeleech_token"),
    ),
)

INDEXER_VARIANTS = (
    INDEXER_FILELIST,
    INDEXER_NEWZNAB,
    INDEXER_TORZNAB,
    INDEXER_GAZELLE,
)
