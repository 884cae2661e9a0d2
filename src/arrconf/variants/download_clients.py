"""Download client variants."""

from ..records import DOWNLOAD_CLIENT
from .descriptor import VariantDescriptor, computed, optional, required

WIKI = "For more information refer to [Download Client](https://wiki.servarr.com/lidarr/settings#download-clients)."

_COMMON = (
    optional("enable"),
    optional("priority", ge=1, le=50),
    optional("remove_completed_downloads"),
    optional("remove_failed_downloads"),
    computed("protocol"),
)

# Transmission and qBittorrent share 0 Last / 1 First queue priorities.
_QUEUE_PRIORITY = (0, 1)

DOWNLOAD_CLIENT_TRANSMISSION = VariantDescriptor(
    resource_name="download_client_transmission",
    family=DOWNLOAD_CLIENT,
    implementation="Transmission",
    config_contract="TransmissionSettings",
    description=f"Download Client Transmission resource. {WIKI}",
    attributes=_COMMON + (
        optional("add_paused"),
        optional("use_ssl"),
        optional("port"),
        optional(
            "recent_music_priority", one_of=_QUEUE_PRIORITY,
            description="Recent Music priority. `0` Last, `1` First.",
        ),
        optional(
            "older_music_priority", one_of=_QUEUE_PRIORITY,
            description="Older Music priority. `0` Last, `1` First.",
        ),
        required("host"),
        optional("url_base"),
        optional("username"),
        optional("password", sensitive=True),
        optional("music_category"),
        optional("music_directory"),
    ),
)

DOWNLOAD_CLIENT_TORRENT_DOWNLOAD_STATION = VariantDescriptor(
    resource_name="download_client_torrent_download_station",
    family=DOWNLOAD_CLIENT,
    implementation="TorrentDownloadStation",
    config_contract="DownloadStationSettings",
    description=f"Download Client Download Station resource. {WIKI}",
    attributes=_COMMON + (
        optional("use_ssl"),
        optional("port"),
        required("host"),
        optional("username"),
        optional("password", sensitive=True),
        optional("music_category"),
        optional("music_directory"),
    ),
)

DOWNLOAD_CLIENT_QBITTORRENT = VariantDescriptor(
    resource_name="download_client_qbittorrent",
    family=DOWNLOAD_CLIENT,
    implementation="QBittorrent",
    config_contract="QBittorrentSettings",
    description=f"Download Client qBittorrent resource. {WIKI}",
    attributes=_COMMON + (
        optional("use_ssl"),
        optional("first_and_last"),
        optional("sequential_order"),
        optional("port"),
        optional(
            "initial_state", one_of=(0, 1, 2),
            description="Initial state. `0` Start, `1` ForceStart, `2` Pause.",
        ),
        optional(
            "recent_music_priority", one_of=_QUEUE_PRIORITY,
            description="Recent Music priority. `0` Last, `1` First.",
        ),
        optional(
            "older_music_priority", one_of=_QUEUE_PRIORITY,
            description="Older Music priority. `0` Last, `1` First.",
        ),
        required("host"),
        optional("url_base"),
        optional("username"),
        optional("password", sensitive=True),
        optional("music_category"),
        optional("music_imported_category"),
    ),
)

DOWNLOAD_CLIENT_SABNZBD = VariantDescriptor(
    resource_name="download_client_sabnzbd",
    family=DOWNLOAD_CLIENT,
    implementation="Sabnzbd",
    config_contract="SabnzbdSettings",
    description=f"Download Client SABnzbd resource. {WIKI}",
    attributes=_COMMON + (
        optional("use_ssl"),
        optional("port"),
        optional(
            "recent_music_priority", one_of=(-100, -2, -1, 0, 1, 2),
            description="Recent Music priority. `-100` Default, `-2` Paused, `-1` Low, `0` Normal, "
                        "`1` High, `2` Force.",
        ),
        optional(
            "older_music_priority", one_of=(-100, -2, -1, 0, 1, 2),
            description="Older Music priority. `-100` Default, `-2` Paused, `-1` Low, `0` Normal, "
                        "`1` High, `2` Force.",
        ),
        required("host"),
        optional("url_base"),
        optional("api_key", sensitive=True),
        optional("username"),
        optional("password", sensitive=True),
        optional("music_category"),
    ),
)

DOWNLOAD_CLIENT_VARIANTS = (
    DOWNLOAD_CLIENT_TRANSMISSION,
    DOWNLOAD_CLIENT_TORRENT_DOWNLOAD_STATION,
    DOWNLOAD_CLIENT_QBITTORRENT,
    DOWNLOAD_CLIENT_SABNZBD,
)
