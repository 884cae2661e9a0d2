"""Notification variants."""

from ..records import NOTIFICATION
from .descriptor import VariantDescriptor, optional, required

WIKI = "For more information refer to [Notification](https://wiki.servarr.com/lidarr/settings#connect)."

# Event flags shared by most notification kinds.
_EVENTS = (
    optional("on_grab"),
    optional("on_release_import"),
    optional("on_upgrade"),
    optional("on_download_failure"),
    optional("on_import_failure"),
    optional("on_health_issue"),
    optional("on_application_update"),
    optional("include_health_warnings"),
)

NOTIFICATION_EMAIL = VariantDescriptor(
    resource_name="notification_email",
    family=NOTIFICATION,
    implementation="Email",
    config_contract="EmailSettings",
    description=f"Notification Email resource. {WIKI}",
    attributes=(
        required("on_grab"),
        required("on_release_import"),
        required("on_upgrade"),
        required("on_download_failure"),
        required("on_import_failure"),
        required("on_health_issue"),
        required("on_application_update"),
        required("include_health_warnings"),
        optional("require_encryption"),
        optional("port"),
        required("server"),
        optional("username"),
        optional("password", sensitive=True),
        required("from_address"),
        required("to"),
        optional("cc"),
        optional("bcc"),
    ),
)

NOTIFICATION_GOTIFY = VariantDescriptor(
    resource_name="notification_gotify",
    family=NOTIFICATION,
    implementation="Gotify",
    config_contract="GotifySettings",
    description=f"Notification Gotify resource. {WIKI}",
    attributes=_EVENTS + (
        optional("on_album_delete"),
        optional("on_artist_delete"),
        optional("on_health_restored"),
        optional(
            "priority",
            one_of=(0, 2, 5, 8),
            description="Priority. `0` Min, `2` Low, `5` Normal, `8` High.",
        ),
        required("server"),
        required("app_token", sensitive=True),
    ),
)

NOTIFICATION_CUSTOM_SCRIPT = VariantDescriptor(
    resource_name="notification_custom_script",
    family=NOTIFICATION,
    implementation="CustomScript",
    config_contract="CustomScriptSettings",
    description=f"Notification Custom Script resource. {WIKI}",
    attributes=_EVENTS + (
        optional("on_rename"),
        optional("on_track_retag"),
        optional("on_health_restored"),
        required("path"),
        optional("arguments"),
    ),
)

NOTIFICATION_SUBSONIC = VariantDescriptor(
    resource_name="notification_subsonic",
    family=NOTIFICATION,
    implementation="Subsonic",
    config_contract="SubsonicSettings",
    description=f"Notification Subsonic resource. {WIKI}",
    attributes=(
        optional("on_grab"),
        optional("on_release_import"),
        optional("on_upgrade"),
        optional("on_rename"),
        optional("on_track_retag"),
        optional("on_health_issue"),
        optional("include_health_warnings"),
        optional("use_ssl"),
        optional("notify"),
        optional("update_library"),
        optional("port"),
        required("host"),
        optional("url_base"),
        optional("username"),
        optional("password", sensitive=True),
    ),
)

NOTIFICATION_DISCORD = VariantDescriptor(
    resource_name="notification_discord",
    family=NOTIFICATION,
    implementation="Discord",
    config_contract="DiscordSettings",
    description=f"Notification Discord resource. {WIKI}",
    attributes=_EVENTS + (
        optional("on_rename"),
        optional("on_track_retag"),
        required("web_hook_url", sensitive=True),
        optional("username"),
        optional("avatar"),
        optional("author"),
        optional(
            "grab_fields",
            description="Grab fields. `0` Overview, `1` Rating, `2` Genres, `3` Quality, `4` Group, "
                        "`5` Size, `6` Links, `7` Release, `8` Poster, `9` Fanart.",
        ),
        optional(
            "import_fields",
            description="Import fields. `0` Overview, `1` Rating, `2` Genres, `3` Quality, `4` Codecs, "
                        "`5` Group, `6` Size, `7` Languages, `8` Subtitles, `9` Links, `10` Release, "
                        "`11` Poster, `12` Fanart.",
        ),
    ),
)

NOTIFICATION_WEBHOOK = VariantDescriptor(
    resource_name="notification_webhook",
    family=NOTIFICATION,
    implementation="Webhook",
    config_contract="WebhookSettings",
    description=f"Notification Webhook resource. {WIKI}",
    attributes=_EVENTS + (
        optional("on_rename"),
        optional("on_track_retag"),
        required("url"),
        optional("method", one_of=(1, 2)),
        optional("username"),
        optional("password", sensitive=True),
    ),
)

NOTIFICATION_PUSHOVER = VariantDescriptor(
    resource_name="notification_pushover",
    family=NOTIFICATION,
    implementation="Pushover",
    config_contract="PushoverSettings",
    description=f"Notification Pushover resource. {WIKI}",
    attributes=_EVENTS + (
        optional(
            "priority",
            ge=-2,
            le=2,
            description="Priority. `-2` Silent, `-1` Quiet, `0` Normal, `1` High, `2` Emergency.",
        ),
        optional("retry", ge=30, description="Retry interval in seconds for emergency priority."),
        optional("expire", le=86400, description="Expire time in seconds for emergency priority."),
        required("api_key", sensitive=True),
        required("user_key", sensitive=True),
        optional("sound"),
        optional("devices"),
    ),
)

NOTIFICATION_TELEGRAM = VariantDescriptor(
    resource_name="notification_telegram",
    family=NOTIFICATION,
    implementation="Telegram",
    config_contract="TelegramSettings",
    description=f"Notification Telegram resource. {WIKI}",
    attributes=_EVENTS + (
        optional("on_track_retag"),
        required("bot_token", sensitive=True),
        required("chat_id"),
        optional("send_silently"),
    ),
)

NOTIFICATION_VARIANTS = (
    NOTIFICATION_EMAIL,
    NOTIFICATION_GOTIFY,
    NOTIFICATION_CUSTOM_SCRIPT,
    NOTIFICATION_SUBSONIC,
    NOTIFICATION_DISCORD,
    NOTIFICATION_WEBHOOK,
    NOTIFICATION_PUSHOVER,
    NOTIFICATION_TELEGRAM,
)
