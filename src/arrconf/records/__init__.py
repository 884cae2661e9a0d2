"""Generic resource records and the resource families they belong to."""

from .base import AttributeType, GenericRecord, ResourceFamily, IDENTITY_ATTRIBUTES, camel_case
from .notification import NotificationRecord
from .indexer import IndexerRecord
from .download_client import DownloadClientRecord
from .custom_format import ConditionRecord, CustomFormat, FormatCondition

NOTIFICATION = ResourceFamily(name="notification", endpoint="notification", record_type=NotificationRecord)
INDEXER = ResourceFamily(name="indexer", endpoint="indexer", record_type=IndexerRecord)
DOWNLOAD_CLIENT = ResourceFamily(name="download_client", endpoint="downloadclient", record_type=DownloadClientRecord)
# Conditions live inside a custom format and have no endpoint of their own.
CONDITION = ResourceFamily(name="condition", endpoint="", record_type=ConditionRecord)

FAMILIES = {family.name: family for family in (NOTIFICATION, INDEXER, DOWNLOAD_CLIENT)}

__all__ = [
    "AttributeType",
    "GenericRecord",
    "ResourceFamily",
    "IDENTITY_ATTRIBUTES",
    "camel_case",
    "NotificationRecord",
    "IndexerRecord",
    "DownloadClientRecord",
    "ConditionRecord",
    "CustomFormat",
    "FormatCondition",
    "NOTIFICATION",
    "INDEXER",
    "DOWNLOAD_CLIENT",
    "CONDITION",
    "FAMILIES",
]
