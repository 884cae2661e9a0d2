"""Tests for generic records and projections."""

import pytest
from pydantic import ValidationError
from arrconf.records import (
    DOWNLOAD_CLIENT,
    FAMILIES,
    INDEXER,
    NOTIFICATION,
    IndexerRecord,
    NotificationRecord,
    camel_case,
)
from arrconf.variants import get_adapter, list_kinds
from arrconf.variants.conditions import CONDITION_VARIANTS

ALL_KINDS = list_kinds() + [descriptor.resource_name for descriptor in CONDITION_VARIANTS]


class TestGenericRecord:
    """Superset record metadata."""

    def test_camel_case(self):
        assert camel_case("on_release_import") == "onReleaseImport"
        assert camel_case("host") == "host"

    def test_wire_name_default_and_override(self):
        assert NotificationRecord.wire_name("app_token") == "appToken"
        assert NotificationRecord.wire_name("from_address") == "from"

    def test_attribute_types(self):
        assert NotificationRecord.attribute_type("port").label == "int"
        assert NotificationRecord.attribute_type("to").label == "set of string"
        assert IndexerRecord.attribute_type("seed_ratio").label == "float"
        assert IndexerRecord.attribute_type("categories").label == "set of int"

    def test_unknown_attribute_type(self):
        with pytest.raises(KeyError):
            NotificationRecord.attribute_type("nope")

    def test_identity_attributes_excluded(self):
        names = NotificationRecord.attribute_names()
        assert "id" not in names
        assert "tags" not in names
        assert "on_grab" in names

    def test_extra_attributes_rejected(self):
        with pytest.raises(ValidationError):
            NotificationRecord(name="n", not_an_attribute=1)

    def test_families(self):
        assert set(FAMILIES) == {"notification", "indexer", "download_client"}
        assert DOWNLOAD_CLIENT.endpoint == "downloadclient"
        assert NOTIFICATION.record_type is NotificationRecord
        assert INDEXER.record_type is IndexerRecord


class TestProjection:
    """Typed variant <-> generic record."""

    def test_projection_identity(self, gotify_values):
        adapter = get_adapter("notification_gotify")
        typed = adapter.declare(gotify_values)

        generic = NotificationRecord.from_variant(typed)
        assert generic.to_variant(adapter.model) == typed

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_projection_identity_every_variant(self, kind, variant_values):
        adapter = get_adapter(kind)
        typed = adapter.model(id=11, name="sample", tags={1, 2}, **variant_values(adapter))

        generic = adapter.record_type.from_variant(typed)
        assert generic.to_variant(adapter.model) == typed

    def test_projection_leaves_other_attributes_absent(self, gotify_values):
        adapter = get_adapter("notification_gotify")
        generic = NotificationRecord.from_variant(adapter.declare(gotify_values))

        assert generic.server == "http://gotify.local"
        assert generic.port is None
        assert generic.to is None

    def test_to_variant_selects_subset(self):
        adapter = get_adapter("notification_gotify")
        generic = NotificationRecord(id=2, name="g", server="s", app_token="t", host="ignored")
        typed = generic.to_variant(adapter.model)

        assert typed.id == 2
        assert typed.server == "s"
        assert not hasattr(typed, "host")
