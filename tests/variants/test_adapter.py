"""Tests for variant descriptors, adapters and the registry."""

import pytest
from arrconf.records import NOTIFICATION
from arrconf.utils.errors import InputValidationError
from arrconf.variants import (
    Mode,
    VariantDescriptor,
    adapter_for_implementation,
    get_adapter,
    list_kinds,
    superset_descriptor,
)
from arrconf.variants.descriptor import optional, required


class TestDeclare:
    """Validation of declared configuration."""

    def test_valid_declaration(self, gotify_values):
        typed = get_adapter("notification_gotify").declare(gotify_values)

        assert typed.name == "Gotify"
        assert typed.priority == 5
        assert typed.tags == {1, 2}
        assert typed.id is None

    def test_missing_required_attribute(self, gotify_values):
        del gotify_values["app_token"]
        with pytest.raises(InputValidationError, match="app_token"):
            get_adapter("notification_gotify").declare(gotify_values)

    def test_value_outside_enumeration(self, gotify_values):
        gotify_values["priority"] = 3
        with pytest.raises(InputValidationError, match="priority"):
            get_adapter("notification_gotify").declare(gotify_values)

    def test_value_outside_range(self):
        with pytest.raises(InputValidationError, match="priority"):
            get_adapter("notification_pushover").declare(
                {"name": "p", "api_key": "k", "user_key": "u", "priority": 3}
            )

    def test_unknown_attribute(self, gotify_values):
        gotify_values["host"] = "h"
        with pytest.raises(InputValidationError, match="host"):
            get_adapter("notification_gotify").declare(gotify_values)

    def test_wrong_type(self, gotify_values):
        gotify_values["on_grab"] = "sometimes"
        with pytest.raises(InputValidationError, match="on_grab"):
            get_adapter("notification_gotify").declare(gotify_values)

    def test_computed_attribute_cannot_be_set(self):
        with pytest.raises(InputValidationError, match="protocol"):
            get_adapter("indexer_newznab").declare({"name": "n", "base_url": "http://nzb", "protocol": "usenet"})

    @pytest.mark.parametrize("identity", ["id", "implementation", "config_contract"])
    def test_identity_cannot_be_set(self, gotify_values, identity):
        gotify_values[identity] = 1 if identity == "id" else "Other"
        with pytest.raises(InputValidationError, match=identity):
            get_adapter("notification_gotify").declare(gotify_values)


class TestReadWrite:
    """Typed record <-> wire record."""

    def test_read_forces_identity(self, gotify_values):
        adapter = get_adapter("notification_gotify")
        wire = adapter.read(adapter.declare(gotify_values))

        assert wire.implementation == "Gotify"
        assert wire.config_contract == "GotifySettings"
        assert wire.tags == [1, 2]
        assert wire.field_map() == {"priority": 5, "server": "http://gotify.local", "appToken": "Token123"}
        assert wire.properties == {"onGrab": True, "onReleaseImport": True, "includeHealthWarnings": False}

    def test_email_only_fields_absent(self, gotify_values):
        adapter = get_adapter("notification_gotify")
        fields = adapter.read(adapter.declare(gotify_values)).field_map()

        for email_field in ("from", "to", "cc", "bcc", "requireEncryption"):
            assert email_field not in fields

    def test_write_then_read(self, gotify_values):
        adapter = get_adapter("notification_gotify")
        typed = adapter.declare(gotify_values)

        assert adapter.write(adapter.read(typed)) == typed


class TestDescriptor:
    """Descriptor validation and schema."""

    def test_unknown_attribute_rejected(self):
        with pytest.raises(ValueError, match="not declared"):
            VariantDescriptor(
                resource_name="notification_bad",
                family=NOTIFICATION,
                implementation="Bad",
                attributes=(optional("seed_ratio"),),
            )

    def test_duplicate_attribute_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            VariantDescriptor(
                resource_name="notification_bad",
                family=NOTIFICATION,
                implementation="Bad",
                attributes=(optional("host"), required("host")),
            )

    def test_superset_descriptor_covers_family(self):
        descriptor = superset_descriptor(NOTIFICATION)
        assert set(descriptor.attribute_names) == set(NOTIFICATION.record_type.attribute_names())
        assert all(spec.mode == Mode.COMPUTED for spec in descriptor.attributes)

    def test_schema(self):
        schema = get_adapter("notification_gotify").schema()
        attributes = {attribute.name: attribute for attribute in schema.attributes}

        assert attributes["id"].mode == "computed"
        assert attributes["id"].preserve_prior
        assert attributes["tags"].preserve_prior
        assert attributes["server"].mode == "required"
        assert attributes["app_token"].sensitive
        assert attributes["priority"].one_of == [0, 2, 5, 8]


class TestRegistry:
    """Lookup of adapters by kind and implementation."""

    def test_unknown_kind(self):
        with pytest.raises(InputValidationError, match="Unknown resource kind"):
            get_adapter("notification_carrier_pigeon")

    def test_list_kinds_by_family(self):
        kinds = list_kinds("download_client")
        assert kinds == sorted(kinds)
        assert "download_client_transmission" in kinds
        assert all(kind.startswith("download_client_") for kind in kinds)

    def test_conditions_are_not_declarable(self):
        assert not [kind for kind in list_kinds() if kind.startswith("condition_")]

    def test_adapter_for_implementation(self):
        adapter = adapter_for_implementation(NOTIFICATION, "Telegram")
        assert adapter.resource_name == "notification_telegram"
        assert adapter_for_implementation(NOTIFICATION, "Nope") is None
