"""Tests for custom formats and their polymorphic conditions."""

import pytest
from arrconf.lifecycle import CustomFormatLifecycle, lifecycle_for
from arrconf.utils.errors import InputValidationError


@pytest.fixture
def custom_formats(fake_client):
    return lifecycle_for("custom_format", fake_client)


@pytest.fixture
def format_values():
    return {
        "name": "Preferred",
        "include_custom_format_when_renaming": True,
        "specifications": [
            {"name": "flac", "implementation": "ReleaseTitleSpecification", "value": "\\bFLAC\\b"},
            {"name": "size", "implementation": "SizeSpecification", "negate": True, "min": 1, "max": 20},
        ],
    }


class TestDeclare:
    """Validation of conditions through their variants."""

    def test_defaults_filled(self, custom_formats, format_values):
        typed = custom_formats.declare(format_values)

        flac = typed.specifications[0]
        assert flac.negate is False
        assert flac.required is False
        assert typed.specifications[1].negate is True

    def test_conditions_in_canonical_order(self, custom_formats, format_values):
        format_values["specifications"].reverse()
        typed = custom_formats.declare(format_values)

        assert [c.name for c in typed.specifications] == ["flac", "size"]

    def test_unknown_condition_implementation(self, custom_formats, format_values):
        format_values["specifications"][0]["implementation"] = "TeleportSpecification"
        with pytest.raises(InputValidationError, match="TeleportSpecification"):
            custom_formats.declare(format_values)

    def test_condition_missing_required(self, custom_formats, format_values):
        del format_values["specifications"][1]["max"]
        with pytest.raises(InputValidationError, match="max"):
            custom_formats.declare(format_values)

    def test_condition_attribute_of_other_variant(self, custom_formats, format_values):
        format_values["specifications"][0]["min"] = 3
        with pytest.raises(InputValidationError, match="min"):
            custom_formats.declare(format_values)

    def test_id_cannot_be_set(self, custom_formats, format_values):
        format_values["id"] = 4
        with pytest.raises(InputValidationError, match="id"):
            custom_formats.declare(format_values)


class TestPayload:
    """Custom format JSON shape."""

    def test_conditions_encoded_through_codec(self, custom_formats, format_values):
        payload = custom_formats.to_payload(custom_formats.declare(format_values))

        assert payload["includeCustomFormatWhenRenaming"] is True
        flac, size = payload["specifications"]
        assert flac == {
            "name": "flac",
            "implementation": "ReleaseTitleSpecification",
            "negate": False,
            "required": False,
            "fields": [{"name": "value", "value": "\\bFLAC\\b"}],
        }
        assert size["fields"] == [{"name": "min", "value": 1}, {"name": "max", "value": 20}]
        assert "tags" not in flac

    def test_unknown_condition_on_read_falls_back(self, custom_formats):
        typed = custom_formats.from_payload({
            "id": 5,
            "name": "cf",
            "specifications": [{
                "name": "lang",
                "implementation": "LanguageSpecification",
                "negate": False,
                "required": True,
                "fields": [{"name": "value", "value": "en"}],
            }],
        })

        condition = typed.specifications[0]
        assert condition.implementation == "LanguageSpecification"
        assert condition.required is True
        assert condition.value == "en"


class TestLifecycle:
    """Create, read, update, delete."""

    def test_plan_stability(self, custom_formats, format_values, fake_client):
        typed = custom_formats.declare(format_values)
        created = custom_formats.create(typed)

        assert created.id == 1
        assert fake_client.calls[0] == ("create", "customformat", None)
        assert custom_formats.read(created.id) == created
        assert custom_formats.diff(typed, created) == []

    def test_server_condition_order_is_not_a_change(self, custom_formats, format_values, fake_client):
        typed = custom_formats.declare(format_values)
        created = custom_formats.create(typed)
        fake_client.store["customformat"][created.id]["specifications"].reverse()

        current = custom_formats.read(created.id)
        assert current == created
        assert custom_formats.diff(custom_formats.fill_unknown(typed, current), current) == []

    def test_update_changes_conditions(self, custom_formats, format_values):
        created = custom_formats.create(custom_formats.declare(format_values))
        format_values["specifications"] = format_values["specifications"][:1]

        updated = custom_formats.update(custom_formats.declare(format_values), prior=created)

        assert updated.id == created.id
        assert [c.name for c in updated.specifications] == ["flac"]
        assert updated.include_custom_format_when_renaming is True

    def test_delete_idempotent(self, custom_formats, format_values):
        created = custom_formats.create(custom_formats.declare(format_values))
        custom_formats.delete(created)
        custom_formats.delete(created)

    def test_kind(self):
        assert CustomFormatLifecycle.kind == "custom_format"
