"""Unit tests for the ComponentProps value object.

Tests cover:
- create(): validation over defaults
- try_validate(): Result form naming the offending property
- update(): merge semantics and atomicity
- Immutability of the wrapped mapping
- is_valid() re-validation of trusted (unvalidated) data
"""

import pytest

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import ValidationError
from sitecraft.core.result import Failure, Success
from sitecraft.domain.enums import ComponentType
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.value_objects import ComponentProps


@pytest.mark.unit
class TestComponentPropsCreate:
    def test_create_applies_defaults(self):
        props = ComponentProps.create("Text", {"content": "Hello"})

        assert props.component_type is ComponentType.TEXT
        assert props.to_dict() == {
            "content": "Hello",
            "size": "medium",
            "color": "default",
            "align": "left",
        }

    def test_create_without_props_gives_defaults(self):
        props = ComponentProps.create(ComponentType.DIVIDER)

        assert props.values == {"style": "solid", "spacing": "medium"}

    def test_create_rejects_unknown_key(self):
        with pytest.raises(InvalidValueError) as exc_info:
            ComponentProps.create("Image", {"caption": "x"})

        assert exc_info.value.code == ErrorCode.INVALID_PROPERTY_NAME

    def test_try_validate_success(self):
        result = ComponentProps.try_validate("Container", {"border": True})

        assert isinstance(result, Success)
        assert result.value.get("border") is True

    def test_try_validate_failure_names_field(self):
        result = ComponentProps.try_validate("Text", {"color": "pink"})

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "color"
        assert result.error.code == ErrorCode.INVALID_PROPERTY_VALUE


@pytest.mark.unit
class TestComponentPropsUpdate:
    def test_update_merges_and_returns_new_instance(self):
        original = ComponentProps.create("Button", {"text": "Go"})

        updated = original.update({"size": "large"})

        assert updated.get("text") == "Go"
        assert updated.get("size") == "large"
        assert original.get("size") == "medium"

    def test_update_is_atomic(self):
        original = ComponentProps.create("Text", {"content": "Hello"})

        with pytest.raises(InvalidValueError):
            original.update({"content": "Changed", "size": "gigantic"})

        assert original.get("content") == "Hello"
        assert original.get("size") == "medium"

    def test_update_rejects_unknown_key(self):
        original = ComponentProps.create("Divider")

        with pytest.raises(InvalidValueError) as exc_info:
            original.update({"color": "red"})

        assert exc_info.value.code == ErrorCode.INVALID_PROPERTY_NAME


@pytest.mark.unit
class TestComponentPropsAccessors:
    def test_wrapped_mapping_is_read_only(self):
        props = ComponentProps.create("Text")

        with pytest.raises(TypeError):
            props.props["content"] = "x"  # type: ignore[index]

    def test_values_and_to_dict_return_copies(self):
        props = ComponentProps.create("Text")

        props.values["content"] = "changed"
        props.to_dict()["content"] = "changed"

        assert props.get("content") == "Text"

    def test_get_with_default(self):
        props = ComponentProps.create("Button")

        assert props.get("action", "none") == "none"

    def test_from_dict_skips_validation(self):
        props = ComponentProps.from_dict("Text", {"content": "", "legacy": 1})

        assert props.get("legacy") == 1
        assert props.is_valid() is False

    def test_is_valid_for_created_props(self):
        assert ComponentProps.create("Input").is_valid() is True

    def test_equality_by_value(self):
        assert ComponentProps.create("Text", {"content": "A"}) == ComponentProps.create(
            "Text", {"content": "A"}
        )
