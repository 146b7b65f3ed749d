"""Unit tests for the PageLayout value object.

Tests cover:
- Defaults and CSS projection
- max_width bounds (320-2560 px) and "full"
- padding/spacing enums
- from_dict() defaults and with_*() copies
"""

import pytest

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.value_objects import PageLayout


@pytest.mark.unit
class TestPageLayoutDefaults:
    def test_defaults(self):
        layout = PageLayout()

        assert layout.to_dict() == {"maxWidth": 1200, "padding": "medium", "spacing": "normal"}

    def test_css_object(self):
        layout = PageLayout(max_width=960, padding="large", spacing="compact")

        assert layout.to_css_object() == {"maxWidth": "960px", "padding": "24px", "gap": "8px"}

    def test_full_width_maps_to_percentage(self):
        layout = PageLayout(max_width="full")

        assert layout.get_max_width_value() == "100%"

    def test_padding_none_is_zero(self):
        assert PageLayout(padding="none").get_padding_value() == "0"


@pytest.mark.unit
class TestPageLayoutValidation:
    @pytest.mark.parametrize("max_width", [320, 2560, 1440.5])
    def test_max_width_within_bounds(self, max_width):
        assert PageLayout(max_width=max_width).max_width == max_width

    def test_max_width_below_minimum(self):
        with pytest.raises(InvalidValueError) as exc_info:
            PageLayout(max_width=100)

        assert exc_info.value.code == ErrorCode.INVALID_PAGE_LAYOUT
        assert exc_info.value.message == "Page max width cannot be less than 320px"

    def test_max_width_above_maximum(self):
        with pytest.raises(InvalidValueError) as exc_info:
            PageLayout(max_width=3000)

        assert exc_info.value.message == "Page max width cannot be greater than 2560px"

    @pytest.mark.parametrize("max_width", [0, -5, "wide", True, None])
    def test_max_width_not_positive_number(self, max_width):
        with pytest.raises(InvalidValueError) as exc_info:
            PageLayout(max_width=max_width)

        assert exc_info.value.message == 'Page max width must be a positive number or "full"'

    def test_invalid_padding(self):
        with pytest.raises(InvalidValueError) as exc_info:
            PageLayout(padding="huge")

        assert exc_info.value.field == "padding"

    def test_invalid_spacing(self):
        with pytest.raises(InvalidValueError) as exc_info:
            PageLayout(spacing="tight")

        assert exc_info.value.field == "spacing"


@pytest.mark.unit
class TestPageLayoutConstruction:
    def test_from_dict_fills_missing_keys(self):
        layout = PageLayout.from_dict({"maxWidth": "full"})

        assert layout == PageLayout(max_width="full", padding="medium", spacing="normal")

    def test_from_empty_dict(self):
        assert PageLayout.from_dict(None) == PageLayout()

    def test_from_dict_validates(self):
        with pytest.raises(InvalidValueError):
            PageLayout.from_dict({"maxWidth": 10})

    def test_with_max_width_returns_new_instance(self):
        layout = PageLayout()

        wider = layout.with_max_width(1920)

        assert wider.max_width == 1920
        assert layout.max_width == 1200

    def test_with_padding_validates(self):
        with pytest.raises(InvalidValueError):
            PageLayout().with_padding("xl")

    def test_with_spacing(self):
        assert PageLayout().with_spacing("loose").get_spacing_value() == "24px"
