"""ThemeConfig value object.

Project-wide presentation settings: primary color, base font size and font
family.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.validators.functions import validate_choice, validate_hex_color

FONT_SIZE_VALUES: dict[str, str] = {
    "small": "12px",
    "medium": "14px",
    "large": "16px",
}
FONT_FAMILY_VALUES: dict[str, str] = {
    "default": (
        '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
        '"Helvetica Neue", Arial, sans-serif'
    ),
    "serif": "serif",
    "monospace": "monospace",
}


@dataclass(frozen=True)
class ThemeConfig:
    """Immutable theme configuration.

    Attributes:
        primary_color: Hex color, 3 or 6 digits (e.g. "#1890ff").
        font_size: One of small, medium, large.
        font_family: One of default, serif, monospace.

    Raises:
        InvalidValueError: INVALID_THEME_CONFIG on any invalid field.
    """

    primary_color: str = "#1890ff"
    font_size: str = "medium"
    font_family: str = "default"

    def __post_init__(self) -> None:
        """Validate all fields."""
        validate_hex_color(self.primary_color)
        validate_choice(
            self.font_size,
            field="font_size",
            choices=tuple(FONT_SIZE_VALUES),
            code=ErrorCode.INVALID_THEME_CONFIG,
        )
        validate_choice(
            self.font_family,
            field="font_family",
            choices=tuple(FONT_FAMILY_VALUES),
            code=ErrorCode.INVALID_THEME_CONFIG,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ThemeConfig":
        """Build from a camelCase mapping; missing keys take defaults."""
        if not data:
            return cls()
        defaults = cls()
        return cls(
            primary_color=data.get("primaryColor") or defaults.primary_color,
            font_size=data.get("fontSize") or defaults.font_size,
            font_family=data.get("fontFamily") or defaults.font_family,
        )

    def with_primary_color(self, color: str) -> "ThemeConfig":
        return replace(self, primary_color=color)

    def with_font_size(self, font_size: str) -> "ThemeConfig":
        return replace(self, font_size=font_size)

    def with_font_family(self, font_family: str) -> "ThemeConfig":
        return replace(self, font_family=font_family)

    def get_font_size_value(self) -> str:
        return FONT_SIZE_VALUES[self.font_size]

    def get_font_family_value(self) -> str:
        return FONT_FAMILY_VALUES[self.font_family]

    def to_dict(self) -> dict[str, str]:
        return {
            "primaryColor": self.primary_color,
            "fontSize": self.font_size,
            "fontFamily": self.font_family,
        }

    def to_css_variables(self) -> dict[str, str]:
        """CSS custom properties for the site stylesheet."""
        return {
            "--primary-color": self.primary_color,
            "--font-size": self.get_font_size_value(),
            "--font-family": self.get_font_family_value(),
        }
