"""PageLayout value object.

Page-level layout knobs: maximum content width, padding and spacing between
components. Converts itself to CSS values for rendering.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Literal

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.validators.functions import is_number

MIN_MAX_WIDTH = 320
MAX_MAX_WIDTH = 2560

PADDING_VALUES: dict[str, str] = {
    "none": "0",
    "small": "8px",
    "medium": "16px",
    "large": "24px",
}
SPACING_VALUES: dict[str, str] = {
    "compact": "8px",
    "normal": "16px",
    "loose": "24px",
}

type MaxWidth = int | float | Literal["full"]


@dataclass(frozen=True)
class PageLayout:
    """Immutable page layout.

    Attributes:
        max_width: Width in pixels within [320, 2560], or "full".
        padding: One of none, small, medium, large.
        spacing: One of compact, normal, loose.

    Raises:
        InvalidValueError: INVALID_PAGE_LAYOUT if any field is out of range.

    Example:
        >>> PageLayout(max_width="full").get_max_width_value()
        '100%'
        >>> PageLayout(max_width=100)
        Traceback (most recent call last):
        ...
        InvalidValueError: Page max width cannot be less than 320px
    """

    max_width: MaxWidth = 1200
    padding: str = "medium"
    spacing: str = "normal"

    def __post_init__(self) -> None:
        """Validate all fields."""
        self._validate_max_width(self.max_width)
        if self.padding not in PADDING_VALUES:
            raise InvalidValueError(
                "Page padding must be one of: none, small, medium, large",
                code=ErrorCode.INVALID_PAGE_LAYOUT,
                field="padding",
            )
        if self.spacing not in SPACING_VALUES:
            raise InvalidValueError(
                "Page spacing must be one of: compact, normal, loose",
                code=ErrorCode.INVALID_PAGE_LAYOUT,
                field="spacing",
            )

    @staticmethod
    def _validate_max_width(max_width: Any) -> None:
        if max_width == "full":
            return
        if not is_number(max_width) or max_width <= 0:
            raise InvalidValueError(
                'Page max width must be a positive number or "full"',
                code=ErrorCode.INVALID_PAGE_LAYOUT,
                field="max_width",
            )
        if max_width < MIN_MAX_WIDTH:
            raise InvalidValueError(
                f"Page max width cannot be less than {MIN_MAX_WIDTH}px",
                code=ErrorCode.INVALID_PAGE_LAYOUT,
                field="max_width",
            )
        if max_width > MAX_MAX_WIDTH:
            raise InvalidValueError(
                f"Page max width cannot be greater than {MAX_MAX_WIDTH}px",
                code=ErrorCode.INVALID_PAGE_LAYOUT,
                field="max_width",
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PageLayout":
        """Build from a camelCase mapping; missing keys take defaults.

        Raises:
            InvalidValueError: If a supplied value is invalid.
        """
        if not data:
            return cls()
        defaults = cls()
        return cls(
            max_width=data.get("maxWidth") or defaults.max_width,
            padding=data.get("padding") or defaults.padding,
            spacing=data.get("spacing") or defaults.spacing,
        )

    def with_max_width(self, max_width: MaxWidth) -> "PageLayout":
        return replace(self, max_width=max_width)

    def with_padding(self, padding: str) -> "PageLayout":
        return replace(self, padding=padding)

    def with_spacing(self, spacing: str) -> "PageLayout":
        return replace(self, spacing=spacing)

    def get_max_width_value(self) -> str:
        """CSS max-width value ("100%" or "<n>px")."""
        if self.max_width == "full":
            return "100%"
        return f"{self.max_width}px"

    def get_padding_value(self) -> str:
        return PADDING_VALUES[self.padding]

    def get_spacing_value(self) -> str:
        return SPACING_VALUES[self.spacing]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted camelCase shape."""
        return {
            "maxWidth": self.max_width,
            "padding": self.padding,
            "spacing": self.spacing,
        }

    def to_css_object(self) -> dict[str, str]:
        """CSS style object used by the renderer."""
        return {
            "maxWidth": self.get_max_width_value(),
            "padding": self.get_padding_value(),
            "gap": self.get_spacing_value(),
        }
