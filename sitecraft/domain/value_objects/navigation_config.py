"""NavigationConfig value object.

Site header settings and the ordered menu. Menu edits return new instances
and re-validate the whole resulting list.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.validators.functions import (
    validate_boolean,
    validate_path,
    validate_required_string,
)

MAX_MENU_ITEMS = 10
MAX_LABEL_LENGTH = 20
MAX_HEADER_TITLE_LENGTH = 50
DEFAULT_HEADER_TITLE = "My Website"


@dataclass(frozen=True)
class MenuItem:
    """Single navigation menu entry.

    Attributes:
        label: Display text, 1-20 characters.
        path: Target path, must start with "/".
    """

    label: str
    path: str

    def __post_init__(self) -> None:
        """Validate label and path."""
        validate_required_string(
            self.label,
            field="label",
            max_length=MAX_LABEL_LENGTH,
            code=ErrorCode.INVALID_NAVIGATION_CONFIG,
            label="Menu item label",
        )
        validate_path(
            self.path,
            code=ErrorCode.INVALID_NAVIGATION_CONFIG,
            label="Menu item path",
        )

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "path": self.path}


def _coerce_items(items: Iterable[MenuItem | Mapping[str, Any]]) -> tuple[MenuItem, ...]:
    coerced = []
    for item in items:
        if isinstance(item, MenuItem):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(MenuItem(label=item.get("label"), path=item.get("path")))
        else:
            raise InvalidValueError(
                "Menu item must be an object with label and path",
                code=ErrorCode.INVALID_NAVIGATION_CONFIG,
                field="menu_items",
            )
    return tuple(coerced)


@dataclass(frozen=True)
class NavigationConfig:
    """Immutable navigation configuration.

    Attributes:
        show_header: Whether the site header is rendered.
        header_title: Header text, 1-50 characters.
        menu_items: Ordered menu, at most 10 items, paths unique.

    Raises:
        InvalidValueError: INVALID_NAVIGATION_CONFIG on any invalid field.
    """

    show_header: bool = True
    header_title: str = DEFAULT_HEADER_TITLE
    menu_items: tuple[MenuItem, ...] = ()

    def __post_init__(self) -> None:
        """Normalize menu items to a tuple of MenuItem and validate."""
        if isinstance(self.menu_items, (str, bytes)) or not isinstance(
            self.menu_items, Iterable
        ):
            raise InvalidValueError(
                "Menu items must be a list",
                code=ErrorCode.INVALID_NAVIGATION_CONFIG,
                field="menu_items",
            )
        object.__setattr__(self, "menu_items", _coerce_items(self.menu_items))
        validate_boolean(
            self.show_header, field="show_header", code=ErrorCode.INVALID_NAVIGATION_CONFIG
        )
        validate_required_string(
            self.header_title,
            field="header_title",
            max_length=MAX_HEADER_TITLE_LENGTH,
            code=ErrorCode.INVALID_NAVIGATION_CONFIG,
            label="Header title",
        )
        if len(self.menu_items) > MAX_MENU_ITEMS:
            raise InvalidValueError(
                f"Navigation cannot have more than {MAX_MENU_ITEMS} menu items",
                code=ErrorCode.INVALID_NAVIGATION_CONFIG,
                field="menu_items",
            )
        paths = [item.path for item in self.menu_items]
        if len(paths) != len(set(paths)):
            raise InvalidValueError(
                "Menu item paths must be unique",
                code=ErrorCode.INVALID_NAVIGATION_CONFIG,
                field="menu_items",
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "NavigationConfig | None":
        """Build from a camelCase mapping. Returns None when data is empty."""
        if not data:
            return None
        show_header = data.get("showHeader")
        return cls(
            show_header=True if show_header is None else show_header,
            header_title=data.get("headerTitle") or DEFAULT_HEADER_TITLE,
            menu_items=data.get("menuItems") or (),
        )

    def add_menu_item(self, label: str, path: str) -> "NavigationConfig":
        return replace(self, menu_items=(*self.menu_items, MenuItem(label=label, path=path)))

    def remove_menu_item(self, path: str) -> "NavigationConfig":
        return replace(
            self, menu_items=tuple(item for item in self.menu_items if item.path != path)
        )

    def update_menu_item(
        self, old_path: str, new_label: str, new_path: str
    ) -> "NavigationConfig":
        """Replace the item at old_path; no-op copy if old_path is absent."""
        items = tuple(
            MenuItem(label=new_label, path=new_path) if item.path == old_path else item
            for item in self.menu_items
        )
        return replace(self, menu_items=items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "showHeader": self.show_header,
            "headerTitle": self.header_title,
            "menuItems": [item.to_dict() for item in self.menu_items],
        }
