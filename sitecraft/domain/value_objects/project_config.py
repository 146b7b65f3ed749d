"""ProjectConfig value object: a theme plus optional navigation."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from sitecraft.domain.value_objects.navigation_config import NavigationConfig
from sitecraft.domain.value_objects.theme_config import ThemeConfig


@dataclass(frozen=True)
class ProjectConfig:
    """Immutable project configuration.

    Attributes:
        theme: Always present, defaulted.
        navigation: Optional navigation settings.
    """

    theme: ThemeConfig = field(default_factory=ThemeConfig)
    navigation: NavigationConfig | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ProjectConfig":
        """Build from the persisted shape {theme, navigation}.

        Raises:
            InvalidValueError: If a nested value is invalid.
        """
        if not data:
            return cls()
        return cls(
            theme=ThemeConfig.from_dict(data.get("theme")),
            navigation=NavigationConfig.from_dict(data.get("navigation")),
        )

    def with_theme(self, theme: ThemeConfig) -> "ProjectConfig":
        return replace(self, theme=theme)

    def with_navigation(self, navigation: NavigationConfig | None) -> "ProjectConfig":
        return replace(self, navigation=navigation)

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme.to_dict(),
            "navigation": self.navigation.to_dict() if self.navigation else None,
        }
