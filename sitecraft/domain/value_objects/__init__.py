"""Domain value objects package."""

from sitecraft.domain.value_objects.component_props import ComponentProps
from sitecraft.domain.value_objects.email import Email
from sitecraft.domain.value_objects.navigation_config import MenuItem, NavigationConfig
from sitecraft.domain.value_objects.page_layout import PageLayout
from sitecraft.domain.value_objects.project_config import ProjectConfig
from sitecraft.domain.value_objects.theme_config import ThemeConfig

__all__ = [
    "ComponentProps",
    "Email",
    "MenuItem",
    "NavigationConfig",
    "PageLayout",
    "ProjectConfig",
    "ThemeConfig",
]
