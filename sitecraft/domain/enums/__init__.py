"""Domain enums package."""

from sitecraft.domain.enums.action_type import ActionType
from sitecraft.domain.enums.component_type import ComponentType
from sitecraft.domain.enums.project_status import ProjectStatus

__all__ = ["ActionType", "ComponentType", "ProjectStatus"]
