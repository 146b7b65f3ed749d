"""Domain entities package."""

from sitecraft.domain.entities.component import Component
from sitecraft.domain.entities.page import Page
from sitecraft.domain.entities.project import Project
from sitecraft.domain.entities.user import User

__all__ = ["Component", "Page", "Project", "User"]
