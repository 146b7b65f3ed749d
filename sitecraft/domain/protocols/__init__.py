"""Domain protocols (ports).

Structural interfaces implemented by infrastructure adapters.
"""

from sitecraft.domain.protocols.event_dispatcher_protocol import (
    DomainEventDispatcher,
    EventHandler,
)
from sitecraft.domain.protocols.logger_protocol import LoggerProtocol
from sitecraft.domain.protocols.page_repository import PageRepository
from sitecraft.domain.protocols.project_repository import ProjectRepository
from sitecraft.domain.protocols.user_repository import UserRepository

__all__ = [
    "DomainEventDispatcher",
    "EventHandler",
    "LoggerProtocol",
    "PageRepository",
    "ProjectRepository",
    "UserRepository",
]
