"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from sitecraft.core.container import get_logger, get_event_dispatcher

The container is organized into modules:
- infrastructure: Core services (logging)
- events: Domain event dispatcher and handler wiring

Repositories are ports without a bundled adapter; callers construct
application handlers with their own repository implementations plus the
logger and dispatcher from here.
"""

# Infrastructure services
from sitecraft.core.container.infrastructure import get_logger

# Domain events
from sitecraft.core.container.events import get_event_dispatcher

__all__ = [
    "get_logger",
    "get_event_dispatcher",
]
