"""Domain event publication helpers for command handlers."""

from sitecraft.application.events.publisher import publish_domain_events

__all__ = ["publish_domain_events"]
