"""Sitecraft - low-code website builder core.

Layers:
- core/: shared kernel (Result types, error values, config, container)
- domain/: aggregates, value objects, events and ports
- application/: command and query handlers orchestrating the domain
- infrastructure/: adapters (event dispatcher, logging)
"""

__version__ = "0.1.0"
