"""Domain layer: entities, value objects, events and protocols.

Pure business logic. Nothing in this package imports from application or
infrastructure.
"""
