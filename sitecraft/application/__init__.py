"""Application layer - CQRS commands, queries and their handlers.

Handlers orchestrate aggregates and repositories. They return
Result[T, str]: domain failures surface as their human-readable message,
anything else (repository or programming errors) propagates.
"""
