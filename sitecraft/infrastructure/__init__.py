"""Infrastructure adapters (logging, domain event dispatch)."""
