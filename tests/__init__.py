"""Test suite for Sitecraft.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- integration/: Integration tests - handlers, dispatcher and logging wired together
- utils/: In-memory repository adapters shared by both
"""
