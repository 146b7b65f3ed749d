"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values. The application boundary only exposes the message, so
codes are for in-process branching, logging and tests.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authorization errors (PERMISSION_*, RESOURCE_NOT_OWNED)
- Aggregate invariant violations
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_COMPONENT_TYPE = "invalid_component_type"
    INVALID_PROPERTY_NAME = "invalid_property_name"
    INVALID_PROPERTY_VALUE = "invalid_property_value"
    INVALID_PAGE_NAME = "invalid_page_name"
    INVALID_PAGE_PATH = "invalid_page_path"
    INVALID_PAGE_LAYOUT = "invalid_page_layout"
    INVALID_PROJECT_NAME = "invalid_project_name"
    INVALID_THEME_CONFIG = "invalid_theme_config"
    INVALID_NAVIGATION_CONFIG = "invalid_navigation_config"
    INVALID_EMAIL = "invalid_email"
    INVALID_USERNAME = "invalid_username"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    PROJECT_NOT_FOUND = "project_not_found"
    PAGE_NOT_FOUND = "page_not_found"
    COMPONENT_NOT_FOUND = "component_not_found"

    # Conflict errors
    PROJECT_NAME_ALREADY_EXISTS = "project_name_already_exists"
    PAGE_NAME_ALREADY_EXISTS = "page_name_already_exists"
    PAGE_PATH_ALREADY_EXISTS = "page_path_already_exists"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Aggregate invariant violations
    PAGE_HAS_NO_COMPONENTS = "page_has_no_components"
    PROJECT_HAS_NO_PAGES = "project_has_no_pages"
    PROJECT_HAS_NO_PUBLISHED_PAGES = "project_has_no_published_pages"
    COMPONENT_ORDER_MISMATCH = "component_order_mismatch"
