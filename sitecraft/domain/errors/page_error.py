"""Page domain errors.

Message constants for page and component operations. These are NOT
exceptions: they are human-readable strings placed in DomainError values and
surfaced verbatim by application handlers.

Usage:
    from sitecraft.domain.errors import PageError

    return Failure(
        error=DomainError(
            code=ErrorCode.PAGE_HAS_NO_COMPONENTS,
            message=PageError.NO_COMPONENTS_TO_PUBLISH,
        )
    )
"""


class PageError:
    """Page error constants.

    Error Categories:
        - Validation errors: name, path
        - Component errors: not found, reorder mismatch
        - State errors: publish preconditions
        - Application errors: not found, conflicts
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    NAME_REQUIRED = "Page name cannot be empty"
    NAME_TOO_LONG = "Page name cannot exceed 100 characters"
    PATH_REQUIRED = "Page path cannot be empty"
    PATH_MUST_START_WITH_SLASH = "Page path must start with '/'"
    PATH_TOO_LONG = "Page path cannot exceed 200 characters"

    # -------------------------------------------------------------------------
    # Component Errors
    # -------------------------------------------------------------------------

    COMPONENT_NOT_FOUND = "Component not found"
    REORDER_COUNT_MISMATCH = "Component count does not match"
    REORDER_DUPLICATE_IDS = "Component order contains duplicate ids"
    REORDER_MISSING_IDS = "Missing component ids"
    """Followed by ': <comma separated ids>'."""

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    NO_COMPONENTS_TO_PUBLISH = "Page must contain at least one component to be published"

    # -------------------------------------------------------------------------
    # Application Errors
    # -------------------------------------------------------------------------

    PAGE_NOT_FOUND = "Page not found"
    ACCESS_DENIED = "You do not have access to this page"
    PATH_ALREADY_EXISTS = "Page path already exists in this project"
    NAME_ALREADY_EXISTS = "Page name already exists in this project"
    PAGES_NOT_IN_PROJECT = "Some pages do not belong to this project"
