"""Project domain errors.

Message constants for project operations, used in DomainError values.
"""


class ProjectError:
    """Project error constants.

    Error Categories:
        - Validation errors: name
        - Page collection errors: duplicates, not found
        - State errors: publish preconditions
        - Application errors: not found, ownership, conflicts
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    NAME_REQUIRED = "Project name cannot be empty"
    NAME_TOO_LONG = "Project name cannot exceed 100 characters"

    # -------------------------------------------------------------------------
    # Page Collection Errors
    # -------------------------------------------------------------------------

    PAGE_PATH_ALREADY_EXISTS = "Page path already exists"
    PAGE_NOT_FOUND = "Page not found"

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    NO_PAGES = "Project must contain at least one page to be published"
    NO_PUBLISHED_PAGES = "Project must contain at least one published page"

    # -------------------------------------------------------------------------
    # Application Errors
    # -------------------------------------------------------------------------

    PROJECT_NOT_FOUND = "Project not found"
    ACCESS_DENIED = "You do not have access to this project"
    NAME_ALREADY_EXISTS = "Project name already exists"
    USER_NOT_FOUND = "User not found"
