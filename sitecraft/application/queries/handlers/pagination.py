"""Page/limit normalization for list queries."""

from sitecraft.core.config import Settings


def resolve_pagination(
    page: int | None, limit: int | None, settings: Settings
) -> tuple[int, int]:
    """Apply defaults and bounds to a requested page and limit.

    Args:
        page: Requested 1-based page; None or < 1 means 1.
        limit: Requested page size; None or < 1 means the default size.
        settings: Source of default_page_size and max_page_size.

    Returns:
        (page, limit) with limit capped at max_page_size.
    """
    resolved_page = page if page is not None and page >= 1 else 1
    resolved_limit = (
        limit if limit is not None and limit >= 1 else settings.default_page_size
    )
    return resolved_page, min(resolved_limit, settings.max_page_size)
