"""
Page chrome rules for the CVKing site.

Auth and dashboard pages render without the shared header and footer;
every other page gets both.
"""
from dataclasses import dataclass
from typing import Optional

AUTH_PREFIX = "/auth"
DASHBOARD_PREFIX = "/dashboard"
CHROMELESS_PREFIXES = (AUTH_PREFIX, DASHBOARD_PREFIX)

FULL_HEIGHT_CLASS = "min-h-screen"

# Sections of the home page, top to bottom
HOME_SECTIONS = (
    "hero",
    "job_categories",
    "featured_jobs",
    "featured_companies",
    "blog_preview",
    "sidebar",
)


@dataclass(frozen=True)
class LayoutVisibility:
    show_header: bool
    show_footer: bool
    main_class: str


def is_auth_page(path: Optional[str]) -> bool:
    return bool(path) and path.startswith(AUTH_PREFIX)


def is_dashboard_page(path: Optional[str]) -> bool:
    return bool(path) and path.startswith(DASHBOARD_PREFIX)


def resolve_layout(path: Optional[str]) -> LayoutVisibility:
    """
    Decide which chrome to render for a URL path.

    Plain string prefix match: "/authors" counts as an auth page.
    A missing path shows the header and footer.
    """
    auth = is_auth_page(path)
    chrome = not (path and path.startswith(CHROMELESS_PREFIXES))
    return LayoutVisibility(
        show_header=chrome,
        show_footer=chrome,
        main_class="" if auth else FULL_HEIGHT_CLASS,
    )
