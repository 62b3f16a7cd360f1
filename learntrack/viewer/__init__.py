"""
Learning tracker viewer - Rendering components for the Streamlit pages.

This module provides:
- Resource card and grid rendering for the catalog listing
- Progress card and statistics rendering
- Profile panel rendering for the dashboard
"""

from .resources import (
    get_resource_css,
    category_options,
    format_category_option,
    render_resource_card,
    render_resource_grid,
    DIFFICULTY_COLORS,
)

from .progress import (
    get_progress_css,
    format_duration,
    join_cards,
    render_stats,
    render_progress_card,
    STATUS_COLORS,
)

from .profile import (
    render_chips,
    render_profile,
)

__all__ = [
    # Resources
    "get_resource_css",
    "category_options",
    "format_category_option",
    "render_resource_card",
    "render_resource_grid",
    "DIFFICULTY_COLORS",
    # Progress
    "get_progress_css",
    "format_duration",
    "join_cards",
    "render_stats",
    "render_progress_card",
    "STATUS_COLORS",
    # Profile
    "render_chips",
    "render_profile",
]
