"""
Resource card renderer - Catalog listing display.

Provides:
- Resource card rendering (title, difficulty, tags, category, link)
- Resource grid for the listing page
- Category options for the listing filter
"""

import html

from learntrack.schemas import Resource, ResourceCategory, DifficultyLevel
from learntrack.tracker import ALL_CATEGORIES


DIFFICULTY_COLORS = {
    DifficultyLevel.BEGINNER: ("#e8f5e9", "#2e7d32"),
    DifficultyLevel.INTERMEDIATE: ("#fff8e1", "#f57f17"),
    DifficultyLevel.ADVANCED: ("#ffebee", "#c62828"),
}


def get_resource_css() -> str:
    """Get CSS styles for resource cards."""
    return """
    <style>
    .resource-grid {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
        gap: 1.2em;
        padding: 0.5em 0;
    }
    .resource-card {
        background: white;
        border: 1px solid #e0e0e0;
        border-radius: 10px;
        padding: 1.3em;
        transition: box-shadow 0.2s;
    }
    .resource-card:hover {
        box-shadow: 0 4px 10px rgba(0,0,0,0.1);
    }
    .resource-header {
        display: flex;
        justify-content: space-between;
        align-items: flex-start;
        gap: 0.5em;
        margin-bottom: 0.6em;
    }
    .resource-title {
        font-size: 1.1em;
        font-weight: 600;
        color: #212121;
    }
    .resource-difficulty {
        padding: 0.2em 0.6em;
        border-radius: 999px;
        font-size: 0.75em;
        white-space: nowrap;
    }
    .resource-description {
        color: #616161;
        font-size: 0.9em;
        margin-bottom: 0.9em;
        line-height: 1.5;
    }
    .resource-tags {
        display: flex;
        flex-wrap: wrap;
        gap: 0.4em;
        margin-bottom: 0.9em;
    }
    .resource-tag {
        background: #e3f2fd;
        color: #1565C0;
        font-size: 0.75em;
        padding: 0.2em 0.5em;
        border-radius: 4px;
    }
    .resource-footer {
        display: flex;
        justify-content: space-between;
        align-items: center;
    }
    .resource-category {
        font-size: 0.8em;
        color: #9e9e9e;
        text-transform: capitalize;
    }
    .resource-link {
        color: #1976D2;
        font-size: 0.9em;
        font-weight: 500;
        text-decoration: none;
    }
    .resource-link:hover {
        text-decoration: underline;
    }
    </style>
    """


def category_options() -> list[str]:
    """Select box values for the listing filter: "all" then every category."""
    return [ALL_CATEGORIES] + [c.value for c in ResourceCategory]


def format_category_option(value: str) -> str:
    if value == ALL_CATEGORIES:
        return "All Categories"
    return value.title()


def render_resource_card(resource: Resource) -> str:
    """
    Render a catalog resource card.

    Args:
        resource: Resource to display

    Returns:
        HTML string for the card
    """
    background, color = DIFFICULTY_COLORS[resource.difficulty]
    parts = ['<div class="resource-card">']

    parts.append('<div class="resource-header">')
    parts.append(f'<span class="resource-title">{html.escape(resource.title)}</span>')
    parts.append(
        f'<span class="resource-difficulty" style="background:{background};color:{color};">'
        f'{resource.difficulty.value}</span>'
    )
    parts.append('</div>')

    parts.append(f'<div class="resource-description">{html.escape(resource.description)}</div>')

    if resource.tags:
        parts.append('<div class="resource-tags">')
        for tag in resource.tags:
            parts.append(f'<span class="resource-tag">{html.escape(tag)}</span>')
        parts.append('</div>')

    parts.append('<div class="resource-footer">')
    parts.append(f'<span class="resource-category">{resource.category.value}</span>')
    parts.append(
        f'<a class="resource-link" href="{html.escape(resource.url)}" '
        f'target="_blank" rel="noopener noreferrer">View Resource →</a>'
    )
    parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_resource_grid(resources: list[Resource]) -> str:
    """Render the catalog listing as a grid of cards."""
    if not resources:
        return '<p style="color:#666;">No resources in this category yet.</p>'

    parts = ['<div class="resource-grid">']
    for resource in resources:
        parts.append(render_resource_card(resource))
    parts.append('</div>')
    return ''.join(parts)
