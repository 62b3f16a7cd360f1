"""
Progress renderer - Progress cards and statistics display.

Provides:
- Read view of a progress card (status badge, bar, time, notes, link)
- Statistics tiles (completed, in progress, not started, time spent)
- Joining progress records to catalog resources for display
"""

import html

from learntrack.schemas import ProgressStatus, ProgressRecord, ProgressStats, Resource
from learntrack.tracker import ResourceCatalog, ProgressStore


STATUS_COLORS = {
    ProgressStatus.NOT_STARTED: ("#f5f5f5", "#424242"),
    ProgressStatus.IN_PROGRESS: ("#e3f2fd", "#1565C0"),
    ProgressStatus.COMPLETED: ("#e8f5e9", "#2e7d32"),
}


def get_progress_css() -> str:
    """Get CSS styles for progress display."""
    return """
    <style>
    .stats-grid {
        display: grid;
        grid-template-columns: repeat(4, 1fr);
        gap: 1em;
        margin-bottom: 1.5em;
    }
    .stats-tile {
        border-radius: 10px;
        padding: 1em;
    }
    .stats-value {
        font-size: 1.6em;
        font-weight: 700;
    }
    .stats-label {
        font-size: 0.85em;
    }
    .progress-card {
        background: white;
        border: 1px solid #e0e0e0;
        border-radius: 10px;
        padding: 1.3em;
        margin-bottom: 0.6em;
    }
    .progress-header {
        display: flex;
        justify-content: space-between;
        align-items: flex-start;
        gap: 0.5em;
        margin-bottom: 0.8em;
    }
    .progress-title {
        font-size: 1.1em;
        font-weight: 600;
        color: #212121;
    }
    .progress-description {
        color: #616161;
        font-size: 0.9em;
    }
    .progress-status {
        padding: 0.2em 0.6em;
        border-radius: 999px;
        font-size: 0.75em;
        white-space: nowrap;
    }
    .progress-bar-label {
        display: flex;
        justify-content: space-between;
        font-size: 0.85em;
        color: #424242;
        margin-bottom: 0.3em;
    }
    .progress-bar {
        background: #eeeeee;
        border-radius: 999px;
        height: 8px;
        margin-bottom: 0.8em;
    }
    .progress-bar-fill {
        background: #1976D2;
        border-radius: 999px;
        height: 8px;
    }
    .progress-meta {
        font-size: 0.85em;
        color: #757575;
        margin-bottom: 0.4em;
    }
    .progress-notes {
        font-size: 0.9em;
        color: #616161;
        font-style: italic;
        margin: 0.6em 0;
    }
    .progress-link {
        color: #1976D2;
        font-size: 0.9em;
        font-weight: 500;
        text-decoration: none;
    }
    </style>
    """


def format_duration(minutes: int) -> str:
    """Format minutes as "Xh Ym" (e.g. 180 -> "3h 0m")."""
    return f"{minutes // 60}h {minutes % 60}m"


def join_cards(
    catalog: ResourceCatalog,
    store: ProgressStore,
) -> list[tuple[Resource, ProgressRecord]]:
    """
    Pair each progress record with its catalog resource, in store order.

    Records whose resource is not in the catalog are skipped.
    """
    pairs = []
    for record in store:
        resource = catalog.get(record.resource_id)
        if resource is None:
            continue
        pairs.append((resource, record))
    return pairs


def render_stats(stats: ProgressStats) -> str:
    """Render the four statistics tiles."""
    tiles = [
        (stats.completed, "Completed", "#e8f5e9", "#2e7d32"),
        (stats.in_progress, "In Progress", "#e3f2fd", "#1565C0"),
        (stats.not_started, "Not Started", "#f5f5f5", "#424242"),
        (format_duration(stats.total_time_minutes), "Time Spent", "#f3e5f5", "#6a1b9a"),
    ]
    parts = ['<div class="stats-grid">']
    for value, label, background, color in tiles:
        parts.append(f'<div class="stats-tile" style="background:{background};color:{color};">')
        parts.append(f'<div class="stats-value">{value}</div>')
        parts.append(f'<div class="stats-label">{label}</div>')
        parts.append('</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_progress_card(
    resource: Resource,
    record: ProgressRecord,
    show_notes: bool = True,
) -> str:
    """
    Render the read view of a progress card.

    Args:
        resource: Catalog resource the record belongs to
        record: Current progress record
        show_notes: Whether to include notes and the resource link

    Returns:
        HTML string for the card
    """
    background, color = STATUS_COLORS[record.status]
    parts = ['<div class="progress-card">']

    parts.append('<div class="progress-header">')
    parts.append('<div>')
    parts.append(f'<div class="progress-title">{html.escape(resource.title)}</div>')
    parts.append(f'<div class="progress-description">{html.escape(resource.description)}</div>')
    parts.append('</div>')
    parts.append(
        f'<span class="progress-status" style="background:{background};color:{color};">'
        f'{record.status.value.replace("_", " ")}</span>'
    )
    parts.append('</div>')

    parts.append('<div class="progress-bar-label">')
    parts.append(f'<span>Progress</span><span>{record.progress_percent}%</span>')
    parts.append('</div>')
    parts.append('<div class="progress-bar">')
    parts.append(f'<div class="progress-bar-fill" style="width:{record.progress_percent}%;"></div>')
    parts.append('</div>')

    if record.time_spent_minutes:
        parts.append(f'<div class="progress-meta">Time spent: {format_duration(record.time_spent_minutes)}</div>')

    if record.completed_at:
        parts.append(f'<div class="progress-meta">Completed: {record.completed_at:%Y-%m-%d}</div>')

    if show_notes:
        if record.notes:
            parts.append(f'<div class="progress-notes">&ldquo;{html.escape(record.notes)}&rdquo;</div>')
        parts.append(
            f'<a class="progress-link" href="{html.escape(resource.url)}" '
            f'target="_blank" rel="noopener noreferrer">View Resource →</a>'
        )

    parts.append('</div>')
    return ''.join(parts)

