"""
Profile renderer - Dashboard profile panel.

Fields are rendered verbatim and only when present.
"""

import html

from learntrack.schemas import Profile


def render_chips(items: list[str], background: str, color: str) -> str:
    chips = [
        f'<span style="background:{background};color:{color};padding:0.2em 0.7em;'
        f'border-radius:999px;font-size:0.8em;margin:0.2em;display:inline-block;">'
        f'{html.escape(item)}</span>'
        for item in items
    ]
    return ''.join(chips)


def render_profile(profile: Profile) -> str:
    """
    Render the profile panel.

    Args:
        profile: Profile row (any field may be missing)

    Returns:
        HTML string for the panel
    """
    rows = []
    if profile.username:
        rows.append(("Username", f"@{profile.username}"))
    if profile.email:
        rows.append(("Email", profile.email))
    if profile.experience_level:
        rows.append(("Experience Level", profile.experience_level.value.title()))
    if profile.created_at:
        rows.append(("Joined", f"{profile.created_at:%Y-%m-%d}"))

    parts = ['<div class="profile-panel">']
    for label, value in rows:
        parts.append(f'<div><strong>{label}:</strong> {html.escape(value)}</div>')

    if profile.bio:
        parts.append('<div style="margin-top:1em;"><strong>Bio:</strong>')
        parts.append(f'<p>{html.escape(profile.bio)}</p></div>')

    if profile.learning_goals:
        parts.append('<div style="margin-top:1em;"><strong>Learning Goals:</strong><div>')
        parts.append(render_chips(profile.learning_goals, "#e3f2fd", "#1565C0"))
        parts.append('</div></div>')

    if profile.ai_tools_used:
        parts.append('<div style="margin-top:1em;"><strong>AI Tools Used:</strong><div>')
        parts.append(render_chips(profile.ai_tools_used, "#e8f5e9", "#2e7d32"))
        parts.append('</div></div>')

    parts.append('</div>')
    return ''.join(parts)
