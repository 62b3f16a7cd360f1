"""
Viewer rendering tests.
"""

from datetime import datetime

from learntrack.schemas import ProgressRecord, ProgressStats, Profile, Resource
from learntrack.tracker import ResourceCatalog, ProgressStore, ALL_CATEGORIES
from learntrack.viewer import (
    category_options,
    format_category_option,
    format_duration,
    join_cards,
    render_resource_card,
    render_resource_grid,
    render_progress_card,
    render_stats,
    render_profile,
)


class TestResourceRendering:
    """Test catalog cards."""

    def test_card_escapes_text(self):
        resource = Resource(
            id="x", title="<b>Bold</b>", description="a & b",
            url="https://example.com/?a=1&b=2", category="tool",
            tags=["<tag>"], difficulty="advanced",
        )
        html_out = render_resource_card(resource)
        assert "&lt;b&gt;Bold&lt;/b&gt;" in html_out
        assert "a &amp; b" in html_out
        assert "&lt;tag&gt;" in html_out
        assert "advanced" in html_out

    def test_grid_empty(self):
        assert "No resources" in render_resource_grid([])

    def test_grid_contains_each_card(self, catalog):
        html_out = render_resource_grid(catalog.all())
        assert html_out.count('class="resource-card"') == 3

    def test_category_options(self):
        options = category_options()
        assert options[0] == ALL_CATEGORIES
        assert len(options) == 10
        assert format_category_option(ALL_CATEGORIES) == "All Categories"
        assert format_category_option("video") == "Video"


class TestProgressRendering:
    """Test progress cards and stats tiles."""

    def test_format_duration(self):
        assert format_duration(0) == "0h 0m"
        assert format_duration(180) == "3h 0m"
        assert format_duration(125) == "2h 5m"

    def test_stats_tiles(self):
        html_out = render_stats(ProgressStats(completed=1, in_progress=1, not_started=1, total_time_minutes=300))
        assert "Completed" in html_out
        assert "5h 0m" in html_out

    def test_completed_card(self, catalog, store):
        html_out = render_progress_card(catalog.get("1"), store.get("1"))
        assert "completed" in html_out
        assert "100%" in html_out
        assert "Time spent: 2h 0m" in html_out
        assert "Completed: 2024-01-16" in html_out
        assert "Great introduction" in html_out

    def test_not_started_card_has_no_time(self, catalog, store):
        html_out = render_progress_card(catalog.get("3"), store.get("3"))
        assert "not started" in html_out
        assert "Time spent" not in html_out
        assert "Completed:" not in html_out

    def test_card_without_notes_section(self, catalog, store):
        html_out = render_progress_card(catalog.get("2"), store.get("2"), show_notes=False)
        assert "Halfway" not in html_out
        assert "View Resource" not in html_out

    def test_join_skips_unknown_resources(self, catalog):
        store = ProgressStore([
            ProgressRecord(resource_id="2", status="in_progress", progress_percent=10),
            ProgressRecord(resource_id="999", status="in_progress", progress_percent=10),
            ProgressRecord(
                resource_id="1", status="completed", progress_percent=100,
                completed_at=datetime(2024, 1, 16),
            ),
        ])
        pairs = join_cards(catalog, store)
        assert [resource.id for resource, _ in pairs] == ["2", "1"]

    def test_join_empty_catalog(self, store):
        assert join_cards(ResourceCatalog([]), store) == []


class TestProfileRendering:
    """Test the dashboard profile panel."""

    def test_full_profile(self):
        profile = Profile(
            username="ada",
            email="ada@example.com",
            experience_level="intermediate",
            bio="Learning <agents>",
            learning_goals=["RAG"],
            ai_tools_used=["Claude", "Cursor"],
            created_at=datetime(2024, 2, 1),
        )
        html_out = render_profile(profile)
        assert "@ada" in html_out
        assert "Intermediate" in html_out
        assert "Joined:</strong> 2024-02-01" in html_out
        assert "Learning &lt;agents&gt;" in html_out
        assert "Cursor" in html_out

    def test_empty_profile_renders_nothing_optional(self):
        html_out = render_profile(Profile())
        assert "Username" not in html_out
        assert "Bio" not in html_out
        assert "Learning Goals" not in html_out
