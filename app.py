"""
AI Learning Tracker - Discover, track, and share resources for learning to code with AI

Streamlit application for browsing a curated list of AI coding resources,
tracking personal progress against them, and viewing a profile dashboard.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
from pydantic import ValidationError

from learntrack.auth import AuthSession
from learntrack.config import ConfigError, load_settings
from learntrack.schemas import (
    ProgressStatus,
    ResourceCategory,
    DifficultyLevel,
    ResourceSubmission,
    missing_required_fields,
)
from learntrack.tracker import (
    ResourceCatalog,
    ProgressStore,
    ProgressCard,
)
from learntrack.viewer import (
    get_resource_css,
    category_options,
    format_category_option,
    render_resource_grid,
    get_progress_css,
    join_cards,
    render_stats,
    render_progress_card,
    render_profile,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = load_settings()

logging.basicConfig(
    level=SETTINGS.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="AI Learning Tracker",
    page_icon="🤖",
    layout="wide",
    initial_sidebar_state="expanded",
)

VIEW_RESOURCES = "Resources"
VIEW_ADD_RESOURCE = "Add Resource"
VIEW_PROGRESS = "My Progress"
VIEW_DASHBOARD = "Dashboard"


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "catalog" not in st.session_state:
        st.session_state.catalog = ResourceCatalog.from_seed(SETTINGS.seed_path)

    if "progress" not in st.session_state:
        st.session_state.progress = ProgressStore.from_seed(SETTINGS.seed_path)

    if "cards" not in st.session_state:
        st.session_state.cards = {}

    if "auth" not in st.session_state:
        try:
            st.session_state.auth = AuthSession.from_settings(SETTINGS)
        except ConfigError as e:
            logger.warning(f"Auth disabled: {e}")
            st.session_state.auth = None

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = VIEW_RESOURCES


def get_card(resource_id: str) -> ProgressCard:
    cards = st.session_state.cards
    if resource_id not in cards:
        cards[resource_id] = ProgressCard(resource_id)
    return cards[resource_id]


def is_signed_in() -> bool:
    auth = st.session_state.auth
    return auth is not None and auth.is_signed_in()


# -----------------------------------------------------------------------------
# Sidebar: Navigation and Sign In
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with navigation and the sign in form."""
    st.sidebar.title("🤖 AI Learning Tracker")

    views = [VIEW_RESOURCES, VIEW_ADD_RESOURCE]
    signed_in = is_signed_in()
    if signed_in:
        views += [VIEW_PROGRESS, VIEW_DASHBOARD]

    if st.session_state.view_mode not in views:
        st.session_state.view_mode = VIEW_RESOURCES

    st.sidebar.subheader("Navigate")
    st.session_state.view_mode = st.sidebar.radio(
        "Select view",
        views,
        index=views.index(st.session_state.view_mode),
        label_visibility="collapsed",
    )

    st.sidebar.divider()

    if st.session_state.auth is None:
        st.sidebar.caption("Sign in is unavailable: the auth backend is not configured.")
    elif signed_in:
        user = st.session_state.auth.current_user()
        st.sidebar.markdown(f"Signed in as **{user.email}**")
    else:
        render_sign_in_form()


def render_sign_in_form():
    """Sign in form; credentials are passed straight to the auth provider."""
    with st.sidebar.form("sign_in_form"):
        st.subheader("Sign In")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In", use_container_width=True)

    if submitted:
        error = st.session_state.auth.sign_in(email, password)
        if error:
            st.sidebar.error(f"Sign in failed: {error}")
        else:
            st.rerun()


# -----------------------------------------------------------------------------
# Resources View
# -----------------------------------------------------------------------------

def render_resources_view():
    """Render the catalog listing with the category filter."""
    st.title("AI Learning Tracker")
    st.markdown("Discover, track, and share resources for learning to code with AI")

    catalog = st.session_state.catalog

    col1, col2 = st.columns([3, 1])
    with col1:
        st.subheader("Learning Resources")
    with col2:
        category = st.selectbox(
            "Category",
            category_options(),
            format_func=format_category_option,
            label_visibility="collapsed",
        )

    resources = catalog.filter_by_category(category)
    st.markdown(get_resource_css(), unsafe_allow_html=True)
    st.markdown(render_resource_grid(resources), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Add Resource View
# -----------------------------------------------------------------------------

ADD_TEXT_KEYS = ("add_title", "add_description", "add_url", "add_tags", "add_notes")


def submit_resource():
    """Validate the submitted form; clear it only when the submission is valid."""
    state = st.session_state
    try:
        submission = ResourceSubmission(
            title=state.add_title,
            description=state.add_description,
            url=state.add_url,
            category=state.add_category,
            difficulty=state.add_difficulty,
            tags=state.add_tags,
            notes=state.add_notes,
        )
    except ValidationError as e:
        state.add_resource_error = ", ".join(missing_required_fields(e))
        state.add_resource_done = False
        return

    logger.info(f"Resource submitted: {submission.model_dump_json()}")
    for key in ADD_TEXT_KEYS:
        state[key] = ""
    state.add_category = list(ResourceCategory)[0]
    state.add_difficulty = list(DifficultyLevel)[0]
    state.add_resource_error = None
    state.add_resource_done = True


def render_add_resource_view():
    """Render the Add Resource form."""
    st.title("Add Learning Resource")
    st.markdown("Share a helpful resource with the AI learning community")

    with st.form("add_resource_form"):
        st.text_input(
            "Title *",
            key="add_title",
            placeholder="e.g., Complete Guide to AI-Assisted Development",
        )
        st.text_area(
            "Description *",
            key="add_description",
            placeholder="Describe what this resource teaches and why it's helpful...",
        )
        st.text_input("URL *", key="add_url", placeholder="https://...")

        col1, col2 = st.columns(2)
        with col1:
            st.selectbox(
                "Category *",
                list(ResourceCategory),
                key="add_category",
                format_func=lambda c: c.value.title(),
            )
        with col2:
            st.selectbox(
                "Difficulty *",
                list(DifficultyLevel),
                key="add_difficulty",
                format_func=lambda d: d.value.title(),
            )

        st.text_input(
            "Tags",
            key="add_tags",
            placeholder="e.g., claude, cursor, ai-coding, typescript (comma separated)",
            help="Separate multiple tags with commas",
        )
        st.text_area(
            "Personal Notes",
            key="add_notes",
            placeholder="Any additional thoughts, tips, or insights about this resource...",
        )
        st.form_submit_button("Add Resource", type="primary", on_click=submit_resource)

    error = st.session_state.pop("add_resource_error", None)
    if error:
        st.error(f"Please fill in the required fields: {error}")
    if st.session_state.pop("add_resource_done", False):
        st.success("Resource added successfully! (This is a demo - no backend connected)")


# -----------------------------------------------------------------------------
# My Progress View
# -----------------------------------------------------------------------------

def begin_edit(resource_id: str):
    card = get_card(resource_id)
    card.begin_edit(st.session_state.progress.get(resource_id))
    # Widgets read their initial value from these keys
    st.session_state[f"status_{resource_id}"] = card.draft.status
    st.session_state[f"percent_{resource_id}"] = card.draft.progress_percent
    st.session_state[f"notes_{resource_id}"] = card.draft.notes


def change_status(resource_id: str):
    card = get_card(resource_id)
    card.set_status(st.session_state[f"status_{resource_id}"])
    st.session_state[f"percent_{resource_id}"] = card.draft.progress_percent


def change_percent(resource_id: str):
    get_card(resource_id).set_progress(st.session_state[f"percent_{resource_id}"])


def change_notes(resource_id: str):
    get_card(resource_id).set_notes(st.session_state[f"notes_{resource_id}"])


def save_card(resource_id: str):
    get_card(resource_id).save(st.session_state.progress)


def cancel_card(resource_id: str):
    get_card(resource_id).cancel()


def render_progress_view():
    """Render statistics and one progress card per tracked resource."""
    st.title("My Learning Progress")
    st.markdown("Track your journey through AI coding resources")

    store = st.session_state.progress
    catalog = st.session_state.catalog

    st.markdown(get_progress_css(), unsafe_allow_html=True)
    st.markdown(render_stats(store.stats()), unsafe_allow_html=True)

    for resource, record in join_cards(catalog, store):
        card = get_card(resource.id)
        with st.container():
            st.markdown(
                render_progress_card(resource, record, show_notes=not card.is_editing),
                unsafe_allow_html=True,
            )
            if card.is_editing:
                render_card_editor(card)
            else:
                st.button(
                    "Update Progress",
                    key=f"edit_{resource.id}",
                    on_click=begin_edit,
                    args=(resource.id,),
                )


def render_card_editor(card: ProgressCard):
    """Edit controls for a card in editing mode."""
    rid = card.resource_id

    st.selectbox(
        "Status",
        list(ProgressStatus),
        format_func=lambda s: s.label,
        key=f"status_{rid}",
        on_change=change_status,
        args=(rid,),
    )

    if card.shows_progress_control:
        st.slider(
            "Progress (%)",
            min_value=0,
            max_value=100,
            key=f"percent_{rid}",
            on_change=change_percent,
            args=(rid,),
        )

    st.text_area(
        "Notes",
        key=f"notes_{rid}",
        placeholder="Add your thoughts, insights, or feedback...",
        on_change=change_notes,
        args=(rid,),
    )

    col1, col2, _ = st.columns([1, 1, 6])
    with col1:
        st.button("Save", key=f"save_{rid}", type="primary", on_click=save_card, args=(rid,))
    with col2:
        st.button("Cancel", key=f"cancel_{rid}", on_click=cancel_card, args=(rid,))


# -----------------------------------------------------------------------------
# Dashboard View
# -----------------------------------------------------------------------------

def render_dashboard_view():
    """Render the profile dashboard."""
    auth = st.session_state.auth
    user = auth.current_user()
    profile = auth.fetch_profile(user.id)

    col1, col2 = st.columns([5, 1])
    with col1:
        name = (profile.display_name if profile else None) or user.email
        st.title(f"Welcome back, {name}!")
        st.markdown("Ready to continue your AI learning journey?")
    with col2:
        if st.button("Sign out"):
            error = auth.sign_out()
            if error:
                st.error(f"Error signing out: {error}")
            else:
                st.session_state.view_mode = VIEW_RESOURCES
                st.rerun()

    if profile:
        st.subheader("Your Profile")
        st.markdown(render_profile(profile), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    # Main content based on view mode
    if st.session_state.view_mode == VIEW_RESOURCES:
        render_resources_view()
    elif st.session_state.view_mode == VIEW_ADD_RESOURCE:
        render_add_resource_view()
    elif st.session_state.view_mode == VIEW_PROGRESS:
        render_progress_view()
    elif st.session_state.view_mode == VIEW_DASHBOARD:
        render_dashboard_view()


if __name__ == "__main__":
    main()
