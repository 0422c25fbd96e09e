"""Update card UI component for the team projects review list."""

import html

import streamlit as st

from config.constants import HEALTH_COLORS
from models.update import UpdateRecord
from services.data_service import data_manager


def _save_feedback(record_id: str, widget_key: str):
    data_manager.update_feedback(record_id, st.session_state.get(widget_key, ""))


def badge_html(update: UpdateRecord) -> str:
    """Health badge and goal label. The goal is imported text and gets escaped."""
    color = HEALTH_COLORS[update.health_bucket]
    return (
        f'<span style="background:{color}22;color:{color};padding:2px 8px;'
        f'border-radius:6px;font-size:0.75em;font-weight:700;">{update.health_label}</span> '
        f'<span style="color:#6b7280;font-size:0.75em;">{html.escape(update.priority_goal)}</span>'
    )


def render_update_card(update: UpdateRecord) -> None:
    """Render one update with its health badge, progress bar and feedback box."""
    with st.container(border=True):
        st.markdown(badge_html(update), unsafe_allow_html=True)
        st.markdown(f"**{update.initiative}**")
        st.caption(update.description or "No description.")

        st.progress(min(update.progress, 100) / 100, text=f"Progress: {update.progress}%")

        col1, col2 = st.columns(2)
        with col1:
            st.caption(f"📅 Updated {update.date}")
        with col2:
            st.caption(f"🏁 Due {update.due_date or 'n/a'}")

        widget_key = f"feedback_{update.id}"
        st.text_area(
            "Meeting Feedback",
            value=update.feedback,
            key=widget_key,
            placeholder="Add comments or action items...",
            height=90,
            on_change=_save_feedback,
            args=(update.id, widget_key),
        )
