"""
Team Projects - review list of updates grouped by team member, with meeting
feedback and the CSV meeting report export.
"""

import streamlit as st

from config.settings import configure_logging
from services import aggregator
from services.data_service import data_manager
from components.update_card import render_update_card

configure_logging(data_manager.settings.log_level)

# Page configuration
st.set_page_config(
    page_title="Team Projects",
    page_icon="👥",
    layout="wide",
    initial_sidebar_state="expanded"
)

data_manager.initialize_session_state()
records = data_manager.records()

header_col, export_col = st.columns([3, 1])
with header_col:
    st.markdown("## 👥 Project Review List")
with export_col:
    csv_content, filename = data_manager.export_csv()
    st.download_button(
        label="📥 Export Meeting Report",
        data=csv_content.encode("utf-8"),
        file_name=filename,
        mime="text/csv",
        type="primary",
        width="stretch",
        key="export_meeting_report"
    )

if not records:
    st.info("No team updates loaded. Use Import Data to get started.")
    st.stop()

for member, updates in aggregator.group_by_member(records).items():
    with st.container(border=True):
        name_col, count_col = st.columns([4, 1])
        with name_col:
            st.markdown(f"### {member}")
            st.caption(updates[0].title)
        with count_col:
            st.markdown(f"**{len(updates)} Updates**")

        columns = st.columns(3)
        for index, update in enumerate(updates):
            with columns[index % 3]:
                render_update_card(update)
