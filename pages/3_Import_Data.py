"""
Import Data - upload a tab-separated team export or load the sample team.
"""

import streamlit as st

from config.settings import configure_logging
from services.data_service import data_manager
from components.data_source import data_source_component

configure_logging(data_manager.settings.log_level)

# Page configuration
st.set_page_config(
    page_title="Import Data",
    page_icon="📥",
    layout="centered",
    initial_sidebar_state="expanded"
)

data_manager.initialize_session_state()

result = data_source_component.render()

if result.get('data_loaded'):
    data_manager.conversation.clear(len(data_manager.records()))
    if st.button("📊 View Dashboard", key="goto_dashboard"):
        st.switch_page("main.py")
