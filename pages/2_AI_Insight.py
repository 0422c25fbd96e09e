"""
AI Insight - chat with PPA about the current team data.
"""

import streamlit as st

from config.settings import configure_logging
from services.data_service import data_manager
from components.assistant_chat import render_assistant_chat

configure_logging(data_manager.settings.log_level)

# Page configuration
st.set_page_config(
    page_title="AI Insight",
    page_icon="💬",
    layout="wide",
    initial_sidebar_state="expanded"
)

data_manager.initialize_session_state()

st.markdown("## 💬 PPA Intelligence")
st.caption(f"Answers are based on the {len(data_manager.records())} team updates currently loaded.")

render_assistant_chat(data_manager)
