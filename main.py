"""
PPA - Personal Project Assistant: Team Dashboard
Team health, progress by priority goal and navigation to the other tools.
"""

import sys
import os

# Force the root directory into the path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

from config.constants import APP_ICON, APP_TITLE
from config.settings import configure_logging
from services.data_service import data_manager
from components.dashboard_charts import dashboard_component

configure_logging(data_manager.settings.log_level)

# Page configuration
st.set_page_config(
    page_title=APP_TITLE,
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

data_manager.initialize_session_state()

# Custom CSS for the header
st.markdown("""
<style>
    .main-header {
        background: linear-gradient(135deg, #4f46e5 0%, #7c3aed 100%);
        color: white;
        padding: 1.5rem 2rem;
        border-radius: 20px;
        margin-bottom: 1.5rem;
    }
    .main-header h1, .main-header p { color: white; margin: 0; }
</style>
""", unsafe_allow_html=True)

st.markdown(f"""
<div class="main-header">
    <h1>{APP_ICON} Team Dashboard</h1>
    <p>Health and progress across your team's initiatives</p>
</div>
""", unsafe_allow_html=True)

records = data_manager.records()
dashboard_component.render(records)

st.markdown("---")
st.markdown("## Choose Your Tool")

col1, col2, col3, col4 = st.columns(4)

with col1:
    st.markdown("""
    #### 👥 Team Projects
    - Updates grouped by member
    - Meeting feedback notes
    - Export meeting report
    """)
    if st.button("👥 Open Team Projects", key="projects_btn", width="stretch"):
        st.switch_page("pages/1_Team_Projects.py")

with col2:
    st.markdown("""
    #### 💬 AI Insight
    - Ask about risks and progress
    - Prepare for your next sync
    - Powered by Gemini
    """)
    if st.button("💬 Open AI Insight", key="chat_btn", width="stretch"):
        st.switch_page("pages/2_AI_Insight.py")

with col3:
    st.markdown("""
    #### 📥 Import Data
    - Tab-separated upload
    - Load sample team data
    - Format guide
    """)
    if st.button("📥 Open Import Data", key="import_btn", width="stretch"):
        st.switch_page("pages/3_Import_Data.py")

with col4:
    st.markdown("""
    #### 🗂️ Project Planner
    - Task checklists
    - Project notes
    - AI next-step suggestions
    """)
    if st.button("🗂️ Open Project Planner", key="planner_btn", width="stretch"):
        st.switch_page("pages/4_Project_Planner.py")

with st.sidebar:
    st.markdown(f"### {APP_TITLE}")
    st.caption(f"{len(records)} updates loaded")
    if not data_manager.gateway().is_ready():
        st.caption("🔒 AI features disabled (no API key)")
