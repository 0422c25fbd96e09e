"""Data source UI component."""

import streamlit as st
from typing import Dict, Any
import logging

from config.constants import IMPORT_FORMAT_GUIDE
from services.data_service import data_manager


logger = logging.getLogger(__name__)


class DataSourceComponent:
    """Component for importing team data and loading the sample set."""

    def __init__(self):
        self.data_manager = data_manager

    def render(self) -> Dict[str, Any]:
        """Render the import section."""
        st.markdown("## 📥 Import Team Data")
        st.caption("Upload your Excel export (tab-separated text) to populate the dashboard.")

        uploaded_file = st.file_uploader(
            "Choose file",
            type=None,  # any extension, the content is what gets parsed
            key="team_data_upload"
        )

        result = {'data_loaded': False}

        # Handle each upload once; the uploader keeps its file across reruns
        if uploaded_file and st.session_state.get('processed_upload_id') != uploaded_file.file_id:
            st.session_state.processed_upload_id = uploaded_file.file_id
            result.update(self._handle_file_upload(uploaded_file))

        st.markdown("---")
        st.markdown("**Or start from the sample team:**")
        confirm = st.checkbox(
            "Overwrite current data with mockup team data",
            key="confirm_sample_overwrite"
        )
        if st.button("🗂️ Load Sample Data", key="load_sample_data", disabled=not confirm):
            count = self.data_manager.load_sample()
            st.success(f"✅ Loaded {count} sample updates.")
            result['data_loaded'] = True

        with st.expander("ℹ️ Format Guide", expanded=False):
            st.markdown("One header line, then one tab-separated line per update:")
            st.code(IMPORT_FORMAT_GUIDE, language=None)
            st.caption("Health: -1 at risk, 0 potential issue, 1 healthy. Status: e.g. 45%.")

        return result

    def _handle_file_upload(self, uploaded_file) -> Dict[str, Any]:
        """Handle file upload and processing."""
        try:
            count = self.data_manager.import_upload(uploaded_file)
            if count == 0:
                st.warning("⚠️ No valid updates found in the file. Check the format guide below.")
                return {'data_loaded': False}

            st.success(f"✅ {count} updates imported successfully.")
            return {
                'data_loaded': True,
                'filename': uploaded_file.name,
                'imported': count
            }

        except Exception as e:
            st.error(f"❌ Error loading file: {e}")
            logger.error(f"File upload error: {e}")

        return {'data_loaded': False}


# Global instance
data_source_component = DataSourceComponent()
