"""Session data management for the PPA dashboard."""

from __future__ import annotations
import logging
from typing import Optional, Tuple

import streamlit as st

from config.settings import AppSettings
from models.update import UpdateRecord
from services import tabular_codec
from services.assistant_gateway import AssistantConfig, AssistantGateway
from services.conversation import Conversation
from services.record_store import RecordStore, create_backend


logger = logging.getLogger(__name__)


class DataManager:
    """Binds the record store, assistant and chat log to the Streamlit session."""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings.from_env()
        for problem in self.settings.validate():
            logger.warning(f"Configuration problem: {problem}")

    # Session State Management
    def initialize_session_state(self):
        """Initialize session state variables."""
        if "session_initialized" not in st.session_state:
            store = RecordStore(create_backend(
                self.settings.storage_backend,
                database_path=self.settings.database_path,
                storage_dir=self.settings.storage_dir,
            ))
            store.load()
            st.session_state.record_store = store
            st.session_state.conversation = Conversation.start(len(store.records))
            st.session_state.projects = []
            st.session_state.session_initialized = True

    @property
    def store(self) -> RecordStore:
        self.initialize_session_state()
        return st.session_state.record_store

    @property
    def conversation(self) -> Conversation:
        self.initialize_session_state()
        return st.session_state.conversation

    def records(self) -> Tuple[UpdateRecord, ...]:
        return self.store.records

    # Mutations
    def import_upload(self, uploaded_file) -> int:
        """
        Replace the team data with the contents of an uploaded file.

        Returns the number of imported updates; 0 leaves the current data untouched.
        """
        try:
            text = tabular_codec.decode_upload(uploaded_file.getvalue())
        except ValueError as e:
            logger.error(f"Error decoding upload {uploaded_file.name}: {e}")
            raise

        records = tabular_codec.parse(text)
        if not records:
            logger.warning(f"No valid updates found in {uploaded_file.name}")
            return 0

        self.store.replace_all(records)
        logger.info(f"Imported {len(records)} updates from {uploaded_file.name}")
        return len(records)

    def load_sample(self) -> int:
        return len(self.store.load_sample())

    def update_feedback(self, record_id: str, text: str):
        self.store.update_feedback(record_id, text)

    # Export
    def export_csv(self) -> Tuple[str, str]:
        """CSV content and download filename of the meeting report."""
        return tabular_codec.serialize(self.records()), tabular_codec.export_filename()

    # Assistant
    def _api_key(self) -> str:
        if self.settings.has_api_key:
            return self.settings.api_key
        try:
            if hasattr(st, 'secrets') and 'API_KEY' in st.secrets:
                return str(st.secrets['API_KEY']).strip()
        except Exception:
            # No secrets.toml present
            logger.debug("Streamlit secrets not available")
        return ""

    def gateway(self) -> AssistantGateway:
        return AssistantGateway(AssistantConfig(
            api_key=self._api_key(),
            model=self.settings.model,
            timeout=self.settings.request_timeout,
        ))


# Global instance
data_manager = DataManager()
