"""
Assistant Chat Component - chat interface for questions about the team data.
"""

import streamlit as st

from services.data_service import DataManager


def render_locked_state() -> None:
    """Shown instead of the chat when no API key is configured."""
    st.warning("🔒 AI Insight is locked")
    st.markdown(
        "The Personal Project Assistant requires a Gemini API Key to provide insights. "
        "Please add `API_KEY` to your environment variables (or `.streamlit/secrets.toml`)."
    )
    st.link_button("Get an API Key ✨", "https://aistudio.google.com/app/apikey")


def render_assistant_chat(manager: DataManager) -> None:
    """
    Render the chat with PPA.

    Args:
        manager: Data manager holding the record store and the session's chat log
    """
    gateway = manager.gateway()
    if not gateway.is_ready():
        render_locked_state()
        return

    conversation = manager.conversation

    for message in conversation.messages:
        with st.chat_message(message.role):
            # Escape $ signs to prevent LaTeX rendering issues
            st.markdown(message.content.replace('$', '\\$'))

    if conversation.error:
        st.error(conversation.error)

    question = st.chat_input("Ask PPA: 'Which projects are at risk?'")
    if question and question.strip():
        with st.spinner("PPA is thinking..."):
            conversation.send(gateway, manager.records(), question)
        st.rerun()

    st.caption("AI insights are based on provided team data")

    if len(conversation.messages) > 1:
        if st.button("🗑️ Clear Chat History", key="clear_ppa_chat"):
            conversation.clear(len(manager.records()))
            st.rerun()
