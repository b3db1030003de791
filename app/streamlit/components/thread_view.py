"""
Thread view component for the Streamlit app.
Displays the fetched conversation in chat-style format.
"""
import streamlit as st


def render_thread_view(messages):
    """
    Render thread messages as chat bubbles, oldest first.

    Args:
        messages: List of {timestamp, user_name, text} dicts from the backend
    """
    if not messages:
        st.info("No messages in this thread.")
        return

    st.caption(f"{len(messages)} messages")

    for message in messages:
        user_name = message.get("user_name", "Unknown")
        with st.chat_message("user", avatar="💬"):
            st.markdown(f"**{user_name}** · {message.get('timestamp', '')}")
            st.markdown(message.get("text", ""))
