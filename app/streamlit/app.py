"""
Main Streamlit application for the Slack thread viewer.
Takes a Slack message link and shows the whole thread.
"""
import streamlit as st
from components.thread_view import render_thread_view
from services.api_client import fetch_thread
from config.settings import PAGE_CONFIG


def main():
    """
    Main application entry point.
    """
    # Configure the page
    st.set_page_config(**PAGE_CONFIG)

    # Initialize session state
    if "thread_messages" not in st.session_state:
        st.session_state.thread_messages = None
    if "last_error" not in st.session_state:
        st.session_state.last_error = None

    st.title("Slack Thread Viewer")
    st.caption("Paste a Slack message link to read its whole thread.")

    with st.form("fetch_form"):
        slack_url = st.text_input(
            "Slack message URL",
            placeholder="https://workspace.slack.com/archives/C0123456789/p1700000000000100",
        )
        submitted = st.form_submit_button("Fetch thread")

    if submitted:
        with st.spinner("Fetching thread..."):
            result = fetch_thread(slack_url)

        if result["success"]:
            st.session_state.thread_messages = result["messages"]
            st.session_state.last_error = None
        else:
            st.session_state.thread_messages = None
            st.session_state.last_error = result["message"]

    if st.session_state.last_error:
        st.error(st.session_state.last_error)
    elif st.session_state.thread_messages is not None:
        render_thread_view(st.session_state.thread_messages)


if __name__ == "__main__":
    main()
