"""
Configuration settings for the Streamlit application.
"""

import os

# Page configuration for Streamlit
PAGE_CONFIG = {
    "page_title": "Slack Thread Viewer",
    "page_icon": "💬",
    "layout": "centered",
}

# API Configuration
# Backend URL is configurable via BACKEND_URL environment variable
API_BASE_URL = os.getenv("BACKEND_URL", "http://localhost:8080").rstrip("/")
API_TIMEOUT = 60  # seconds
