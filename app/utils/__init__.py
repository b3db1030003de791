"""
Utility package exports
"""

from app.utils.helpers import format_slack_timestamp, resolve_timestamp, sort_messages, render_console_lines, render_json

__all__ = ["format_slack_timestamp", "resolve_timestamp", "sort_messages", "render_console_lines", "render_json"]
