"""
Validation utilities for input data.
"""
import re


def validate_slack_url(url: str) -> tuple[bool, str]:
    """
    Validate Slack message permalink format.
    Accepts URLs in the format: https://<workspace>.slack.com/archives/<channel>/p<16 digits>

    Args:
        url: The Slack message URL to validate

    Returns:
        tuple: (is_valid, message)
    """
    if not url or not url.strip():
        return False, "Slack URL is required."

    pattern = r'https://[a-zA-Z0-9-]+\.slack\.com/archives/[CG][A-Za-z0-9]+/p[0-9]{16}'

    if not re.search(pattern, url.strip()):
        return False, "Invalid Slack message URL format. Use a message link such as https://workspace.slack.com/archives/C0123456789/p1700000000000100"

    return True, "Valid Slack message URL."
