"""
Console entry point: print a Slack thread from its permalink.

Usage:
    slack-thread https://<workspace>.slack.com/archives/<channel>/p<ts>
    slack-thread --json <url>

Environment variables (set in .env file):
    SLACK_BOT_TOKEN=xoxb-... - Bot token used for every Slack call
    DEBUG=true - Enable debug logging
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from app.config import get_settings
from app.integrations.slack import extract_slack_link_info
from app.services.pipeline import ThreadPipeline
from app.utils.helpers import render_console_lines, render_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slack-thread",
        description="Fetch a Slack thread and print it in timestamp order",
    )
    parser.add_argument("url", help="Slack message permalink")
    parser.add_argument("--json", action="store_true", help="Print a JSON array instead of console lines")
    return parser


def main(argv: Optional[List[str]] = None, pipeline: Optional[ThreadPipeline] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    channel_id, _ = extract_slack_link_info(args.url)
    if not channel_id:
        print("Error: Invalid Slack message URL format")
        return 1

    if pipeline is None:
        if not settings.slack_bot_token:
            print("Error: SLACK_BOT_TOKEN environment variable is not set")
            return 1
        pipeline = ThreadPipeline(settings=settings)

    result = asyncio.run(pipeline.process_thread(args.url))
    if not result.success:
        logger.error(f"{result.error_type}: {result.error}")
        print(f"Error getting messages: {result.error}")
        return 1

    if args.json:
        print(render_json(result.messages))
    else:
        for line in render_console_lines(result.messages):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
