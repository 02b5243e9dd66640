from datetime import datetime

import markdown

from core.config import TIMEZONE


def render_markdown(text: str) -> str:
    """Render Markdown source to an HTML fragment"""
    return markdown.markdown(text or "")


def current_timestamp() -> str:
    return datetime.now(TIMEZONE).strftime("%a %b %d %H:%M:%S %Z %Y")
