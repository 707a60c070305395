"""Conversion of assistant responses to display markup.

Responses use a markdown-lite dialect: ``**bold**`` spans and literal
newlines. Nothing else is interpreted.
"""

import html
import re

BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")


def to_html(text: str) -> str:
    """Convert a markdown-lite response to HTML.

    Args:
        text: Response text from the assistant

    Returns:
        HTML with ``<strong>`` spans and ``<br>`` line breaks

    Example:
        >>> to_html("**Hi**\\nthere")
        '<strong>Hi</strong><br>there'
    """
    escaped = html.escape(text, quote=False)
    bolded = BOLD_PATTERN.sub(r"<strong>\1</strong>", escaped)
    return bolded.replace("\n", "<br>")
