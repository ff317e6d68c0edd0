"""
HTML Escaping for Telegram HTML Mode

Notifications are sent with parse_mode=HTML, so any value that came from a
form (names, e-mail addresses, free text) must be escaped before it is put
into a message template.
"""

import html
from typing import Optional


def safe_html(text: Optional[str]) -> str:
    """
    Escapes HTML special characters in user-provided text.

    Args:
        text: Value submitted by a visitor

    Returns:
        HTML-escaped string safe to embed in a Telegram HTML message

    Examples:
        >>> safe_html("Jane</b><script>alert(1)</script>")
        'Jane&lt;/b&gt;&lt;script&gt;alert(1)&lt;/script&gt;'

        >>> safe_html(None)
        ''
    """
    if text is None:
        return ""
    return html.escape(str(text), quote=True)
