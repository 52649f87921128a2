"""
Text helpers for untrusted user input.

Free-text fields are rendered as-is by the client, so anything stored from
user input goes through escape_markup first.
"""

import html
from typing import Any, Optional

_EXTRA_ESCAPES = str.maketrans({
    "/": "&#x2F;",
    "\\": "&#x5C;",
    "`": "&#96;",
})


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string, or None when value is not a string."""
    if not isinstance(value, str):
        return None
    return value.strip()


def escape_markup(value: str) -> str:
    """
    Neutralize HTML/script markup.

    Escapes ``& < > " '`` plus ``/``, backslash and backtick so the stored
    text can never open or close a tag or a template literal when rendered.

    Example:
        escape_markup("<b>hi</b>") -> "&lt;b&gt;hi&lt;&#x2F;b&gt;"
    """
    return html.escape(value, quote=True).translate(_EXTRA_ESCAPES)
