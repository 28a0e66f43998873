"""Text sanitization for content written on behalf of workflow rules.

Rule templates interpolate user-controlled task fields (title, description),
so rendered comment text is stripped of HTML before it is stored.
"""

import nh3


def strip_html(value: str) -> str:
    """Remove all HTML tags and escape markup with nh3 (no tags allowed).

    Args:
        value: Raw string that may contain HTML.

    Returns:
        Plain text safe for HTML display.
    """
    if not value:
        return value
    return nh3.clean(value, tags=set(), attributes={})
