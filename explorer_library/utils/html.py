"""HTML escaping for file content embedded in pages."""

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters.

    Uses &#039; for the single quote, which html.escape does not.

    Example:
        >>> escape_html("<a>&\\"'")
        '&lt;a&gt;&amp;&quot;&#039;'
    """
    return text.translate(_HTML_ESCAPES)
