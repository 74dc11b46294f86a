"""
HTML page helper.

Embeds a LocalizeMap's script block into a minimal HTML document so the
page's own scripts can read the global variable, e.g.::

    document.querySelector(".motd").innerText = _localData.motd[0];

Everything the page needs is passed in explicitly; there is no module
level page or template state.
"""

import html
from typing import List

from localize.container import LocalizeMap


def render_page(localized: LocalizeMap, title: str = "", body: str = "") -> str:
    """
    Generate an HTML document carrying the localized data.

    Args:
        localized: Map to embed
        title: Page title (HTML-escaped)
        body: Body markup (inserted verbatim)

    Returns:
        The HTML document as a string
    """
    lines: List[str] = []

    lines.append("<!DOCTYPE html>")
    lines.append("<html>")
    lines.append("<head>")
    lines.append(f"<title>{html.escape(title)}</title>")
    lines.append('<script type="text/javascript">')
    lines.append(localized.js())
    lines.append("</script>")
    lines.append("</head>")
    lines.append("<body>")
    if body:
        lines.append(body)
    lines.append("</body>")
    lines.append("</html>")

    return "\n".join(lines)


def save_page_file(localized: LocalizeMap, filename: str, title: str = "", body: str = "") -> None:
    """
    Generate the page and save it to a file.

    Args:
        localized: Map to embed
        filename: Output file path (.html extension recommended)
        title: Page title
        body: Body markup
    """
    page = render_page(localized, title=title, body=body)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(page)


__all__ = ["render_page", "save_page_file"]
