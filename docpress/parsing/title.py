"""Title extraction from normalized markup.

The CMS renders the post title itself, so the heading used as the title
is removed from the body to avoid showing it twice.
"""

import re

from docpress.models.schemas import TitleExtractionResult

_H1 = re.compile(r"<h1[^>]*>([\s\S]*?)</h1>", re.IGNORECASE)
_H2 = re.compile(r"<h2[^>]*>([\s\S]*?)</h2>", re.IGNORECASE)
_INNER_TAG = re.compile(r"<[^>]+>")

# Applied in order, so "&amp;lt;" ends up as "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def _heading_text(inner_html: str) -> str | None:
    text = _INNER_TAG.sub("", inner_html)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    text = text.strip()
    return text or None


def extract_title(html: str) -> TitleExtractionResult:
    """Take the first H1 (or, failing that, the first H2) as the title.

    An H1 anywhere in the document wins over an earlier H2. Only the
    first literal occurrence of the matched element is removed, so an
    identical heading further down stays in place.

    Args:
        html: Normalized markup.

    Returns:
        The plain-text title (None when there is no heading or it has no
        text) and the trimmed markup without that heading.
    """
    match = _H1.search(html) or _H2.search(html)
    if not match:
        return TitleExtractionResult(title=None, content_without_title=html.strip())

    return TitleExtractionResult(
        title=_heading_text(match.group(1)),
        content_without_title=html.replace(match.group(0), "", 1).strip(),
    )
