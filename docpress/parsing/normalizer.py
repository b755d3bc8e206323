"""HTML normalization for publishing exported documents.

Exported documents carry a lot of authoring cruft: inline styles, class
soup, wrapper elements, and internal notes appended below the article.
The passes in this module reduce that markup to a small set of semantic
tags the CMS renders cleanly.

Pass order:
    1. Google Docs pre-clean (exported documents only)
    2. Trailing meta-section truncation
    3. Tag and attribute allow-listing
    4. Whitespace normalization, then truncation again on the cleaned markup
    5. Leading text trim

Truncation has to run before allow-listing because its patterns match
tags that still carry ``class`` and ``style`` attributes.
"""

import logging
import re

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset(
    {"p", "h1", "h2", "h3", "h4", "h5", "h6", "strong", "b", "em", "i", "ul", "ol", "li", "br", "a"}
)

# Labels authors use to start internal notes below the article body
META_HEADINGS = (
    "meta information",
    "meta info",
    "article meta",
    "post meta",
    "seo information",
    "seo info",
    "seo details",
    "seo",
    "metadata",
    "meta data",
    "article information",
    "keywords",
    "tags",
    "categories",
    "notes",
    "internal notes",
    "editor notes",
    "---",
)

# Google Docs export wrappers
_BODY = re.compile(r"<body[^>]*>([\s\S]*)</body>", re.IGNORECASE)
_GDOCS_TITLE_P = re.compile(r"<p[^>]*class=\"[^\"]*title[^\"]*\"[^>]*>[\s\S]*?</p>", re.IGNORECASE)
_GDOCS_TITLE_H1 = re.compile(r"<h1[^>]*class=\"[^\"]*title[^\"]*\"[^>]*>[\s\S]*?</h1>", re.IGNORECASE)
_GDOCS_WRAPPER = re.compile(r"<div[^>]*class=\"[^\"]*doc-content[^\"]*\"[^>]*>", re.IGNORECASE)

_HR = re.compile(r"<hr[^>]*>", re.IGNORECASE)
_SEPARATOR_RUN = re.compile(r"[-_=]{3,}|\*{3,}")

_SCRIPT = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_COMMENT = re.compile(r"<!--[\s\S]*?-->")
_DECLARATION = re.compile(r"<[!?][^>]*>")
_TAG = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)\b([^>]*)>")
_HREF = re.compile(r"\bhref\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)

_INLINE_SPACE = re.compile(r"[ \t]+")
_SPACE_AFTER_TAG = re.compile(r">\s+")
_SPACE_BEFORE_TAG = re.compile(r"\s+<")
_EMPTY_PARAGRAPH = re.compile(r"<p>\s*</p>", re.IGNORECASE)
_BREAK_RUN = re.compile(r"(<br\s*/?>\s*){3,}", re.IGNORECASE)
_PARAGRAPH_BOUNDARY_RUN = re.compile(r"(</p>\s*<p>)+", re.IGNORECASE)
_BLOCK_BOUNDARY = re.compile(r"</(p|h[1-6])><(p|h[1-6])>")
_LEADING_TEXT = re.compile(r"^[^<]*")


def _label_pattern(label: str) -> str:
    return r"\s*".join(re.escape(word) for word in label.split())


def _build_meta_patterns() -> list[re.Pattern[str]]:
    patterns: list[re.Pattern[str]] = []
    for heading in META_HEADINGS:
        label = _label_pattern(heading)
        patterns.extend(
            [
                re.compile(rf"<p[^>]*>\s*{label}\s*:?\s*</p\s*>", re.IGNORECASE),
                re.compile(rf"<h\d[^>]*>\s*{label}\s*:?\s*</h\d\s*>", re.IGNORECASE),
                re.compile(
                    rf"<p[^>]*>\s*<(?:strong|b)\b[^>]*>\s*{label}\s*:?\s*</(?:strong|b)\s*>",
                    re.IGNORECASE,
                ),
            ]
        )
    return patterns


_META_PATTERNS = _build_meta_patterns()


def _find_meta_start(html: str) -> int | None:
    """Return the offset of the earliest trailing-meta marker, if any."""
    positions = [
        match.start()
        for pattern in (_HR, _SEPARATOR_RUN, *_META_PATTERNS)
        if (match := pattern.search(html))
    ]
    return min(positions) if positions else None


def truncate_meta_sections(html: str) -> str:
    """Drop everything from the first meta-section marker to the end.

    Markers are ``<hr>`` elements, runs of three or more ``-``, ``_``,
    ``=`` or ``*``, and paragraphs, headings or bold runs whose text is
    one of ``META_HEADINGS``.
    """
    start = _find_meta_start(html)
    if start is None:
        return html
    logger.debug(f"Truncating meta section at offset {start} of {len(html)}")
    return html[:start]


def _rewrite_tag(match: re.Match[str]) -> str:
    closing, name, attrs = match.group(1), match.group(2).lower(), match.group(3)

    if name == "div":
        return f"<{closing}p>"
    if name not in ALLOWED_TAGS:
        return ""
    if closing:
        return f"</{name}>"
    if name == "a":
        href = _HREF.search(attrs)
        return f'<a href="{href.group(1)}">' if href else "<a>"
    return f"<{name}>"


def filter_tags(html: str) -> str:
    """Reduce markup to the allow-listed tags.

    Scripts, styles and comments are removed with their content. Divs
    become paragraphs, and every other disallowed tag (spans included) is
    unwrapped so its text survives. Anchors keep only ``href``; all
    other tags lose their attributes.
    """
    cleaned = html
    # Removing a tag can join the text around it into a new tag
    previous = None
    while cleaned != previous:
        previous = cleaned
        cleaned = _SCRIPT.sub("", cleaned)
        cleaned = _STYLE.sub("", cleaned)
        cleaned = _COMMENT.sub("", cleaned)
        cleaned = _DECLARATION.sub("", cleaned)
        cleaned = _TAG.sub(_rewrite_tag, cleaned)
    return cleaned


def normalize_whitespace(html: str) -> str:
    """Collapse whitespace and separate block elements with blank lines."""
    cleaned = _INLINE_SPACE.sub(" ", html)
    cleaned = _SPACE_AFTER_TAG.sub(">", cleaned)
    cleaned = _SPACE_BEFORE_TAG.sub("<", cleaned)

    # Removing one empty paragraph can expose another around it
    removed = 1
    while removed:
        cleaned, removed = _EMPTY_PARAGRAPH.subn("", cleaned)

    cleaned = _BREAK_RUN.sub("<br><br>", cleaned)
    cleaned = _PARAGRAPH_BOUNDARY_RUN.sub("</p><p>", cleaned)
    return _BLOCK_BOUNDARY.sub(r"</\1>\n\n<\2>", cleaned)


def clean_html(html: str) -> str:
    """Normalize HTML to the publishable tag subset.

    Never raises: a pass that finds nothing to rewrite leaves the markup
    as it is. The result may be empty when nothing publishable remains.

    Args:
        html: Raw HTML from a converter or export.

    Returns:
        Markup restricted to ``ALLOWED_TAGS``.
    """
    cleaned = truncate_meta_sections(html)
    cleaned = filter_tags(cleaned)
    cleaned = normalize_whitespace(cleaned)
    # Unwrapped tags can leave a bare label paragraph behind
    cleaned = truncate_meta_sections(cleaned)
    cleaned = _LEADING_TEXT.sub("", cleaned, count=1)
    return cleaned.strip()


def clean_google_docs_html(html: str) -> str:
    """Normalize a Google Docs HTML export.

    Google Docs exports a complete document with a head, stylesheet,
    a title paragraph and ``doc-content`` wrappers. Only the body is kept
    and the export's own title is dropped before regular cleaning.
    """
    content = html
    body = _BODY.search(content)
    if body:
        content = body.group(1)

    content = _GDOCS_TITLE_P.sub("", content)
    content = _GDOCS_TITLE_H1.sub("", content)
    content = _GDOCS_WRAPPER.sub("", content)

    return clean_html(content)
