"""Frontmatter handling for markdown and plain-text documents.

A frontmatter block is a ``---`` delimited run of ``key: value`` lines at
the very start of a file.
"""

import re

_FRONTMATTER_BLOCK = re.compile(r"^---\n[\s\S]*?\n---\n")
_FRONTMATTER_BODY = re.compile(r"^---\n([\s\S]*?)\n---")
_SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']$")


def strip_frontmatter(text: str) -> str:
    """Remove a leading frontmatter block and trim the remainder.

    Args:
        text: Markdown or plain text, possibly starting with frontmatter.

    Returns:
        The text without its frontmatter block, trimmed. Input without a
        block is returned trimmed and otherwise unchanged.
    """
    return _FRONTMATTER_BLOCK.sub("", text, count=1).strip()


def parse_frontmatter(text: str) -> dict[str, str] | None:
    """Parse the leading frontmatter block into a dictionary.

    Each line is split on its first colon. Lines without a key are
    skipped and one pair of surrounding quotes is dropped from values.

    Args:
        text: Markdown or plain text.

    Returns:
        Mapping of keys to values, or None when there is no block.
    """
    match = _FRONTMATTER_BODY.match(text)
    if not match:
        return None

    frontmatter: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            continue
        frontmatter[key.strip()] = _SURROUNDING_QUOTES.sub("", value.strip())

    return frontmatter
