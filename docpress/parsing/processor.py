"""Format dispatch from declared content type to publishable text.

Google Docs exports and Word files end up as normalized HTML, PDFs as
extracted text, and markdown as text without its frontmatter.
"""

import logging

from docpress.models.schemas import RawDocument
from docpress.parsing.errors import UnsupportedFormatError
from docpress.parsing.frontmatter import strip_frontmatter
from docpress.parsing.normalizer import clean_google_docs_html, clean_html
from docpress.parsing.pdf_parser import parse_pdf
from docpress.parsing.word import convert_word_to_html

logger = logging.getLogger(__name__)

GOOGLE_DOC = "application/vnd.google-apps.document"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MS_WORD = "application/msword"
PDF = "application/pdf"
MARKDOWN = "text/markdown"
X_MARKDOWN = "text/x-markdown"
PLAIN_TEXT = "text/plain"

SUPPORTED_MIME_TYPES = (GOOGLE_DOC, DOCX, MS_WORD, PDF, MARKDOWN, X_MARKDOWN, PLAIN_TEXT)


def _as_text(content: bytes | str) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def _as_bytes(content: bytes | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


def process_document(content: bytes | str, mime_type: str, file_name: str) -> str:
    """Turn a source file into publishable markup or text.

    The declared content type is matched exactly. Unknown types fall back
    to markdown when the file name ends in ``.md``.

    Args:
        content: Raw file bytes, or the export string for Google Docs.
        mime_type: Declared content type of the file.
        file_name: Display name, used for the extension fallback.

    Returns:
        Normalized HTML for Google Docs and Word files, extracted text for
        PDFs, and trimmed text for markdown and plain text. May be empty.

    Raises:
        UnsupportedFormatError: Unknown content type and no ``.md`` suffix.
        ConversionError: The Word or PDF conversion failed.
    """
    logger.debug(f"Processing {file_name!r} as {mime_type}")

    if mime_type == GOOGLE_DOC:
        return clean_google_docs_html(_as_text(content))

    if mime_type in (DOCX, MS_WORD):
        return clean_html(convert_word_to_html(_as_bytes(content)))

    if mime_type == PDF:
        return parse_pdf(_as_bytes(content)).text

    if mime_type in (MARKDOWN, X_MARKDOWN, PLAIN_TEXT):
        return strip_frontmatter(_as_text(content))

    if file_name.endswith(".md"):
        logger.info(f"Treating {file_name!r} ({mime_type}) as markdown by extension")
        return strip_frontmatter(_as_text(content))

    raise UnsupportedFormatError(mime_type, file_name)


def process_raw_document(document: RawDocument) -> str:
    """Run ``process_document`` on a RawDocument."""
    return process_document(document.content, document.mime_type, document.file_name)
