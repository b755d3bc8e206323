"""Word document to HTML conversion using mammoth."""

import io
import logging

import mammoth

from docpress.parsing.errors import ConversionError

logger = logging.getLogger(__name__)


class WordConversionError(ConversionError):
    """Raised when mammoth cannot convert a Word document."""

    pass


def convert_word_to_html(file_content: bytes) -> str:
    """Convert a Word document to HTML.

    mammoth reads the XML-based ``.docx`` format. Legacy binary ``.doc``
    files are not readable by it and fail with WordConversionError.

    Args:
        file_content: Raw bytes of the Word file.

    Returns:
        HTML produced by mammoth, not yet normalized.

    Raises:
        WordConversionError: If the file is empty or mammoth fails.
    """
    if not file_content:
        raise WordConversionError("Empty file provided")

    try:
        result = mammoth.convert_to_html(io.BytesIO(file_content))
    except Exception as e:
        raise WordConversionError(f"Failed to convert Word document: {e}") from e

    for message in result.messages:
        logger.warning(f"Word conversion {message.type}: {message.message}")

    return result.value
