"""Document parsing and HTML normalization.

Turns exported and uploaded documents into clean, publishable markup.

Responsibilities:
    - Format dispatch by declared content type
    - Google Docs and Word HTML normalization to a safe tag subset
    - Removal of trailing meta/SEO notes authors leave below articles
    - Title extraction from the first heading
    - Frontmatter stripping and parsing for markdown
    - PDF text extraction with pypdf, Word conversion with mammoth
"""

from docpress.parsing.errors import ConversionError, DocumentProcessingError, UnsupportedFormatError
from docpress.parsing.frontmatter import parse_frontmatter, strip_frontmatter
from docpress.parsing.normalizer import clean_google_docs_html, clean_html
from docpress.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf
from docpress.parsing.processor import SUPPORTED_MIME_TYPES, process_document, process_raw_document
from docpress.parsing.title import extract_title
from docpress.parsing.word import WordConversionError, convert_word_to_html

__all__ = [
    "SUPPORTED_MIME_TYPES",
    "ConversionError",
    "DocumentProcessingError",
    "PDFContent",
    "PDFParseError",
    "UnsupportedFormatError",
    "WordConversionError",
    "clean_google_docs_html",
    "clean_html",
    "convert_word_to_html",
    "extract_title",
    "parse_frontmatter",
    "parse_pdf",
    "process_document",
    "process_raw_document",
    "strip_frontmatter",
]
