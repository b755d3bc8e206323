"""Unit tests for Word to HTML conversion."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import pytest_check as check

from docpress.parsing.errors import ConversionError
from docpress.parsing.word import WordConversionError, convert_word_to_html

DATA_DIR = Path(__file__).parent.parent / "data"


class TestConvertWordToHtml:
    def test_converts_headings_and_bold(self) -> None:
        html = convert_word_to_html((DATA_DIR / "sample.docx").read_bytes())

        check.is_in("<h1>Saving for Retirement</h1>", html)
        check.is_in("<strong>stay consistent</strong>", html)
        check.is_in("<p>SEO Information</p>", html)

    def test_rejects_empty_bytes(self) -> None:
        with pytest.raises(WordConversionError, match="Empty file"):
            convert_word_to_html(b"")

    def test_wraps_converter_failure(self) -> None:
        with pytest.raises(WordConversionError, match="Failed to convert") as exc_info:
            convert_word_to_html(b"not a zip archive")

        check.is_instance(exc_info.value, ConversionError)
        check.is_not_none(exc_info.value.__cause__)

    def test_logs_conversion_messages(self, caplog: pytest.LogCaptureFixture) -> None:
        result = MagicMock(value="<p>x</p>")
        result.messages = [MagicMock(type="warning", message="Unrecognised paragraph style")]

        with patch("docpress.parsing.word.mammoth.convert_to_html", return_value=result):
            html = convert_word_to_html(b"docx bytes")

        check.equal(html, "<p>x</p>")
        check.is_in("Unrecognised paragraph style", caplog.text)
