"""Exceptions raised while turning source files into publishable markup."""


class DocumentProcessingError(Exception):
    """Base class for document processing failures."""

    pass


class UnsupportedFormatError(DocumentProcessingError):
    """Raised when neither the declared content type nor the file name is recognized."""

    def __init__(self, mime_type: str, file_name: str) -> None:
        self.mime_type = mime_type
        self.file_name = file_name
        super().__init__(f"Unsupported file type: {mime_type}")


class ConversionError(DocumentProcessingError):
    """Raised when a word-processor or PDF conversion fails."""

    pass
