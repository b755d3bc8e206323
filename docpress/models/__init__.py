"""Pydantic models for documents, metadata, and WordPress payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - RawDocument: Source file as read from the drive
    - TitleExtractionResult: Heading title and remaining body
    - DocumentMetadata: Post metadata (title, slug, SEO fields, taxonomy)
    - Document: Tracked document with processing and publish state
    - WordPressPost: REST payload for the posts endpoint
    - PublishResult: Outcome of a publish call
    - MediaUploadResult: Featured image stored in the media library
"""

from docpress.models.schemas import (
    ConnectionTestResponse,
    Document,
    DocumentListResponse,
    DocumentMetadata,
    DocumentStatus,
    MediaUploadResult,
    MetadataOverrides,
    MetadataSource,
    NormalizedDocument,
    PostFormat,
    PostStatus,
    ProcessedDocumentResponse,
    PublishRequest,
    PublishResult,
    RawDocument,
    TitleExtractionResult,
    WordPressPost,
)

__all__ = [
    "ConnectionTestResponse",
    "Document",
    "DocumentListResponse",
    "DocumentMetadata",
    "DocumentStatus",
    "MediaUploadResult",
    "MetadataOverrides",
    "MetadataSource",
    "NormalizedDocument",
    "PostFormat",
    "PostStatus",
    "ProcessedDocumentResponse",
    "PublishRequest",
    "PublishResult",
    "RawDocument",
    "TitleExtractionResult",
    "WordPressPost",
]
