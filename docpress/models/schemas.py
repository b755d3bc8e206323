from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentStatus(str, Enum):
    """Lifecycle of a document in the publishing workflow."""

    PENDING = "pending"
    PROCESSED = "processed"
    PUBLISHED = "published"
    ERROR = "error"


class PostStatus(str, Enum):
    """WordPress post status values."""

    DRAFT = "draft"
    PUBLISH = "publish"
    PENDING = "pending"
    PRIVATE = "private"


class PostFormat(str, Enum):
    """WordPress post formats."""

    STANDARD = "standard"
    ASIDE = "aside"
    GALLERY = "gallery"
    LINK = "link"
    IMAGE = "image"
    QUOTE = "quote"
    STATUS = "status"
    VIDEO = "video"
    AUDIO = "audio"
    CHAT = "chat"


class MetadataSource(str, Enum):
    """Where a document's metadata came from."""

    SHEET = "sheet"
    AI = "ai"
    MANUAL = "manual"


class RawDocument(BaseModel):
    """A source file as read from the drive.

    Attributes:
        content: File bytes, or the HTML export string for Google Docs.
        mime_type: Declared content type.
        file_name: Display name of the file.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes | str
    mime_type: str
    file_name: str


class NormalizedDocument(BaseModel):
    """Body markup restricted to the publishable tag subset."""

    body: str


class TitleExtractionResult(BaseModel):
    """Title taken from the first heading and the body without it.

    Attributes:
        title: Plain-text heading, or None if there was no usable heading.
        content_without_title: Markup with that heading removed.
    """

    title: str | None
    content_without_title: str


class DocumentMetadata(BaseModel):
    """Post metadata derived from the tracking sheet, the LLM, or an editor."""

    title: str
    slug: str = ""
    description: str = ""
    excerpt: str = ""
    category: str = "General"
    tags: list[str] = Field(default_factory=list)
    author: str = ""
    author_id: int | None = None
    publish_date: date | None = None
    seo_title: str = ""
    seo_description: str = ""
    format: PostFormat = PostFormat.STANDARD
    featured_media_id: int | None = None
    metadata_source: MetadataSource | None = None


class Document(BaseModel):
    """A document tracked through processing and publishing."""

    id: str
    name: str
    mime_type: str
    status: DocumentStatus = DocumentStatus.PENDING
    content: str | None = None
    metadata: DocumentMetadata | None = None
    error: str | None = None
    wp_post_id: int | None = None
    wp_post_url: str | None = None
    wp_status: PostStatus | None = None
    wp_published_at: datetime | None = None


class WordPressPost(BaseModel):
    """Payload for the WordPress posts endpoint.

    Unset optional fields are left out of the request body.
    """

    title: str
    content: str
    excerpt: str = ""
    status: PostStatus = PostStatus.DRAFT
    slug: str | None = None
    author: int | None = None
    date: str | None = None
    categories: list[int] | None = None
    tags: list[int] | None = None
    featured_media: int | None = None
    format: PostFormat | None = None
    meta: dict[str, str] | None = None


class PublishResult(BaseModel):
    """Outcome of publishing a document to WordPress.

    Attributes:
        post_id: WordPress post ID.
        post_url: Public link of the post.
        is_update: Whether an existing post was updated.
        wp_status: Status the post was saved with.
    """

    post_id: int
    post_url: str | None = None
    is_update: bool = False
    wp_status: PostStatus


class MediaUploadResult(BaseModel):
    """Media library item created for a featured image."""

    media_id: int
    media_url: str | None = None


class ConnectionTestResponse(BaseModel):
    """Outcome of checking the WordPress credentials."""

    success: bool
    error: str | None = None


class ProcessedDocumentResponse(BaseModel):
    """Response after a document has been processed.

    Attributes:
        document: The stored document with its clean body.
        title: Title extracted from the first heading, if any.
    """

    document: Document
    title: str | None = None


class DocumentListResponse(BaseModel):
    documents: list[Document]


class MetadataOverrides(BaseModel):
    """Editor overrides applied on top of stored metadata before publishing."""

    title: str | None = None
    slug: str | None = None
    excerpt: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    author_id: int | None = None
    publish_date: date | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    format: PostFormat | None = None
    featured_media_id: int | None = None


class PublishRequest(BaseModel):
    """Request payload for publishing a processed document.

    Attributes:
        status: WordPress status to save the post with.
        overrides: Metadata fields to replace before publishing.
    """

    status: PostStatus = PostStatus.DRAFT
    overrides: MetadataOverrides | None = None

    @field_validator("status")
    @classmethod
    def only_draft_or_publish(cls, v: PostStatus) -> PostStatus:
        """Restrict publishing to draft or immediate publish."""
        if v not in (PostStatus.DRAFT, PostStatus.PUBLISH):
            raise ValueError("status must be 'draft' or 'publish'")
        return v
