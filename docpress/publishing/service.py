"""Publishing of processed documents as WordPress posts."""

import logging
from datetime import datetime, time

from docpress.models.schemas import (
    Document,
    DocumentMetadata,
    MetadataOverrides,
    PostFormat,
    PostStatus,
    PublishResult,
    WordPressPost,
)
from docpress.publishing.wordpress import WordPressClient

logger = logging.getLogger(__name__)

# Scheduled posts go out at noon site time
SCHEDULE_TIME = time(12, 0)


class DocumentNotReadyError(Exception):
    """Raised when a document without content or metadata is published."""

    pass


def merge_metadata(metadata: DocumentMetadata, overrides: MetadataOverrides | None) -> DocumentMetadata:
    """Apply editor overrides on top of stored metadata."""
    if overrides is None:
        return metadata
    return metadata.model_copy(update=overrides.model_dump(exclude_none=True))


def schedule_date(metadata: DocumentMetadata, now: datetime) -> str | None:
    """Return the post date when publishing is scheduled for the future.

    WordPress uses the current time when no date is sent, so past and
    present dates are left out.
    """
    if metadata.publish_date is None:
        return None
    scheduled = datetime.combine(metadata.publish_date, SCHEDULE_TIME)
    if scheduled <= now:
        return None
    return scheduled.isoformat()


def build_post(
    content: str,
    metadata: DocumentMetadata,
    status: PostStatus,
    now: datetime,
    category_id: int | None = None,
    tag_ids: list[int] | None = None,
) -> WordPressPost:
    """Build the WordPress payload for a document.

    Yoast SEO fields fall back to the post title and excerpt.
    """
    return WordPressPost(
        title=metadata.title,
        content=content,
        excerpt=metadata.excerpt,
        slug=metadata.slug or None,
        status=status,
        author=metadata.author_id,
        date=schedule_date(metadata, now),
        categories=[category_id] if category_id is not None else None,
        tags=tag_ids or None,
        featured_media=metadata.featured_media_id,
        format=metadata.format or PostFormat.STANDARD,
        meta={
            "_yoast_wpseo_title": metadata.seo_title or metadata.title,
            "_yoast_wpseo_metadesc": metadata.seo_description or metadata.excerpt,
        },
    )


class PublishService:
    """Creates or updates WordPress posts for processed documents."""

    def __init__(self, client: WordPressClient) -> None:
        self._client = client

    async def publish(
        self,
        document: Document,
        status: PostStatus = PostStatus.DRAFT,
        overrides: MetadataOverrides | None = None,
        now: datetime | None = None,
    ) -> PublishResult:
        """Publish a processed document.

        A document that already has a WordPress post ID updates that post
        instead of creating a new one.

        Args:
            document: Processed document with content and metadata.
            status: Post status to save with.
            overrides: Metadata fields to replace before publishing.
            now: Reference time for scheduling; defaults to the current time.

        Returns:
            PublishResult with the post ID and link.

        Raises:
            DocumentNotReadyError: The document has no content or metadata.
            WordPressError: The WordPress API rejected a request.
        """
        if not document.content or document.metadata is None:
            raise DocumentNotReadyError("Document must be processed before publishing")

        metadata = merge_metadata(document.metadata, overrides)
        category_id = await self._client.get_or_create_category(metadata.category)
        tag_ids = await self._client.get_or_create_tags(metadata.tags) if metadata.tags else []

        post = build_post(
            document.content,
            metadata,
            status,
            now or datetime.now(),
            category_id=category_id,
            tag_ids=tag_ids,
        )

        is_update = document.wp_post_id is not None
        if is_update:
            result = await self._client.update_post(document.wp_post_id, post)
        else:
            result = await self._client.create_post(post)

        logger.info(f"Published {document.name} as post {result['id']} ({status.value})")
        return PublishResult(
            post_id=result["id"],
            post_url=result.get("link"),
            is_update=is_update,
            wp_status=status,
        )
