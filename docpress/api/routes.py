"""Document endpoints (upload and processing, metadata, copy editing,
featured images, publishing) and the WordPress connection check."""

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from docpress.agent.metadata_agent import (
    MetadataExtractionError,
    MetadataService,
    generate_slug,
    get_metadata_service,
)
from docpress.models.schemas import (
    ConnectionTestResponse,
    Document,
    DocumentListResponse,
    DocumentMetadata,
    DocumentStatus,
    MediaUploadResult,
    ProcessedDocumentResponse,
    PublishRequest,
    PublishResult,
)
from docpress.parsing.errors import ConversionError, UnsupportedFormatError
from docpress.parsing.pdf_parser import MAX_FILE_SIZE
from docpress.parsing.processor import process_document
from docpress.parsing.title import extract_title
from docpress.publishing.config import get_wordpress_config
from docpress.publishing.service import DocumentNotReadyError, PublishService
from docpress.publishing.wordpress import WordPressClient, WordPressError
from docpress.store import DocumentNotFoundError, DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])
wordpress_router = APIRouter(prefix="/wordpress", tags=["wordpress"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE
DEFAULT_MIME_TYPE = "application/octet-stream"


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_metadata_service_dependency() -> MetadataService:
    try:
        return get_metadata_service()
    except ValidationError as e:
        logger.error(f"Metadata service not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Metadata service not configured",
        ) from e


async def get_wordpress_client() -> AsyncGenerator[WordPressClient]:
    try:
        config = get_wordpress_config()
    except ValidationError as e:
        logger.error(f"WordPress not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="WordPress not configured",
        ) from e

    async with WordPressClient(config) as client:
        yield client


WordPressClientDep = Annotated[WordPressClient, Depends(get_wordpress_client)]


def get_publish_service(client: WordPressClientDep) -> PublishService:
    return PublishService(client)


StoreDep = Annotated[DocumentStore, Depends(get_store)]
MetadataServiceDep = Annotated[MetadataService, Depends(get_metadata_service_dependency)]


def _get_document(store: DocumentStore, document_id: str) -> Document:
    try:
        return store.get(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found",
        ) from e


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("", response_model=ProcessedDocumentResponse)
async def upload_document(
    file: UploadFile,
    store: StoreDep,
    mime_type: Annotated[str | None, Form()] = None,
) -> ProcessedDocumentResponse:
    """Upload a document and turn it into clean post content.

    The declared content type comes from the ``mime_type`` form field, or
    the upload's own content type when the field is absent. The first
    heading becomes the title and is removed from the body.

    Raises:
        400: Missing filename.
        413: File exceeds 10MB limit.
        415: Unsupported content type.
        422: Conversion failed or the document has no content.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )
    filename = file.filename
    declared_type = mime_type or file.content_type or DEFAULT_MIME_TYPE

    content = await _read_and_validate_size(file)

    try:
        body = await run_in_threadpool(process_document, content, declared_type, filename)
    except UnsupportedFormatError as e:
        logger.warning(f"Unsupported upload {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=str(e),
        ) from e
    except ConversionError as e:
        logger.warning(f"Conversion failed for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e

    if not body.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail="Document produced no content",
        )

    extracted = extract_title(body)
    metadata = None
    if extracted.title:
        metadata = DocumentMetadata(
            title=extracted.title,
            slug=generate_slug(extracted.title),
        )

    document = store.create(
        name=filename,
        mime_type=declared_type,
        status=DocumentStatus.PROCESSED,
        content=extracted.content_without_title,
        metadata=metadata,
    )
    logger.info(f"Processed {filename} as {declared_type} (title: {extracted.title!r})")

    return ProcessedDocumentResponse(document=document, title=extracted.title)


@router.get("", response_model=DocumentListResponse)
async def list_documents(store: StoreDep) -> DocumentListResponse:
    return DocumentListResponse(documents=store.list_documents())


@router.get("/{document_id}", response_model=Document)
async def get_document(document_id: str, store: StoreDep) -> Document:
    return _get_document(store, document_id)


@router.post("/{document_id}/metadata", response_model=Document)
async def generate_metadata(
    document_id: str,
    store: StoreDep,
    service: MetadataServiceDep,
) -> Document:
    """Derive post metadata for a processed document with the LLM.

    A title taken from the document's own heading is kept over the
    model's suggestion.

    Raises:
        404: Unknown document.
        409: Document has no content.
        502: Model reply could not be used.
        503: Metadata service not configured.
    """
    document = _get_document(store, document_id)
    if not document.content:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Document has no content",
        )

    try:
        metadata = await service.extract_metadata(document.content, document.name)
    except MetadataExtractionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    if document.metadata and document.metadata.title:
        metadata = metadata.model_copy(
            update={"title": document.metadata.title, "slug": document.metadata.slug}
        )

    return store.update(document_id, metadata=metadata)


@router.post("/{document_id}/improve", response_model=Document)
async def improve_document(
    document_id: str,
    store: StoreDep,
    service: MetadataServiceDep,
) -> Document:
    """Replace the document body with a copy-edited version from the LLM.

    Raises:
        404: Unknown document.
        409: Document has no content.
        502: Model gave no usable reply.
        503: Metadata service not configured.
    """
    document = _get_document(store, document_id)
    if not document.content:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Document has no content",
        )

    try:
        improved = await service.improve_content(document.content)
    except MetadataExtractionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    logger.info(f"Improved content of {document.name}")
    return store.update(document_id, content=improved)


@router.post("/{document_id}/featured-image", response_model=MediaUploadResult)
async def upload_featured_image(
    document_id: str,
    file: UploadFile,
    store: StoreDep,
    client: WordPressClientDep,
) -> MediaUploadResult:
    """Upload an image to the media library and use it as the featured image.

    Raises:
        404: Unknown document.
        409: Document has no metadata yet.
        413: File exceeds 10MB limit.
        415: File is not an image.
        502: WordPress rejected the upload.
        503: WordPress not configured.
    """
    document = _get_document(store, document_id)
    if document.metadata is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Document has no metadata",
        )

    content_type = file.content_type or DEFAULT_MIME_TYPE
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"File is not an image: {content_type}",
        )

    content = await _read_and_validate_size(file)

    try:
        media = await client.upload_media(content, file.filename or "featured-image", content_type)
    except WordPressError as e:
        logger.error(f"Featured image upload failed for {document.name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    result = MediaUploadResult(media_id=media["id"], media_url=media.get("source_url"))
    store.update(
        document_id,
        metadata=document.metadata.model_copy(update={"featured_media_id": result.media_id}),
    )
    return result


@router.post("/{document_id}/publish", response_model=PublishResult)
async def publish_document(
    document_id: str,
    payload: PublishRequest,
    store: StoreDep,
    service: Annotated[PublishService, Depends(get_publish_service)],
) -> PublishResult:
    """Publish a processed document to WordPress as a draft or live post.

    Raises:
        404: Unknown document.
        409: Document not processed or without metadata.
        502: WordPress rejected the request.
        503: WordPress not configured.
    """
    document = _get_document(store, document_id)

    try:
        result = await service.publish(document, payload.status, payload.overrides)
    except DocumentNotReadyError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    except WordPressError as e:
        logger.error(f"Failed to publish {document.name}: {e}")
        store.update(document_id, status=DocumentStatus.ERROR, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    store.mark_published(document_id, result)
    return result


@wordpress_router.get("/test", response_model=ConnectionTestResponse)
async def check_wordpress_connection(client: WordPressClientDep) -> ConnectionTestResponse:
    """Check that the configured WordPress credentials are accepted."""
    try:
        await client.test_connection()
    except WordPressError as e:
        logger.warning(f"WordPress connection check failed: {e}")
        return ConnectionTestResponse(success=False, error=str(e))
    return ConnectionTestResponse(success=True)
