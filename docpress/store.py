"""In-memory store for documents moving through the publishing workflow.

The store is an explicit object owned by whoever creates it (the API app
keeps one on ``app.state``). Contents do not survive a restart.
"""

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

from docpress.models.schemas import Document, DocumentStatus, PublishResult

logger = logging.getLogger(__name__)


class DocumentNotFoundError(KeyError):
    """Raised when a document ID is not in the store."""

    pass


class DocumentStore:
    """Keyed map of tracked documents."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def add(self, document: Document) -> Document:
        self._documents[document.id] = document
        return document

    def create(self, name: str, mime_type: str, **fields: Any) -> Document:
        """Store a new document under a generated ID."""
        document = Document(id=uuid.uuid4().hex, name=name, mime_type=mime_type, **fields)
        logger.debug(f"Stored document {document.id} ({name})")
        return self.add(document)

    def get(self, document_id: str) -> Document:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def list_documents(self) -> list[Document]:
        return list(self._documents.values())

    def update(self, document_id: str, **fields: Any) -> Document:
        """Replace fields of a stored document and return the new version."""
        document = self.get(document_id).model_copy(update=fields)
        self._documents[document_id] = document
        return document

    def mark_published(self, document_id: str, result: PublishResult) -> Document:
        """Record the WordPress post a document was published as."""
        return self.update(
            document_id,
            status=DocumentStatus.PUBLISHED,
            wp_post_id=result.post_id,
            wp_post_url=result.post_url,
            wp_status=result.wp_status,
            wp_published_at=datetime.now(UTC),
        )
