"""FastAPI endpoints for the publishing workflow.

Endpoints:
    - GET /health: Service health status
    - POST /documents: Upload and process a document
    - GET /documents: List processed documents
    - GET /documents/{id}: Processed document
    - POST /documents/{id}/metadata: LLM-derived post metadata
    - POST /documents/{id}/improve: LLM copy editing of the body
    - POST /documents/{id}/featured-image: Featured image upload
    - POST /documents/{id}/publish: Publish to WordPress
    - GET /wordpress/test: WordPress credentials check
"""

from docpress.api.app import app, create_app

__all__ = ["app", "create_app"]
