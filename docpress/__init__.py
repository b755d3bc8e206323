"""docpress - publish drive documents as clean WordPress posts.

Combines FastAPI for the HTTP surface, Agno for LLM metadata,
pypdf and mammoth for conversions, and Pydantic for data validation.

Components:
    - parsing: Format dispatch, HTML normalization, title and frontmatter handling
    - agent: LLM-derived post metadata
    - publishing: WordPress REST client and publish workflow
    - store: In-memory document store
    - api: HTTP endpoints
    - models: Document, metadata, and payload schemas
"""

__version__ = "0.1.0"
