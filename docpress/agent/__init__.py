"""Agno agent logic for LLM-derived post metadata.

Responsibilities:
    - Agent initialization with OpenAI-compatible models
    - Metadata extraction (title, excerpt, category, tags, SEO fields)
    - Optional copy editing of article content
    - Slug generation

Maintains clean separation from the HTTP layer.
"""

from docpress.agent.config import AgentConfig, get_agent_config
from docpress.agent.metadata_agent import (
    MetadataExtractionError,
    MetadataService,
    generate_slug,
    get_metadata_service,
)

__all__ = [
    "AgentConfig",
    "MetadataExtractionError",
    "MetadataService",
    "generate_slug",
    "get_agent_config",
    "get_metadata_service",
]
