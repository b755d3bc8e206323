"""Agno agent service that derives post metadata from article content.

The model is asked for a JSON object (title, description, excerpt,
category, tags, author, SEO fields). Whatever it leaves out is filled
with defaults so a post can always be built from the result.
"""

import json
import logging
import re
from datetime import date

from agno.agent import Agent
from agno.models.openai import OpenAIChat

from docpress.agent.config import AgentConfig, get_agent_config
from docpress.models.schemas import DocumentMetadata, MetadataSource, PostFormat

logger = logging.getLogger(__name__)

SEO_TITLE_MAX = 60
SEO_DESCRIPTION_MAX = 160

_CODE_FENCE_OPEN = re.compile(r"```(?:json)?\n?")
_CODE_FENCE_CLOSE = re.compile(r"```$")
_FILE_EXTENSION = re.compile(r"\.[^/.]+$")


class MetadataExtractionError(Exception):
    """Raised when the model reply cannot be turned into metadata."""

    pass


def generate_slug(title: str) -> str:
    """Build a URL slug from a title.

    Example:
        >>> generate_slug("Tom & Jerry's  Budget Tips")
        'tom-jerrys-budget-tips'
    """
    slug = re.sub(r"[^a-z0-9\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    return re.sub(r"-+", "-", slug)


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = _CODE_FENCE_OPEN.sub("", text)
        text = _CODE_FENCE_CLOSE.sub("", text).strip()
    return text


class MetadataService:
    """Service wrapping an Agno agent for metadata and copy editing.

    Keeps the prompt wording and the reply parsing in one place so the
    API layer only deals with DocumentMetadata.
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the metadata service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            description="An editorial assistant preparing blog articles for publishing.",
            instructions=[
                "Follow the requested output format exactly.",
                "Never add explanations around the requested output.",
            ],
            markdown=False,
        )

    def _metadata_prompt(self, content: str, file_name: str) -> str:
        categories = ", ".join(f'"{c}"' for c in self._config.categories)
        article = content[: self._config.max_content_chars]
        return f"""Analyze the following blog article content and extract metadata. The file name is "{file_name}".

Return a JSON object with these fields:
- title: The best title for this article (clear, engaging, SEO-friendly)
- description: A 1-2 sentence description of the article
- excerpt: A compelling excerpt (2-3 sentences) for previews/social sharing
- category: The main category this article belongs to. Choose ONE from: {categories}
- tags: An array of 3-7 relevant tags (lowercase, can be multi-word phrases like "emergency fund", "credit score")
- author: Suggest an author name or use "{self._config.default_author}"
- seoTitle: An SEO-optimized title ({SEO_TITLE_MAX} characters max)
- seoDescription: An SEO-optimized meta description ({SEO_DESCRIPTION_MAX} characters max)

Article content:
{article}

Respond with ONLY the JSON object, no additional text or markdown formatting."""

    async def _ask(self, prompt: str) -> str:
        response = await self._agent.arun(prompt)
        text = response.content if response else None
        if not text or not str(text).strip():
            raise MetadataExtractionError("No response from language model")
        return str(text)

    def build_metadata(self, reply: dict, file_name: str) -> DocumentMetadata:
        """Fill a parsed model reply with defaults.

        Args:
            reply: Decoded JSON object from the model.
            file_name: Source file name, used when no title is given.

        Returns:
            Complete DocumentMetadata tagged as AI-sourced.
        """
        title = reply.get("title") or _FILE_EXTENSION.sub("", file_name)
        description = reply.get("description") or ""
        tags = reply.get("tags") or []

        return DocumentMetadata(
            title=title,
            slug=generate_slug(title),
            description=description,
            excerpt=reply.get("excerpt") or description,
            category=reply.get("category") or "General",
            tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
            author=reply.get("author") or self._config.default_author,
            publish_date=date.today(),
            seo_title=reply.get("seoTitle") or title[:SEO_TITLE_MAX],
            seo_description=reply.get("seoDescription") or description[:SEO_DESCRIPTION_MAX],
            format=PostFormat.STANDARD,
            metadata_source=MetadataSource.AI,
        )

    async def extract_metadata(self, content: str, file_name: str) -> DocumentMetadata:
        """Ask the model for post metadata.

        Args:
            content: Clean article body.
            file_name: Source file name, given to the model as a hint.

        Returns:
            DocumentMetadata with every field populated.

        Raises:
            MetadataExtractionError: Empty reply or reply that is not a JSON object.
        """
        reply = await self._ask(self._metadata_prompt(content, file_name))

        try:
            parsed = json.loads(_strip_code_fences(reply))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse model response: {reply}")
            raise MetadataExtractionError("Failed to parse metadata from model response") from e

        if not isinstance(parsed, dict):
            raise MetadataExtractionError("Model response is not a JSON object")

        metadata = self.build_metadata(parsed, file_name)
        logger.info(f"Extracted metadata for {file_name}: {metadata.title!r}")
        return metadata

    async def improve_content(self, content: str) -> str:
        """Ask the model to polish grammar and clarity of an article.

        Returns:
            The improved article text.
        """
        prompt = f"""Review and improve the following blog article content. Fix any grammar issues, improve clarity, and ensure it's well-structured. Keep the same general content and style, just polish it.

Return ONLY the improved content, no explanations or markdown formatting.

Article content:
{content}"""
        return (await self._ask(prompt)).strip()


# Module-level singleton instance
_metadata_service: MetadataService | None = None


def get_metadata_service() -> MetadataService:
    """Get or create the global metadata service.

    Returns:
        The MetadataService instance.

    Raises:
        ValidationError: If no API key is configured.
    """
    global _metadata_service
    if _metadata_service is None:
        _metadata_service = MetadataService()
    return _metadata_service
