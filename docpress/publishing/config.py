"""WordPress connection settings loaded from the environment."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class WordPressConfig(BaseModel):
    """Credentials and endpoint for the WordPress REST API.

    Attributes:
        url: Site root, e.g. https://blog.example.com.
        username: WordPress user owning the application password.
        app_password: Application password for basic auth.
        timeout: Request timeout in seconds.
    """

    url: str = Field(default_factory=lambda: os.getenv("WORDPRESS_URL", ""))
    username: str = Field(default_factory=lambda: os.getenv("WORDPRESS_USERNAME", ""))
    app_password: str = Field(default_factory=lambda: os.getenv("WORDPRESS_APP_PASSWORD", ""))
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require a site URL and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError("WORDPRESS_URL not configured")
        return v.strip().rstrip("/")

    @field_validator("username", "app_password")
    @classmethod
    def validate_credentials(cls, v: str) -> str:
        """Require both halves of the application password credentials."""
        if not v or not v.strip():
            raise ValueError("WordPress credentials not configured")
        return v.strip()

    @property
    def api_base(self) -> str:
        return f"{self.url}/wp-json/wp/v2"


def get_wordpress_config() -> WordPressConfig:
    """Create WordPress configuration from environment.

    Raises:
        ValueError: If the URL or credentials are missing.
    """
    return WordPressConfig()
