"""WordPress publishing for processed documents.

Responsibilities:
    - WordPress REST client (posts, categories, tags, media) with basic auth
    - Post payload construction, scheduling, and Yoast SEO fields
    - Create-or-update publishing of tracked documents
"""

from docpress.publishing.config import WordPressConfig, get_wordpress_config
from docpress.publishing.service import DocumentNotReadyError, PublishService, build_post
from docpress.publishing.wordpress import WordPressClient, WordPressError

__all__ = [
    "DocumentNotReadyError",
    "PublishService",
    "WordPressClient",
    "WordPressConfig",
    "WordPressError",
    "build_post",
    "get_wordpress_config",
]
