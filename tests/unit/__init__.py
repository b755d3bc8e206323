"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Normalization passes, title and frontmatter handling, dispatch
    - agent/: Metadata agent configuration and reply parsing
    - publishing/: WordPress client and publish workflow
    - store: In-memory document store

Uses mocks for the LLM and an httpx mock transport for WordPress.
"""
