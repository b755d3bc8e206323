"""Integration tests for the HTTP API.

Uploads real sample files through the document endpoints. The LLM and
WordPress are replaced through FastAPI dependency overrides.
"""
