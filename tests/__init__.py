"""Test package for docpress.

Unit tests cover the parsing passes, metadata agent, publisher and store
in isolation; integration tests drive the HTTP API end to end.

Structure:
    - unit/: Individual function and class tests
    - integration/: API workflow tests
    - data/: Sample Word and PDF files

Leverages pytest with pytest-check for soft assertions.
"""
