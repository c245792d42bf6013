#!/usr/bin/env python3
"""
Test suite for the union hub backend.

All tests are plain unit tests; the CMS is mocked, no network or database
is required:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Only the HTTP layer
    uv run python -m pytest tests/unit/web -v

Shared CMS row builders live in tests/fixtures/cms_fixtures.py.
"""
