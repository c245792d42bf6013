#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator

from core.cms_client import DirectusClient
from .config import get_config


def get_cms_client() -> Generator[DirectusClient, None, None]:
    """
    FastAPI dependency that yields a CMS client for one request.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(cms: DirectusClient = Depends(get_cms_client)):
            ...

    Yields:
        DirectusClient: Client that is closed once the request finishes.
    """
    config = get_config()
    with DirectusClient.from_config(config.cms) as client:
        yield client
