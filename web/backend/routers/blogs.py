#!/usr/bin/env python3
"""
Blog endpoints - trending posts.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException

from core.cms_client import DirectusClient
from ..config import get_config
from ..dependencies import get_cms_client
from ..services.blog_service import BlogService
from ..models.responses import TrendingBlogResponse

router = APIRouter(prefix="/api/blog", tags=["blogs"])


@router.get("/trending", response_model=List[TrendingBlogResponse])
def get_trending_blogs(
    limit: Optional[int] = Query(default=None, ge=1, description="Maximum blogs to return"),
    cms: DirectusClient = Depends(get_cms_client)
):
    """
    Get trending blogs from the last 30 days.

    Trending score = (2 x reactions + views) / age_in_days ^ 1.2.
    Uses the configured default limit when none is given; the limit may not
    exceed the configured maximum.
    """
    trending_config = get_config().trending

    if limit is not None and limit > trending_config.max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit must be between 1 and {trending_config.max_limit}, got {limit}"
        )

    effective_limit = limit if limit is not None else trending_config.default_limit

    service = BlogService(cms, trending_config)
    return service.get_trending(limit=effective_limit)
