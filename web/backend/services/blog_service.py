#!/usr/bin/env python3
"""
Blog service - trending blog ranking.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import ValidationError

from core.cms_client import DirectusClient, CmsFetchError
from core.config_loader import TrendingConfig
from core.engagement import TrendingBlog, rank_trending_blogs
from ..models.responses import TrendingBlogResponse, TrendingAuthor
from ..exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)


class BlogService:
    """Service for blog listings derived from engagement."""

    def __init__(self, cms: DirectusClient, config: Optional[TrendingConfig] = None):
        self.cms = cms
        self.config = config or TrendingConfig()

    def get_trending(
        self,
        limit: int,
        now: Optional[datetime] = None
    ) -> List[TrendingBlogResponse]:
        """
        Get the trending blogs among recently approved posts.

        Args:
            limit: Maximum number of blogs to return.
            now: Reference time (defaults to the current UTC time).

        Returns:
            Blogs sorted by trending score (highest first).

        Raises:
            UpstreamFetchError: If blogs could not be read.
        """
        now = now or datetime.now(timezone.utc)
        since = now - timedelta(days=self.config.window_days)

        try:
            rows = self.cms.get_trending_blog_candidates(
                since=since,
                limit=self.config.fetch_limit
            )
            ranked = rank_trending_blogs(
                rows,
                limit=limit,
                now=now,
                age_exponent=self.config.age_exponent
            )
        except CmsFetchError as e:
            raise UpstreamFetchError(
                "Failed to fetch trending blogs",
                details=e.detail or str(e)
            ) from e
        except ValidationError as e:
            raise UpstreamFetchError(
                "Failed to fetch trending blogs",
                details=f"Malformed blog data: {e.error_count()} error(s)"
            ) from e

        return [self._to_response(blog) for blog in ranked]

    def _to_response(self, blog: TrendingBlog) -> TrendingBlogResponse:
        return TrendingBlogResponse(
            id=blog.id,
            title=blog.title,
            excerpt=blog.excerpt,
            thumbnail=blog.thumbnail,
            author=TrendingAuthor(**blog.author) if blog.author else None,
            category=blog.category,
            tags=blog.tags,
            published_at=blog.published_at.isoformat(),
            views=blog.views,
            likes=blog.likes,
            loves=blog.loves,
            total_reactions=blog.total_reactions,
            trending_score=blog.trending_score
        )
