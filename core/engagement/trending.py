#!/usr/bin/env python3
"""
Trending Blogs - Rank recently published blogs by decayed engagement.

A blog's trending score is its engagement divided by a power of its age:

    (reactions * 2 + views) / max(1, age_days) ** 1.2

so new posts with some traction outrank older posts with more.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Dict, Any, Optional, Union, Iterable

from pydantic import BaseModel, Field, field_validator

from core.engagement.ranking import id_order

logger = logging.getLogger(__name__)

REACTION_WEIGHT = 2.0
DEFAULT_AGE_EXPONENT = 1.2
DEFAULT_CATEGORY = "General"
SECONDS_PER_DAY = 60 * 60 * 24


class CmsBlogAuthor(BaseModel):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    image: Optional[str] = None


class CmsBlogCategory(BaseModel):
    id: Optional[Union[int, str]] = None
    text: Optional[str] = None


class CmsPublishedVersion(BaseModel):
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    excerpt: Optional[str] = None
    thumbnail: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[CmsBlogCategory] = None
    approved_at: Optional[datetime] = None

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        return [] if value is None else value


class CmsReaction(BaseModel):
    id: Optional[Union[int, str]] = None
    value: Optional[str] = None


class CmsTrendingBlog(BaseModel):
    """A published blog row with its current version and reactions."""
    id: Union[int, str]
    title: Optional[str] = None
    views: int = 0
    date_updated: Optional[datetime] = None
    author: Optional[CmsBlogAuthor] = None
    current_published_version: Optional[CmsPublishedVersion] = None
    reactions: List[Optional[CmsReaction]] = Field(default_factory=list)

    @field_validator('views', mode='before')
    @classmethod
    def normalize_views(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator('reactions', mode='before')
    @classmethod
    def normalize_reactions(cls, value: Any) -> Any:
        return [] if value is None else value


@dataclass
class TrendingBlog:
    """A ranked blog as presented on the trending list."""
    id: str
    title: Optional[str]
    excerpt: str
    thumbnail: Optional[str]
    author: Optional[Dict[str, Any]]
    category: str
    published_at: datetime
    views: int
    likes: int
    loves: int
    total_reactions: int
    trending_score: float
    tags: List[str] = field(default_factory=list)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def calculate_trending_score(
    reactions: int,
    views: int,
    approved_at: datetime,
    now: datetime,
    age_exponent: float = DEFAULT_AGE_EXPONENT
) -> float:
    """
    Calculate a blog's trending score.

    Args:
        reactions: Number of reactions on the blog.
        views: View count.
        approved_at: When the current version was approved for publishing.
        now: Reference time.
        age_exponent: How quickly older posts decay.

    Returns:
        Engagement over age in days (age is never less than one day).
    """
    age_days = (_as_utc(now) - _as_utc(approved_at)).total_seconds() / SECONDS_PER_DAY
    age_days = max(1.0, age_days)
    return (reactions * REACTION_WEIGHT + views) / (age_days ** age_exponent)


def _to_trending_blog(blog: CmsTrendingBlog, score: float) -> TrendingBlog:
    version = blog.current_published_version
    reaction_counts = Counter(r.value for r in blog.reactions if r is not None)

    author = None
    if blog.author is not None:
        author = {
            'id': None if blog.author.id is None else str(blog.author.id),
            'name': blog.author.name,
            'avatar': blog.author.image or None,
        }

    category = DEFAULT_CATEGORY
    if version.category and version.category.text:
        category = version.category.text

    return TrendingBlog(
        id=str(blog.id),
        title=version.title or blog.title,
        excerpt=version.excerpt or "",
        thumbnail=version.thumbnail or None,
        author=author,
        category=category,
        tags=list(version.tags),
        published_at=version.approved_at,
        views=blog.views,
        likes=reaction_counts.get('like', 0),
        loves=reaction_counts.get('love', 0),
        total_reactions=len(blog.reactions),
        trending_score=score
    )


def rank_trending_blogs(
    blogs: Iterable[Union[CmsTrendingBlog, Dict[str, Any]]],
    limit: int,
    now: Optional[datetime] = None,
    age_exponent: float = DEFAULT_AGE_EXPONENT
) -> List[TrendingBlog]:
    """
    Score and rank blogs, returning the `limit` best.

    Blogs without a published version (or without an approval time) are
    skipped. Equal scores fall back to blog id ascending.

    Raises:
        pydantic.ValidationError: If a raw row is malformed.
    """
    now = now or datetime.now(timezone.utc)

    scored = []
    for blog in blogs:
        if not isinstance(blog, CmsTrendingBlog):
            blog = CmsTrendingBlog.model_validate(blog)

        version = blog.current_published_version
        if version is None or version.approved_at is None:
            continue

        score = calculate_trending_score(
            reactions=len(blog.reactions),
            views=blog.views,
            approved_at=version.approved_at,
            now=now,
            age_exponent=age_exponent
        )
        scored.append((blog, score))

    scored.sort(key=lambda item: (-item[1], id_order(str(item[0].id))))
    logger.debug(f"Scored {len(scored)} published blog(s) for trending")

    return [_to_trending_blog(blog, score) for blog, score in scored[:limit]]
