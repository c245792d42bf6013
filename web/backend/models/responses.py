#!/usr/bin/env python3
"""
Response models for API endpoints.

Field names are snake_case in Python and serialized as camelCase, which is
what the frontend consumes.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class TopCandidate(BaseModel):
    """A candidate on the engagement leaderboard."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "9b2f6c1e-4d1a-4a8e-9f55-2d3c1b7a0e11",
                "name": "Ama Mensah",
                "image": "a1f0c3d2-avatar",
                "department": "Computer Science",
                "position": "President",
                "totalScore": 34.0,
                "profileComments": 0,
                "profileVotes": 10
            }
        }
    )

    id: str
    name: Optional[str]
    image: Optional[str]
    department: Optional[str]
    position: Optional[str]
    total_score: float = Field(alias="totalScore", ge=0)
    profile_comments: int = Field(alias="profileComments", ge=0)
    profile_votes: int = Field(alias="profileVotes", ge=0)


class PanelMemberResponse(TopCandidate):
    """The winning candidate for one position."""
    position: str


class TrendingAuthor(BaseModel):
    id: Optional[str]
    name: Optional[str]
    avatar: Optional[str]


class TrendingBlogResponse(BaseModel):
    """A blog on the trending list."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: Optional[str]
    excerpt: str
    thumbnail: Optional[str]
    author: Optional[TrendingAuthor]
    category: str
    tags: List[str]
    published_at: str = Field(alias="publishedAt")
    views: int = Field(ge=0)
    likes: int = Field(ge=0)
    loves: int = Field(ge=0)
    total_reactions: int = Field(alias="totalReactions", ge=0)
    trending_score: float = Field(alias="trendingScore", ge=0)


class HealthResponse(BaseModel):
    status: str
    service: str
