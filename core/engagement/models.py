#!/usr/bin/env python3
"""
Engagement Models - Validated CMS records and ranking results.

Raw records (Cms*) mirror the nested JSON the CMS returns and are validated
on construction. CandidateEngagement and PanelMember are the per-request
projections built from them.
"""

from typing import List, Optional, Union, Any
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.engagement.scoring import calculate_engagement_score


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class CmsRelationRef(BaseModel):
    """A related row expanded only to its primary key."""
    id: Union[int, str]


# Entries hidden by nested-item permissions come back as null but still count.
RelationList = List[Optional[Union[CmsRelationRef, int, str]]]


class CmsDepartment(BaseModel):
    name: Optional[str] = None


class CmsPosition(BaseModel):
    name: Optional[str] = None


class CmsCandidateProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    is_participating: Optional[bool] = Field(None, alias="isParticipating")
    position: Optional[CmsPosition] = None


class CmsBlogActivity(BaseModel):
    """A blog authored by a profile, with its reactions and comments."""
    id: Optional[Union[int, str]] = None
    reactions: RelationList = Field(default_factory=list)
    comments: RelationList = Field(default_factory=list)

    @field_validator('reactions', 'comments', mode='before')
    @classmethod
    def normalize_relation_lists(cls, value: Any) -> Any:
        return _none_to_empty_list(value)


class CmsProfileRecord(BaseModel):
    """A candidate profile row with nested engagement relations."""
    id: Union[int, str]
    name: Optional[str] = None
    image: Optional[str] = None
    department: Optional[CmsDepartment] = None
    candidate_profile: Optional[CmsCandidateProfile] = None
    profile_votes: RelationList = Field(default_factory=list)
    comments: RelationList = Field(default_factory=list)
    blogs: List[Optional[CmsBlogActivity]] = Field(default_factory=list)

    @field_validator('profile_votes', 'comments', 'blogs', mode='before')
    @classmethod
    def normalize_relation_lists(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @property
    def department_name(self) -> Optional[str]:
        return self.department.name if self.department else None

    @property
    def position_name(self) -> Optional[str]:
        if self.candidate_profile and self.candidate_profile.position:
            return self.candidate_profile.position.name
        return None


@dataclass
class CandidateEngagement:
    """Engagement counts for one candidate. The score is always derived."""
    id: str
    name: Optional[str] = None
    image: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    profile_votes: int = 0
    blog_reactions: int = 0
    blog_comments: int = 0
    profile_comments: int = 0

    @property
    def total_score(self) -> float:
        return calculate_engagement_score(
            profile_votes=self.profile_votes,
            blog_reactions=self.blog_reactions,
            blog_comments=self.blog_comments,
            profile_comments=self.profile_comments
        )


@dataclass
class PanelMember:
    """The highest-scoring candidate for one position."""
    id: str
    name: Optional[str]
    image: Optional[str]
    department: Optional[str]
    position: str
    total_score: float
    profile_comments: int
    profile_votes: int

    @classmethod
    def from_candidate(cls, candidate: CandidateEngagement) -> 'PanelMember':
        if not candidate.position:
            raise ValueError(f"Candidate {candidate.id} has no position")
        return cls(
            id=candidate.id,
            name=candidate.name,
            image=candidate.image,
            department=candidate.department,
            position=candidate.position,
            total_score=candidate.total_score,
            profile_comments=candidate.profile_comments,
            profile_votes=candidate.profile_votes
        )
