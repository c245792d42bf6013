#!/usr/bin/env python3
"""
Engagement Aggregator - Turn raw CMS profile rows into scored candidates.
"""

import logging
from typing import List, Dict, Any, Iterable, Union

from core.engagement.models import CmsProfileRecord, CandidateEngagement

logger = logging.getLogger(__name__)


def build_candidate_engagement(record: CmsProfileRecord) -> CandidateEngagement:
    """Count a single profile's votes, comments and blog activity."""
    blogs = [blog for blog in record.blogs if blog is not None]
    return CandidateEngagement(
        id=str(record.id),
        name=record.name,
        image=record.image,
        department=record.department_name,
        position=record.position_name,
        profile_votes=len(record.profile_votes),
        blog_reactions=sum(len(blog.reactions) for blog in blogs),
        blog_comments=sum(len(blog.comments) for blog in blogs),
        profile_comments=len(record.comments)
    )


def aggregate_engagement(
    records: Iterable[Union[CmsProfileRecord, Dict[str, Any]]]
) -> List[CandidateEngagement]:
    """
    Build one CandidateEngagement per profile, in input order.

    Raw dicts are validated first. Candidates with no engagement are kept
    with a score of zero.

    Raises:
        pydantic.ValidationError: If a row has no id or a relation that is
            neither null nor a list of related rows.
    """
    candidates = []
    for record in records:
        if not isinstance(record, CmsProfileRecord):
            record = CmsProfileRecord.model_validate(record)
        candidates.append(build_candidate_engagement(record))

    logger.debug(f"Aggregated engagement for {len(candidates)} candidate(s)")
    return candidates
