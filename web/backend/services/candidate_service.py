#!/usr/bin/env python3
"""
Candidate service - engagement leaderboard and public-choice panel.
"""

import logging
from typing import List

from pydantic import ValidationError

from core.cms_client import DirectusClient, CmsFetchError
from core.engagement import (
    CandidateEngagement,
    PanelMember,
    aggregate_engagement,
    rank_top_candidates,
    select_panel
)
from ..models.responses import TopCandidate, PanelMemberResponse
from ..exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)


class CandidateService:
    """Service for ranking candidates by engagement."""

    def __init__(self, cms: DirectusClient):
        self.cms = cms

    def get_top_candidates(self) -> List[TopCandidate]:
        """
        Get the ten most engaged candidates, best first.

        Raises:
            UpstreamFetchError: If candidate profiles could not be read.
        """
        candidates = self._load_candidates("Failed to fetch top candidates")
        return [self._to_top_candidate(c) for c in rank_top_candidates(candidates)]

    def get_public_choice_panel(self) -> List[PanelMemberResponse]:
        """
        Get the highest-scoring candidate for each position, best first.

        Raises:
            UpstreamFetchError: If candidate profiles could not be read.
        """
        candidates = self._load_candidates("Failed to fetch public-choice panel")
        panel = select_panel(candidates)
        logger.info(f"Selected {len(panel)} panel member(s) from {len(candidates)} candidate(s)")
        return [self._to_panel_member(m) for m in panel]

    # Private methods

    def _load_candidates(self, error_message: str) -> List[CandidateEngagement]:
        """Fetch participating profiles and score them. All or nothing."""
        try:
            rows = self.cms.get_candidate_profiles()
            return aggregate_engagement(rows)
        except CmsFetchError as e:
            raise UpstreamFetchError(error_message, details=e.detail or str(e)) from e
        except ValidationError as e:
            raise UpstreamFetchError(
                error_message,
                details=f"Malformed candidate profile data: {e.error_count()} error(s)"
            ) from e

    def _to_top_candidate(self, candidate: CandidateEngagement) -> TopCandidate:
        return TopCandidate(
            id=candidate.id,
            name=candidate.name,
            image=candidate.image,
            department=candidate.department,
            position=candidate.position,
            total_score=candidate.total_score,
            profile_comments=candidate.profile_comments,
            profile_votes=candidate.profile_votes
        )

    def _to_panel_member(self, member: PanelMember) -> PanelMemberResponse:
        return PanelMemberResponse(
            id=member.id,
            name=member.name,
            image=member.image,
            department=member.department,
            position=member.position,
            total_score=member.total_score,
            profile_comments=member.profile_comments,
            profile_votes=member.profile_votes
        )
