#!/usr/bin/env python3
"""
Candidate endpoints - engagement leaderboard.
"""

from typing import List
from fastapi import APIRouter, Depends

from core.cms_client import DirectusClient
from ..dependencies import get_cms_client
from ..services.candidate_service import CandidateService
from ..models.responses import TopCandidate

router = APIRouter(prefix="/api/candidate", tags=["candidates"])


@router.get("/top", response_model=List[TopCandidate])
def get_top_candidates(cms: DirectusClient = Depends(get_cms_client)):
    """
    Get the top 10 candidates by engagement score.

    Score = 3 x profile votes + 1 x blog reactions + 2 x blog comments
    + 1.5 x profile comments. Returns candidates sorted by score (highest first).
    """
    service = CandidateService(cms)
    return service.get_top_candidates()
