#!/usr/bin/env python3
"""
Panel endpoints - automatically composed public-choice panel.
"""

from typing import List
from fastapi import APIRouter, Depends

from core.cms_client import DirectusClient
from ..dependencies import get_cms_client
from ..services.candidate_service import CandidateService
from ..models.responses import PanelMemberResponse

router = APIRouter(prefix="/api/panel", tags=["panel"])


@router.get("/public-choice", response_model=List[PanelMemberResponse])
def get_public_choice_panel(cms: DirectusClient = Depends(get_cms_client)):
    """
    Get the public-choice panel: the highest-scoring candidate per position.

    Candidates without a position are not eligible. Positions with no
    participating candidates are left out.
    """
    service = CandidateService(cms)
    return service.get_public_choice_panel()
