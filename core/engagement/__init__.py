#!/usr/bin/env python3
"""
Engagement Module - Candidate engagement scoring and ranking.

Public API:
- aggregate_engagement: Build scored candidates from CMS profile rows
- rank_top_candidates: Top-N leaderboard
- select_panel: One winner per position
- rank_trending_blogs: Trending blog list

Modules:
- scoring.py: Engagement weights and score formula
- models.py: Validated CMS records, CandidateEngagement, PanelMember
- aggregator.py: Per-profile counting
- ranking.py: Leaderboard and panel selection
- trending.py: Time-decayed blog ranking
"""

from core.engagement.models import CandidateEngagement, PanelMember, CmsProfileRecord
from core.engagement.scoring import ENGAGEMENT_WEIGHTS, calculate_engagement_score
from core.engagement.aggregator import aggregate_engagement
from core.engagement.ranking import rank_top_candidates, select_panel, TOP_CANDIDATES_LIMIT
from core.engagement.trending import TrendingBlog, rank_trending_blogs, calculate_trending_score

__all__ = [
    'CandidateEngagement',
    'PanelMember',
    'CmsProfileRecord',
    'ENGAGEMENT_WEIGHTS',
    'calculate_engagement_score',
    'aggregate_engagement',
    'rank_top_candidates',
    'select_panel',
    'TOP_CANDIDATES_LIMIT',
    'TrendingBlog',
    'rank_trending_blogs',
    'calculate_trending_score',
]
