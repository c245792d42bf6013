#!/usr/bin/env python3
"""
Candidate Ranking - Top-candidates leaderboard and public-choice panel.

Both orderings sort by total score descending. Equal scores fall back to
candidate id ascending (numeric ids by value, before any non-numeric ids)
so the output is deterministic.
"""

from typing import List, Dict, Tuple

from core.engagement.models import CandidateEngagement, PanelMember

TOP_CANDIDATES_LIMIT = 10


def id_order(item_id: str) -> Tuple[int, int, str]:
    """Sort key for CMS ids: "9" before "10", numeric ids before UUIDs."""
    if item_id.isascii() and item_id.isdigit():
        return (0, int(item_id), "")
    return (1, 0, item_id)


def _score_order(candidate: CandidateEngagement) -> Tuple[float, Tuple[int, int, str]]:
    return (-candidate.total_score, id_order(candidate.id))


def rank_top_candidates(
    candidates: List[CandidateEngagement],
    limit: int = TOP_CANDIDATES_LIMIT
) -> List[CandidateEngagement]:
    """
    Return the `limit` highest-scoring candidates, best first.

    Candidates without a position are ranked like everyone else.
    """
    return sorted(candidates, key=_score_order)[:limit]


def group_by_position(
    candidates: List[CandidateEngagement]
) -> Dict[str, List[CandidateEngagement]]:
    """Group candidates by exact position name, skipping those without one."""
    groups: Dict[str, List[CandidateEngagement]] = {}
    for candidate in candidates:
        if not candidate.position:
            continue
        groups.setdefault(candidate.position, []).append(candidate)
    return groups


def select_panel(candidates: List[CandidateEngagement]) -> List[PanelMember]:
    """
    Pick the highest-scoring candidate for each position.

    Steps:
    1. Drop candidates without a position
    2. Group the rest by position
    3. Take the best candidate of each group
    4. Sort the resulting panel by score, best first

    Positions nobody is running for do not appear in the panel.
    """
    panel = []
    for position_candidates in group_by_position(candidates).values():
        if not position_candidates:
            continue
        best = min(position_candidates, key=_score_order)
        panel.append(PanelMember.from_candidate(best))

    panel.sort(key=lambda member: (-member.total_score, id_order(member.id)))
    return panel
