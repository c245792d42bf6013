#!/usr/bin/env python3
"""
Test fixtures for CMS responses.

Builders produce rows shaped like the Directus `profile` and `blogs`
queries, with nested relations expanded to `{"id": ...}` objects.
"""
import copy
from typing import Optional, List, Dict, Any


def _refs(prefix: str, count: int) -> List[Dict[str, Any]]:
    return [{"id": f"{prefix}-{i}"} for i in range(count)]


def make_profile(
    profile_id: str,
    position: Optional[str] = None,
    votes: int = 0,
    blog_reactions: Optional[List[int]] = None,
    blog_comments: Optional[List[int]] = None,
    profile_comments: int = 0,
    name: Optional[str] = None,
    department: Optional[str] = "Computer Science",
) -> Dict[str, Any]:
    """
    Build a candidate profile row.

    blog_reactions / blog_comments give per-blog counts; both lists are
    padded with zeros to the same number of blogs.
    """
    blog_reactions = blog_reactions or []
    blog_comments = blog_comments or []
    blog_count = max(len(blog_reactions), len(blog_comments))
    blog_reactions = blog_reactions + [0] * (blog_count - len(blog_reactions))
    blog_comments = blog_comments + [0] * (blog_count - len(blog_comments))

    blogs = []
    for i in range(blog_count):
        blogs.append({
            "id": f"{profile_id}-blog-{i}",
            "reactions": _refs(f"{profile_id}-blog-{i}-reaction", blog_reactions[i]),
            "comments": _refs(f"{profile_id}-blog-{i}-comment", blog_comments[i]),
        })

    candidate_profile = {
        "id": f"{profile_id}-cp",
        "status": "approved",
        "isParticipating": True,
        "position": {"name": position} if position else None,
    }

    return {
        "id": profile_id,
        "name": name or f"Candidate {profile_id}",
        "image": f"{profile_id}-avatar",
        "department": {"name": department} if department else None,
        "candidate_profile": candidate_profile,
        "profile_votes": _refs(f"{profile_id}-vote", votes),
        "comments": _refs(f"{profile_id}-comment", profile_comments),
        "blogs": blogs,
    }


# ============================================================================
# THREE-CANDIDATE ELECTION
# A: President, 10 votes, 2 reactions, 1 blog comment      -> 34.0
# B: President, 5 votes, 2 profile comments                 -> 18.0
# C: Secretary, 1 vote, 1 reaction, 1 blog comment, 1 comment -> 7.5
# ============================================================================

ELECTION_PROFILES = [
    make_profile("A", position="President", votes=10, blog_reactions=[2], blog_comments=[1]),
    make_profile("B", position="President", votes=5, profile_comments=2),
    make_profile("C", position="Secretary", votes=1, blog_reactions=[1], blog_comments=[1],
                 profile_comments=1),
]


def election_profiles() -> List[Dict[str, Any]]:
    """Return a fresh copy of the three-candidate election rows."""
    return copy.deepcopy(ELECTION_PROFILES)


BARE_PROFILE = {
    "id": "bare",
    "name": "No Activity",
    "image": None,
    "department": None,
    "candidate_profile": None,
    "profile_votes": None,
    "comments": None,
    "blogs": None,
}


def make_blog(
    blog_id: str,
    approved_at: Optional[str],
    views: Optional[int] = 0,
    reactions: Optional[List[str]] = None,
    title: str = "Campus Life",
    version_title: Optional[str] = None,
    category: Optional[str] = None,
    published: bool = True,
) -> Dict[str, Any]:
    """Build a `blogs` row. `reactions` lists reaction values, e.g. ["like", "love"]."""
    version = None
    if published:
        version = {
            "id": f"{blog_id}-v1",
            "title": version_title,
            "excerpt": None,
            "thumbnail": None,
            "tags": None,
            "category": {"id": "cat-1", "text": category} if category else None,
            "approved_at": approved_at,
        }

    return {
        "id": blog_id,
        "title": title,
        "views": views,
        "date_updated": approved_at,
        "author": {"id": "author-1", "name": "Kofi Boateng", "image": None},
        "current_published_version": version,
        "reactions": [
            {"id": f"{blog_id}-r{i}", "value": value}
            for i, value in enumerate(reactions or [])
        ],
    }
