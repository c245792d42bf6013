"""Directus CMS client with connection reuse."""

import logging
from datetime import datetime
from typing import Optional, Dict, Any, List

import requests

from core.config_loader import CmsConfig

logger = logging.getLogger(__name__)


CANDIDATE_PROFILE_FIELDS = [
    "id",
    "name",
    "image",
    "department.name",
    "candidate_profile.id",
    "candidate_profile.status",
    "candidate_profile.isParticipating",
    "candidate_profile.position.name",
    "profile_votes.id",
    "comments.id",
    "blogs.id",
    "blogs.reactions.id",
    "blogs.comments.id",
]

TRENDING_BLOG_FIELDS = [
    "id",
    "title",
    "views",
    "date_updated",
    "author.id",
    "author.name",
    "author.image",
    "current_published_version.id",
    "current_published_version.title",
    "current_published_version.excerpt",
    "current_published_version.thumbnail",
    "current_published_version.tags",
    "current_published_version.category.id",
    "current_published_version.category.text",
    "current_published_version.approved_at",
    "reactions.id",
    "reactions.value",
]


class CmsFetchError(Exception):
    """Raised when a read from the CMS fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class DirectusClient:
    """
    Client for the Directus REST API.

    Responsibilities:
    - Own a requests.Session for connection reuse
    - Authenticate with the service bearer token
    - Run item queries and unwrap the `data` envelope

    Failures are never retried: any transport error, non-2xx status or
    malformed body raises CmsFetchError.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        request_timeout_seconds: int = 30
    ):
        self.base_url = base_url.rstrip("/")
        self.request_timeout_seconds = request_timeout_seconds

        self.session = requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

        logger.debug(
            f"DirectusClient initialized: base_url={self.base_url}, "
            f"timeout={request_timeout_seconds}s"
        )

    @classmethod
    def from_config(cls, config: CmsConfig) -> "DirectusClient":
        return cls(
            base_url=config.url,
            token=config.token,
            request_timeout_seconds=config.request_timeout_seconds
        )

    def fetch_items(
        self,
        collection: str,
        params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch items from a collection.

        Args:
            collection: Directus collection name (e.g. "profile").
            params: Query parameters (filters, fields, sort, limit).

        Returns:
            The list found under the response's `data` key. A null `data`
            is returned as an empty list.

        Raises:
            CmsFetchError: On network errors, non-2xx responses or a body
                that is not a `{"data": [...]}` object.
        """
        url = f"{self.base_url}/items/{collection}"

        try:
            response = self.session.get(
                url,
                params=params,
                timeout=self.request_timeout_seconds
            )
        except requests.RequestException as e:
            raise CmsFetchError(
                f"Request to CMS collection '{collection}' failed",
                detail=str(e)
            ) from e

        if not response.ok:
            raise CmsFetchError(
                f"CMS returned {response.status_code} for collection '{collection}'",
                status_code=response.status_code,
                detail=response.reason
            )

        try:
            body = response.json()
        except ValueError as e:
            raise CmsFetchError(
                f"CMS returned invalid JSON for collection '{collection}'",
                status_code=response.status_code,
                detail=str(e)
            ) from e

        if not isinstance(body, dict):
            raise CmsFetchError(
                f"Unexpected response shape for collection '{collection}'",
                status_code=response.status_code,
                detail="response body is not an object"
            )

        data = body.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise CmsFetchError(
                f"Unexpected response shape for collection '{collection}'",
                status_code=response.status_code,
                detail="'data' is not a list"
            )

        logger.debug(f"Fetched {len(data)} item(s) from '{collection}'")
        return data

    def get_candidate_profiles(self) -> List[Dict[str, Any]]:
        """Fetch participating candidate profiles with nested engagement relations."""
        params = {
            "filter[candidate_profile][_nnull]": "true",
            "filter[candidate_profile][isParticipating][_eq]": "true",
            "fields": ",".join(CANDIDATE_PROFILE_FIELDS),
            "limit": -1,
        }
        return self.fetch_items("profile", params)

    def get_trending_blog_candidates(
        self,
        since: datetime,
        limit: int = 50
    ) -> List[Dict[str, Any]]:
        """Fetch recently approved published blogs for trending calculation."""
        params = {
            "filter[status][_eq]": "published",
            "filter[current_published_version][_nnull]": "true",
            "filter[current_published_version][approved_at][_gte]": since.isoformat(),
            "sort": "-date_updated",
            "limit": limit,
            "fields": ",".join(TRENDING_BLOG_FIELDS),
        }
        return self.fetch_items("blogs", params)

    def close(self):
        """Close the session and release resources."""
        self.session.close()
        logger.debug("DirectusClient session closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
