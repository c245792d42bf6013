#!/usr/bin/env python3
"""
Unit tests for the Directus CMS client.
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import requests

from core.cms_client import DirectusClient, CmsFetchError, CANDIDATE_PROFILE_FIELDS
from core.config_loader import CmsConfig


def _response(status_code=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = "Service Unavailable" if status_code >= 500 else "OK"
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


class TestDirectusClient(unittest.TestCase):
    """Unit tests for DirectusClient."""

    def setUp(self):
        self.client = DirectusClient("http://cms.local/", token="secret", request_timeout_seconds=5)
        self.client.session = MagicMock()

    def test_auth_header_set_from_token(self):
        client = DirectusClient("http://cms.local", token="secret")
        self.assertEqual(client.session.headers["Authorization"], "Bearer secret")
        client.close()

    def test_no_auth_header_without_token(self):
        client = DirectusClient("http://cms.local")
        self.assertNotIn("Authorization", client.session.headers)
        client.close()

    def test_from_config(self):
        client = DirectusClient.from_config(
            CmsConfig(url="http://cms.example", token="t", request_timeout_seconds=12)
        )
        self.assertEqual(client.base_url, "http://cms.example")
        self.assertEqual(client.request_timeout_seconds, 12)
        client.close()

    def test_fetch_items_unwraps_data(self):
        self.client.session.get.return_value = _response(body={"data": [{"id": 1}, {"id": 2}]})

        items = self.client.fetch_items("profile", {"limit": 2})

        self.assertEqual(items, [{"id": 1}, {"id": 2}])
        self.client.session.get.assert_called_once_with(
            "http://cms.local/items/profile",
            params={"limit": 2},
            timeout=5
        )

    def test_fetch_items_null_data_is_empty(self):
        self.client.session.get.return_value = _response(body={"data": None})

        self.assertEqual(self.client.fetch_items("profile"), [])

    def test_non_success_status_raises(self):
        self.client.session.get.return_value = _response(status_code=503, body={})

        with self.assertRaises(CmsFetchError) as ctx:
            self.client.fetch_items("profile")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.detail, "Service Unavailable")

    def test_network_error_raises(self):
        self.client.session.get.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(CmsFetchError) as ctx:
            self.client.fetch_items("profile")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("connection refused", ctx.exception.detail)

    def test_network_error_not_retried(self):
        self.client.session.get.side_effect = requests.Timeout("timed out")

        with self.assertRaises(CmsFetchError):
            self.client.fetch_items("profile")

        self.assertEqual(self.client.session.get.call_count, 1)

    def test_invalid_json_raises(self):
        self.client.session.get.return_value = _response(json_error=ValueError("Expecting value"))

        with self.assertRaises(CmsFetchError):
            self.client.fetch_items("profile")

    def test_data_not_a_list_raises(self):
        self.client.session.get.return_value = _response(body={"data": {"id": 1}})

        with self.assertRaises(CmsFetchError):
            self.client.fetch_items("profile")

    def test_body_not_an_object_raises(self):
        self.client.session.get.return_value = _response(body=[{"id": 1}])

        with self.assertRaises(CmsFetchError):
            self.client.fetch_items("profile")

    def test_get_candidate_profiles_query(self):
        self.client.session.get.return_value = _response(body={"data": []})

        self.client.get_candidate_profiles()

        args, kwargs = self.client.session.get.call_args
        self.assertEqual(args[0], "http://cms.local/items/profile")
        params = kwargs["params"]
        self.assertEqual(params["filter[candidate_profile][_nnull]"], "true")
        self.assertEqual(params["filter[candidate_profile][isParticipating][_eq]"], "true")
        self.assertEqual(params["fields"].split(","), CANDIDATE_PROFILE_FIELDS)
        self.assertEqual(params["limit"], -1)

    def test_get_trending_blog_candidates_query(self):
        self.client.session.get.return_value = _response(body={"data": []})
        since = datetime(2026, 2, 1, tzinfo=timezone.utc)

        self.client.get_trending_blog_candidates(since=since, limit=50)

        args, kwargs = self.client.session.get.call_args
        self.assertEqual(args[0], "http://cms.local/items/blogs")
        params = kwargs["params"]
        self.assertEqual(params["filter[status][_eq]"], "published")
        self.assertEqual(
            params["filter[current_published_version][approved_at][_gte]"],
            "2026-02-01T00:00:00+00:00"
        )
        self.assertEqual(params["sort"], "-date_updated")
        self.assertEqual(params["limit"], 50)

    def test_context_manager_closes_session(self):
        with patch("core.cms_client.requests.Session") as session_cls:
            with DirectusClient("http://cms.local") as client:
                self.assertIs(client.session, session_cls.return_value)

        session_cls.return_value.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()
