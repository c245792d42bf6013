import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel


class CmsConfig(BaseModel):
    url: str = "http://localhost:8055"
    token: Optional[str] = None
    request_timeout_seconds: int = 30


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class TrendingConfig(BaseModel):
    """Trending blog ranking settings.

    Only blogs approved within the last `window_days` are considered, and at
    most `fetch_limit` of the most recently updated ones are scored.
    """
    window_days: int = 30
    fetch_limit: int = 50
    default_limit: int = 4
    max_limit: int = 50
    age_exponent: float = 1.2


class AppConfig(BaseModel):
    cms: CmsConfig = CmsConfig()
    web: WebConfig = WebConfig()
    trending: TrendingConfig = TrendingConfig()


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for CMS connection (SERVER_BASE_URL / ADMIN_TOKEN are legacy names)
    env_cms_url = _first_env("CMS_URL", "SERVER_BASE_URL")
    if env_cms_url:
        data.setdefault('cms', {})
        data['cms']['url'] = env_cms_url

    env_cms_token = _first_env("CMS_TOKEN", "ADMIN_TOKEN")
    if env_cms_token:
        data.setdefault('cms', {})
        data['cms']['token'] = env_cms_token

    env_cms_timeout = os.environ.get("CMS_REQUEST_TIMEOUT")
    if env_cms_timeout:
        data.setdefault('cms', {})
        data['cms']['request_timeout_seconds'] = int(env_cms_timeout)

    # Allow env var override for the web server (Docker)
    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    for section in ('cms', 'web', 'trending'):
        if data.get(section) is None:
            data.pop(section, None)

    data = _apply_env_overrides(data)
    return AppConfig(**data)
