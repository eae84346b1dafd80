"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from wishlist_scraper.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """패키지 기준 리소스 절대 경로 반환"""
    # wishlist_scraper/utils/resource_loader.py -> wishlist_scraper/utils -> wishlist_scraper
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


@lru_cache(maxsize=1)
def load_tracking_patterns() -> tuple[str, ...]:
    """추적 픽셀 URL 부분 문자열 목록 (소문자)"""
    data = load_yaml_resource("sites/tracking.yaml")
    return tuple(str(p).lower() for p in data.get("tracking_patterns", []) if p)


def load_site_rules(site: str) -> Dict[str, Any]:
    """사이트별 셀렉터/정규식 규칙 로드 (예: "amazon", "bestbuy")"""
    return load_yaml_resource(f"sites/{site}.yaml")
