"""리소스 파일(YAML) 로더 유틸리티"""
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

from proper_sort.core.logging import logger, sanitize_for_log


def get_resource_path(relative_path: str) -> str:
    """패키지 기준 리소스 절대 경로 반환"""
    # proper_sort/utils/resource_loader.py -> proper_sort/utils -> proper_sort
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(path: str) -> Dict[str, Any]:
    """YAML 파일 로드 및 캐싱

    Raises:
        FileNotFoundError: 파일이 없을 때
        yaml.YAMLError: YAML 문법 오류
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    logger.debug(f"YAML resource loaded: {sanitize_for_log(path)}")
    return data
