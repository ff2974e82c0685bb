"""Size vocabulary - YAML 리소스 로드 및 분류"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

import yaml
from pydantic import ValidationError

from proper_sort.core.config import settings
from proper_sort.core.exceptions import NotASizeError, SizeTableException
from proper_sort.core.logging import logger, sanitize_for_log
from proper_sort.schemas.size_schema import SizeTableSchema, fold_ascii_case
from proper_sort.utils.resource_loader import get_resource_path, load_yaml_resource

from .kinds import SizeRank


def get_size_table_path() -> str:
    """설정 override가 없으면 패키지 내장 resources/sizes.yaml"""
    return settings.size_table_path or get_resource_path("sizes.yaml")


def load_size_table(path: Optional[str] = None) -> Mapping[str, SizeRank]:
    """
    사이즈 어휘 YAML을 로드해 읽기 전용 매핑으로 반환합니다.

    Returns:
        {"extra large": SizeRank.XL, "xl": SizeRank.XL, ...}

    Raises:
        SizeTableException: 파일 없음, YAML 오류, 스키마 위반
    """
    yaml_path = path or get_size_table_path()

    try:
        data = load_yaml_resource(yaml_path)
    except FileNotFoundError as e:
        raise SizeTableException(yaml_path, "file not found") from e
    except yaml.YAMLError as e:
        raise SizeTableException(yaml_path, f"YAML error: {e}") from e

    try:
        schema = SizeTableSchema.model_validate(data)
    except ValidationError as e:
        raise SizeTableException(yaml_path, f"{e.error_count()} validation error(s)",
                                 {"path": yaml_path, "errors": e.errors()}) from e

    mapping = schema.to_mapping()
    logger.info(f"Size table loaded: {len(mapping)} entries from {sanitize_for_log(yaml_path)}")
    return MappingProxyType(mapping)


# import 시 1회 구성, 이후 변경 없음
_SIZE_TABLE: Mapping[str, SizeRank] = load_size_table()


def size_table() -> Mapping[str, SizeRank]:
    """Read-only view of the active size vocabulary."""
    return _SIZE_TABLE


def parse_size(word: str) -> SizeRank:
    """Look a word or two-word phrase up in the size table.

    Matching is exact after ASCII case folding; there is no partial or
    fuzzy matching ("extra-large" is not a size). Surrounding or repeated
    whitespace is not trimmed, so a two-word phrase must use one space.

    Raises:
        NotASizeError: the phrase is not in the table.
    """
    rank = _SIZE_TABLE.get(fold_ascii_case(word))
    if rank is None:
        raise NotASizeError(word)
    return rank


def classify_size(word: str) -> Optional[SizeRank]:
    """사이즈면 rank, 아니면 None."""
    try:
        return parse_size(word)
    except NotASizeError:
        return None
