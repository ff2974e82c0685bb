"""Pydantic 스키마 정의 (사이즈 어휘 리소스)"""
import re
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from proper_sort.text.kinds import SizeRank

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_ASCII_WS_RE = re.compile(r"[ \t\n\r\f]+")


def fold_ascii_case(text: str) -> str:
    """ASCII 대문자만 소문자로 (그 외 문자는 그대로)"""
    return text.translate(_ASCII_LOWER)


def normalize_size_form(text: str) -> str:
    """YAML 표기 정규화: ASCII 소문자화 + ASCII 공백 1칸으로 축약

    테이블 키에만 적용합니다. 조회는 fold_ascii_case 결과로 정확히 일치해야 합니다.
    """
    return _ASCII_WS_RE.sub(" ", fold_ascii_case(text)).strip(" ")


class SizeTableSchema(BaseModel):
    """sizes.yaml 구조: {rank 이름: [표기, ...]}"""
    sizes: Dict[str, List[str]] = Field(..., min_length=1, description="SizeRank 이름별 표기 목록")

    @field_validator('sizes')
    @classmethod
    def validate_sizes(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """rank 이름 검증 및 표기 정규화"""
        normalized: Dict[str, List[str]] = {}
        for name, forms in v.items():
            if name not in SizeRank.__members__:
                raise ValueError(f'알 수 없는 사이즈 rank: {name}')
            cleaned = [normalize_size_form(form) for form in forms]
            if not all(cleaned):
                raise ValueError(f'{name}: 빈 표기는 허용되지 않습니다')
            normalized[name] = cleaned
        return normalized

    @model_validator(mode='after')
    def validate_unique_forms(self) -> 'SizeTableSchema':
        """하나의 표기가 여러 rank에 매핑되면 안 됨"""
        seen: Dict[str, str] = {}
        for name, forms in self.sizes.items():
            for form in forms:
                owner = seen.setdefault(form, name)
                if owner != name:
                    raise ValueError(f"표기 '{form}'이(가) {owner}, {name}에 중복 정의되어 있습니다")
        return self

    def to_mapping(self) -> Dict[str, SizeRank]:
        return {
            form: SizeRank[name]
            for name, forms in self.sizes.items()
            for form in forms
        }
