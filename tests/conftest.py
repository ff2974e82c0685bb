"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 픽스처 (토크나이저, 샘플 상품명)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture
def decimal_tokenizer():
    from proper_sort.core.config import NumericMode
    from proper_sort.text.tokenizer import Tokenizer

    return Tokenizer(NumericMode.DECIMAL)


@pytest.fixture
def integer_tokenizer():
    from proper_sort.core.config import NumericMode
    from proper_sort.text.tokenizer import Tokenizer

    return Tokenizer(NumericMode.INTEGER)


@pytest.fixture
def product_titles() -> list[str]:
    """정렬 전 상품명 목록 (숫자/단위/사이즈 혼합)"""
    return [
        "Adapter P.M. to P.M. 165mm to 175mm",
        "Adapter P.M. to P.M. 160mm to 180mm",
        "T-Shirt L Black",
        "T-Shirt XS Black",
        "T-Shirt Extra Large Black",
        "T-Shirt Medium Black",
        "Crank 180mm Blue",
        "Crank 172.5mm Blue",
        "Crank 175mm Blue",
        "Crank 170mm Blue",
        "A",
        "b2",
        "b1",
        "2b",
        "1b",
        "a",
        "48T",
        "36T",
        "20mm",
        "5mm",
        "30 mm",
        "10 mm",
    ]


@pytest.fixture
def sorted_product_titles() -> list[str]:
    """product_titles의 기대 정렬 결과 (decimal 모드)"""
    return [
        "1b",
        "2b",
        "5mm",
        "10 mm",
        "20mm",
        "30 mm",
        "36T",
        "48T",
        "A",
        "a",
        "Adapter P.M. to P.M. 160mm to 180mm",
        "Adapter P.M. to P.M. 165mm to 175mm",
        "b1",
        "b2",
        "Crank 170mm Blue",
        "Crank 172.5mm Blue",
        "Crank 175mm Blue",
        "Crank 180mm Blue",
        "T-Shirt XS Black",
        "T-Shirt Medium Black",
        "T-Shirt L Black",
        "T-Shirt Extra Large Black",
    ]
