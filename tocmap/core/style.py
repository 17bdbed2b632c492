"""
TOC 목록 스타일 설정
데스크톱과 모바일 렌더러의 최상위 목록 요소에 공통으로 사용되는 속성입니다.
"""

import copy
from types import MappingProxyType
from typing import Dict, Any

_OUTER_LIST_PROPS: Dict[str, Any] = {
    "borderStart": "1px solid",
    "borderStartColor": "dropdownBorder",
    "borderTop": 0,
    "fontSize": "sm",
    "lineHeight": 1.6,
    "fontWeight": 400,
    "m": 0,
    "mt": 2,
    "mb": 2,
    "ps": 4,
    "pe": 1,
    "pt": 0,
    "sx": {
        "@media (max-width: var(--eth-breakpoints-lg))": {
            "borderStart": 0,
            "borderTop": "1px",
            "borderTopColor": "primary300",
            "ps": 0,
            "pt": 4,
        },
    },
}


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(val) for key, val in value.items()})
    return value


# 읽기 전용 공유 상수
OUTER_LIST_PROPS = _freeze(_OUTER_LIST_PROPS)


def outer_list_props() -> Dict[str, Any]:
    """덮어쓰기가 필요한 호출자를 위해 수정 가능한 깊은 복사본을 반환합니다."""
    return copy.deepcopy(_OUTER_LIST_PROPS)
