"""
헤딩 문자열 처리 유틸리티
헤딩 텍스트에서 앵커 ID를 만들고, 커스텀 ID와 Emoji 컴포넌트를 제거한 표시용 제목을 생성합니다.
"""

import re
from typing import Tuple
from urllib.parse import quote

# 정규식 패턴
CUSTOM_ID_PATTERN = re.compile(r"^.+(\s*\{#([^\}]+?)\}\s*)$")
EMOJI_PATTERN = re.compile(r"<Emoji [^/]+/>")

# encodeURIComponent와 동일하게 이스케이프하지 않는 문자
_URI_COMPONENT_SAFE = "-_.!~*'()"


def slugify(s: str) -> str:
    """
    문자열에서 슬러그를 생성합니다. (Hello world => hello-world)

    Args:
        s: 임의의 문자열

    Returns:
        소문자로 변환하고 공백을 하이픈으로 바꾼 뒤 URL 인코딩한 문자열
    """
    slug = re.sub(r"\s+", "-", str(s).strip().lower())
    return quote(slug, safe=_URI_COMPONENT_SAFE)


def parse_heading_id(heading: str) -> str:
    """
    헤딩 문자열에서 헤딩 ID를 추출합니다.
    커스텀 ID({#custom-id})가 있으면 그대로 사용하고, 없으면 슬러그를 생성합니다.

    Args:
        heading: 앞쪽 #이 제거된 헤딩 문자열

    Returns:
        헤딩 ID 문자열
    """
    match = CUSTOM_ID_PATTERN.match(heading)
    return match.group(2).lower() if match else slugify(heading)


def trimmed_title(title: str) -> str:
    """
    헤딩 문자열에서 커스텀 ID와 Emoji 컴포넌트를 제거합니다.

    Args:
        title: 아직 정리되지 않은 헤딩 문자열

    Returns:
        표시용 헤딩 문자열
    """
    match = CUSTOM_ID_PATTERN.match(title)
    trimmed = title.replace(match.group(1), "", 1).strip() if match else title

    # Emoji 제거 후에는 다시 trim하지 않음
    if EMOJI_PATTERN.search(trimmed):
        return EMOJI_PATTERN.sub("", trimmed)
    return trimmed


def split_heading(title: str) -> Tuple[str, str]:
    """헤딩 문자열을 (표시용 제목, 앵커 ID) 쌍으로 나눕니다."""
    return trimmed_title(title), parse_heading_id(title)
