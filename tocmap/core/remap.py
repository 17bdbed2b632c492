"""
헤딩 트리 → TOC 재구성
마크다운 파이프라인이 생성한 원본 헤딩 트리를 렌더링용 TOC 구조로 변환합니다.
각 파일은 h1을 하나만 가져야 하며, h1 자체는 TOC에 포함되지 않습니다.
"""

import logging
import re
from typing import List, Dict, Any, Optional, Sequence, Union

from ..models.toc import HeadingNode, TOCItem
from .heading import parse_heading_id, trimmed_title

# 로깅 설정
logger = logging.getLogger(__name__)

# 컴파일된 MDX 소스에서 h1 생성 호출을 나타내는 패턴
H1_PATTERN = r'mdx\("h1"'

NodeInput = Union[HeadingNode, Dict[str, Any]]


def _as_node(node: NodeInput) -> HeadingNode:
    if isinstance(node, HeadingNode):
        return node
    return HeadingNode.from_dict(node)


class TOCRemapper:
    """헤딩 트리를 TOC 항목 트리로 변환하는 클래스"""

    def __init__(self, h1_pattern: str = H1_PATTERN):
        """
        TOC 변환기를 초기화합니다.

        Args:
            h1_pattern: 컴파일된 소스에서 h1 헤딩을 찾는 정규식
        """
        self.h1_pattern = h1_pattern
        self._h1_regex = re.compile(h1_pattern)

    def count_h1(self, compiled_source: str) -> int:
        """컴파일된 소스에서 h1 생성 호출 수를 셉니다."""
        return sum(1 for _ in self._h1_regex.finditer(compiled_source or ""))

    def parse_item(self, node: NodeInput) -> TOCItem:
        """
        헤딩 노드의 제목을 정리하고 앵커 URL을 추출합니다. 하위 항목은 재귀적으로 처리합니다.

        title은 'A note on names {#a-note-on-names}' 형태로 들어오고,
        url은 '#a-note-on-names' 형태가 됩니다. {#name}이 없으면 slugify(title)을 사용합니다.

        Args:
            node: HeadingNode 또는 {"title", "url"?, "items"?} 딕셔너리

        Returns:
            정리된 TOCItem
        """
        node = _as_node(node)
        item = TOCItem(
            title=trimmed_title(node.title),
            url=f"#{parse_heading_id(node.title)}",
        )
        logger.debug(f"TOC 항목 변환: {node.title!r} -> {item.url}")

        if node.items is not None:
            item.items = [self.parse_item(child) for child in node.items]
        return item

    def remap(
        self,
        toc_node_items: Sequence[NodeInput],
        compiled_source: str = "",
        h1_count: Optional[int] = None,
    ) -> List[TOCItem]:
        """
        헤딩 트리 추출기가 생성한 TOC를 재구성합니다.

        Args:
            toc_node_items: 최상위 헤딩 노드 리스트
            compiled_source: 컴파일된 문서 소스 (h1 개수 계산용)
            h1_count: 구조화된 출력에서 이미 알고 있는 h1 개수. 지정하면 소스 검사를 건너뜁니다.

        Returns:
            TOCItem 리스트
        """
        nodes = [_as_node(node) for node in toc_node_items]
        if not nodes:
            logger.debug("빈 헤딩 트리입니다.")
            return []

        if h1_count is None:
            h1_count = self.count_h1(compiled_source)

        first = nodes[0]
        if h1_count > 1 and first.url is not None:
            logger.warning("More than one h1 found in file at id: %s", first.url)

        # 첫 번째 노드는 h1을 나타내는 래퍼이므로 하위 항목만 사용
        if h1_count > 0 and first.items is not None:
            nodes = first.items

        items = [self.parse_item(node) for node in nodes]
        logger.debug(f"TOC 재구성 완료: h1={h1_count}, 최상위 항목={len(items)}개")
        return items


_default_remapper = TOCRemapper()


def parse_item(node: NodeInput) -> TOCItem:
    """기본 변환기로 헤딩 노드 하나를 변환합니다."""
    return _default_remapper.parse_item(node)


def remap_table_of_contents(
    toc_node_items: Sequence[NodeInput],
    compiled_source: str,
    h1_count: Optional[int] = None,
) -> List[TOCItem]:
    """
    기본 변환기로 헤딩 트리를 TOC로 재구성합니다.

    Args:
        toc_node_items: 최상위 헤딩 노드 리스트
        compiled_source: 컴파일된 문서 소스
        h1_count: 이미 알고 있는 h1 개수 (선택)

    Returns:
        TOCItem 리스트
    """
    return _default_remapper.remap(toc_node_items, compiled_source, h1_count)
