"""
TOC 포맷팅 유틸리티
"""

from typing import List, Dict, Any

from ..models.toc import TOCItem


def toc_to_dicts(items: List[TOCItem]) -> List[Dict[str, Any]]:
    """TOC 항목 리스트를 JSON 직렬화용 딕셔너리 리스트로 변환합니다."""
    return [item.to_dict() for item in items]


def format_toc_markdown(items: List[TOCItem], indent: int = 2) -> str:
    """
    TOC를 마크다운 글머리 목록으로 포맷팅합니다.

    Args:
        items: TOC 항목 리스트
        indent: 레벨당 들여쓰기 공백 수

    Returns:
        '- [제목](#id)' 형태의 줄로 이루어진 마크다운 문자열
    """
    lines = []

    def walk(nodes: List[TOCItem], level: int):
        for node in nodes:
            lines.append(f"{' ' * (indent * level)}- [{node.title}]({node.url})")
            if node.items:
                walk(node.items, level + 1)

    walk(items, 0)
    return "\n".join(lines)


def format_toc_tree(items: List[TOCItem]) -> str:
    """
    TOC를 터미널 출력용 트리 형태로 포맷팅합니다.

    Args:
        items: TOC 항목 리스트

    Returns:
        포맷팅된 트리 문자열
    """
    if not items:
        return "TOC 항목 없음"

    lines = []

    def walk(nodes: List[TOCItem], prefix: str):
        for i, node in enumerate(nodes):
            last = i == len(nodes) - 1
            connector = "└─" if last else "├─"
            lines.append(f"{prefix}{connector} {node.title} ({node.url})")
            if node.items:
                walk(node.items, prefix + ("   " if last else "│  "))

    walk(items, "")
    return "\n".join(lines)


def count_items(items: List[TOCItem]) -> int:
    """하위 항목을 포함한 전체 TOC 항목 수"""
    return sum(1 + count_items(item.items or []) for item in items)


def max_depth(items: List[TOCItem]) -> int:
    """TOC 트리의 최대 깊이"""
    if not items:
        return 0
    return 1 + max(max_depth(item.items or []) for item in items)
