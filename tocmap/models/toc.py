"""TOC (Table of Contents) related data models."""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass

from ..errors import TOCInputError


@dataclass
class HeadingNode:
    """헤딩 트리 추출기가 생성한 원본 헤딩 노드"""

    title: str
    url: Optional[str] = None
    items: Optional[List["HeadingNode"]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeadingNode":
        """
        딕셔너리(JSON) 형태에서 헤딩 노드를 재귀적으로 생성합니다.

        Args:
            data: {"title": str, "url"?: str, "items"?: list} 형태의 딕셔너리

        Returns:
            생성된 HeadingNode

        Raises:
            TOCInputError: title이 없거나 items가 리스트가 아닌 경우
        """
        if not isinstance(data, dict):
            raise TOCInputError(f"헤딩 노드는 객체여야 합니다: {data!r}")

        title = data.get("title")
        if not isinstance(title, str):
            raise TOCInputError(f"헤딩 노드에 title 문자열이 없습니다: {data!r}")

        items = None
        if "items" in data:
            raw_items = data["items"]
            if not isinstance(raw_items, list):
                raise TOCInputError(f"items는 리스트여야 합니다: {title!r}")
            items = [cls.from_dict(child) for child in raw_items]

        return cls(title=title, url=data.get("url"), items=items)


@dataclass
class TOCItem:
    """렌더링 레이어에 전달되는 정리된 TOC 항목"""

    title: str
    url: str
    items: Optional[List["TOCItem"]] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리로 변환합니다. 하위 목록이 없으면 items 키를 생략합니다."""
        data: Dict[str, Any] = {"title": self.title, "url": self.url}
        if self.items is not None:
            data["items"] = [item.to_dict() for item in self.items]
        return data
