#!/usr/bin/env python3
"""
tocmap 패키지 기본 사용 예제

이 예제는 tocmap을 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

import json

# tocmap 패키지 import
from tocmap import (
    HeadingNode,
    remap_table_of_contents,
    split_heading,
    format_toc_tree,
    toc_to_dicts,
)

COMPILED_SOURCE = 'mdx("h1", null, "Wallets"), mdx("h2", null, "Custody")'

HEADING_TREE = [
    {
        "title": "Wallets <Emoji name=\"wallet\"/>",
        "url": "#wallets",
        "items": [
            {"title": "What is a wallet?", "url": "#what-is-a-wallet"},
            {
                "title": "A note on names {#a-note-on-names}",
                "url": "#a-note-on-names",
                "items": [{"title": "Custody types", "url": "#custody-types"}],
            },
        ],
    }
]


def main():
    """기본 사용 예제"""
    print("📚 tocmap 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 헤딩 하나 처리
    title, anchor = split_heading("A note on names {#a-note-on-names}")
    print(f"제목: {title!r}, 앵커: #{anchor}")

    # 2. 딕셔너리 헤딩 트리 변환
    items = remap_table_of_contents(HEADING_TREE, COMPILED_SOURCE)
    print("\n📖 TOC 트리:")
    print(format_toc_tree(items))

    # 3. 데이터클래스 입력도 사용 가능 (h1 개수를 직접 지정)
    nodes = [HeadingNode.from_dict(node) for node in HEADING_TREE]
    items = remap_table_of_contents(nodes, "", h1_count=0)
    print("\n📄 JSON 출력 (래퍼 유지):")
    print(json.dumps(toc_to_dicts(items), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
