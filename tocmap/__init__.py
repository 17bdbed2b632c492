"""
tocmap - 문서 헤딩 트리 기반 목차(TOC) 정규화 패키지

마크다운 파이프라인이 추출한 헤딩 트리에서 앵커 ID를 만들고 제목을 정리하여
문서 사이트의 TOC 렌더링에 사용할 수 있는 구조로 재구성합니다.
"""

__version__ = "0.1.0"
__author__ = "tocmap Team"
__email__ = "tocmap@example.com"

# Core classes and functions
from .core.heading import slugify, parse_heading_id, trimmed_title, split_heading
from .core.remap import TOCRemapper, parse_item, remap_table_of_contents
from .core.style import OUTER_LIST_PROPS, outer_list_props
from .core.config import Config, validate_config

# Data models
from .models.toc import HeadingNode, TOCItem

# Errors
from .errors import TOCError, TOCInputError

# Utilities
from .utils.format import (
    toc_to_dicts,
    format_toc_markdown,
    format_toc_tree,
    count_items,
    max_depth,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Core functions
    "slugify",
    "parse_heading_id",
    "trimmed_title",
    "split_heading",
    "TOCRemapper",
    "parse_item",
    "remap_table_of_contents",
    # Style
    "OUTER_LIST_PROPS",
    "outer_list_props",
    # Config
    "Config",
    "validate_config",
    # Data models
    "HeadingNode",
    "TOCItem",
    # Errors
    "TOCError",
    "TOCInputError",
    # Utilities
    "toc_to_dicts",
    "format_toc_markdown",
    "format_toc_tree",
    "count_items",
    "max_depth",
]
