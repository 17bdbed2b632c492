"""Core functionality for tocmap package."""

from .heading import slugify, parse_heading_id, trimmed_title, split_heading
from .remap import TOCRemapper, parse_item, remap_table_of_contents, H1_PATTERN
from .style import OUTER_LIST_PROPS, outer_list_props
from .config import Config, validate_config

__all__ = [
    "slugify",
    "parse_heading_id",
    "trimmed_title",
    "split_heading",
    "TOCRemapper",
    "parse_item",
    "remap_table_of_contents",
    "H1_PATTERN",
    "OUTER_LIST_PROPS",
    "outer_list_props",
    "Config",
    "validate_config",
]
