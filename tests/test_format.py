"""Tests for ToC formatting helpers and style props."""

import pytest

from tocmap import TOCItem, OUTER_LIST_PROPS, outer_list_props
from tocmap.utils.format import (
    toc_to_dicts,
    format_toc_markdown,
    format_toc_tree,
    count_items,
    max_depth,
)

MEDIA_KEY = "@media (max-width: var(--eth-breakpoints-lg))"


@pytest.fixture
def items():
    return [
        TOCItem(
            title="Intro",
            url="#intro",
            items=[
                TOCItem(title="Setup", url="#setup"),
                TOCItem(
                    title="Usage",
                    url="#usage",
                    items=[TOCItem(title="CLI", url="#cli")],
                ),
            ],
        ),
        TOCItem(title="FAQ", url="#faq"),
    ]


def test_toc_to_dicts(items):
    assert toc_to_dicts(items)[1] == {"title": "FAQ", "url": "#faq"}
    assert toc_to_dicts(items)[0]["items"][1]["items"] == [
        {"title": "CLI", "url": "#cli"}
    ]


def test_format_toc_markdown(items):
    assert format_toc_markdown(items) == "\n".join(
        [
            "- [Intro](#intro)",
            "  - [Setup](#setup)",
            "  - [Usage](#usage)",
            "    - [CLI](#cli)",
            "- [FAQ](#faq)",
        ]
    )


def test_format_toc_tree(items):
    assert format_toc_tree(items) == "\n".join(
        [
            "├─ Intro (#intro)",
            "│  ├─ Setup (#setup)",
            "│  └─ Usage (#usage)",
            "│     └─ CLI (#cli)",
            "└─ FAQ (#faq)",
        ]
    )


def test_format_empty():
    assert format_toc_markdown([]) == ""
    assert format_toc_tree([]) == "TOC 항목 없음"


def test_tree_statistics(items):
    assert count_items(items) == 5
    assert max_depth(items) == 3
    assert count_items([]) == 0
    assert max_depth([]) == 0


def test_outer_list_props_is_read_only():
    assert OUTER_LIST_PROPS["borderStart"] == "1px solid"
    assert OUTER_LIST_PROPS["sx"][MEDIA_KEY]["pt"] == 4
    with pytest.raises(TypeError):
        OUTER_LIST_PROPS["m"] = 1
    with pytest.raises(TypeError):
        OUTER_LIST_PROPS["sx"][MEDIA_KEY]["ps"] = 2


def test_outer_list_props_copy_is_independent():
    props = outer_list_props()
    props["sx"][MEDIA_KEY]["ps"] = 2
    assert OUTER_LIST_PROPS["sx"][MEDIA_KEY]["ps"] == 0
    assert outer_list_props()["sx"][MEDIA_KEY]["ps"] == 0
