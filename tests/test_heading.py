"""Tests for heading id and title parsing."""

import pytest

from tocmap.core.heading import slugify, parse_heading_id, trimmed_title, split_heading


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", "hello-world"),
        ("  Padded   heading  ", "padded-heading"),
        ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ("What is Ether?", "what-is-ether%3F"),
        ("Don't (panic)!", "don't-(panic)!"),
        ("Café", "caf%C3%A9"),
        ("", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_heading_id_without_custom_id_is_slug():
    assert parse_heading_id("Hello World") == "hello-world"


def test_heading_id_uses_custom_id_verbatim():
    assert parse_heading_id("A note on names {#a-note-on-names}") == "a-note-on-names"


def test_custom_id_is_lowercased_but_not_slugified():
    assert parse_heading_id("Intro {#My Custom_ID}") == "my custom_id"


def test_custom_id_allows_trailing_whitespace():
    assert parse_heading_id("Intro {#intro}   ") == "intro"


def test_malformed_custom_id_falls_back_to_slug():
    assert parse_heading_id("Broken {#id") == "broken-%7B%23id"
    assert parse_heading_id("{#only-id}") == "%7B%23only-id%7D"


def test_title_without_decoration_is_unchanged():
    assert trimmed_title("Hello World") == "Hello World"


def test_title_custom_id_removed_and_trimmed():
    assert trimmed_title("A note on names {#a-note-on-names}") == "A note on names"


def test_title_emoji_removed_without_retrim():
    assert trimmed_title('Wallets <Emoji name="wallet"/>') == "Wallets "


def test_title_all_emoji_removed():
    title = '<Emoji text=":wave:"/> Hi <Emoji text=":tada:"/> there'
    assert trimmed_title(title) == " Hi  there"


def test_title_custom_id_and_emoji():
    title = 'Staking <Emoji text=":rocket:"/> {#staking}'
    assert trimmed_title(title) == "Staking "
    assert parse_heading_id(title) == "staking"


@pytest.mark.parametrize(
    "title", ["Hello World", "A note on names", "Wallets ", "  spaced  "]
)
def test_trimmed_title_idempotent(title):
    once = trimmed_title(title)
    assert trimmed_title(once) == once


def test_split_heading():
    assert split_heading("A note on names {#a-note-on-names}") == (
        "A note on names",
        "a-note-on-names",
    )
