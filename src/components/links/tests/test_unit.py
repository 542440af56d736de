"""
Links component unit tests.

Tests for field validation, independent of any service or store.
"""

from __future__ import annotations

import re

import pytest

from src.components.links import URL_PATTERN, validate_link_data, validate_url
from src.domain.entities import CustomIcon, PredefinedIcon


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.com", True),
        ("http://a.b", True),
        ("  https://example.com  ", True),
        ("ftp://example.com", False),
        ("https://localhost", False),
        ("example.com", False),
        ("", False),
        (None, False),
    ],
)
def test_validate_url(url, expected):
    assert validate_url(url) is expected


def test_validate_url_custom_pattern():
    only_https = re.compile(r"^https://.+\..+")

    assert validate_url("https://a.com", only_https)
    assert not validate_url("http://a.com", only_https)


def test_omitted_fields_are_not_checked():
    assert validate_link_data() == []


def test_title_boundaries():
    assert validate_link_data(title="a" * 100) == []
    assert validate_link_data(title="a" * 101)[0].code == "title_too_long"
    assert validate_link_data(title=" \t ")[0].code == "title_required"


def test_title_limit_is_configurable():
    errors = validate_link_data(title="abcdef", title_max_length=5)

    assert errors[0].message == "Title must be 5 characters or less"


def test_icon_checks():
    assert validate_link_data(icon=PredefinedIcon(name="coffee")) == []
    assert validate_link_data(icon=PredefinedIcon(name="unicorn"))[0].code == "icon_unknown"
    assert validate_link_data(icon=CustomIcon(url="ftp://x.com/i.png"))[0].code == (
        "icon_url_invalid"
    )


def test_default_pattern_is_http_or_https():
    assert URL_PATTERN.pattern == r"^https?://.+\..+"


def test_icon_names_accepts_any_collection():
    assert validate_link_data(icon=PredefinedIcon(name="rocket"), icon_names=["rocket"]) == []
    assert validate_link_data(icon=PredefinedIcon(name="globe"), icon_names=("rocket",))
